"""
associative_map.py

Abstract contracts shared by the map implementations in this package.

MapEntry describes a single key-value node as exposed by a map's entry view,
and AssociativeMap describes the full set of operations a key-value container
must provide: insertion, lookup, removal, membership tests and bulk views.
Concrete implementations (see hash_table.py) inherit from AssociativeMap so that
missing operations are caught at instantiation time.
"""
from abc import ABC, abstractmethod  # For defining abstract base classes
from typing import Any, Generic, Hashable, List, Optional, Set, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class MapEntry(ABC, Generic[K, V]):
    """
    A key-value node exposed through AssociativeMap.entry_set().
    """

    @property
    @abstractmethod
    def key(self) -> K:
        """The entry's key; fixed for the lifetime of the entry."""
        pass

    @property
    @abstractmethod
    def value(self) -> V:
        """The value currently stored under the key."""
        pass

    @property
    @abstractmethod
    def next(self) -> Optional["MapEntry[K, V]"]:
        """The following entry in the same bucket chain, or None at the chain tail."""
        pass


class AssociativeMap(ABC, Generic[K, V]):
    """
    Abstract base class for a mapping from keys to values.
    """

    @abstractmethod
    def put(self, key: K, value: V) -> None:
        """
        Store value under key, replacing any value already stored for that key.
        """
        pass

    @abstractmethod
    def get(self, key: K, default: Any = None) -> Any:
        """
        Return the value stored under key, or default when the key is absent.
        """
        pass

    @abstractmethod
    def remove(self, key: K) -> bool:
        """
        Remove key and its value. Returns True if the key was present.
        """
        pass

    @abstractmethod
    def contains_key(self, key: K) -> bool:
        pass

    @abstractmethod
    def contains_value(self, value: Any) -> bool:
        pass

    @abstractmethod
    def is_empty(self) -> bool:
        pass

    @abstractmethod
    def key_set(self) -> Set[K]:
        pass

    @abstractmethod
    def values(self) -> List[V]:
        pass

    @abstractmethod
    def entry_set(self) -> Set[MapEntry[K, V]]:
        pass

    @abstractmethod
    def clear(self) -> None:
        pass

    @abstractmethod
    def size(self) -> int:
        pass
