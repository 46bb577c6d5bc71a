"""
hash_table.py

This module provides a HashTable class: a generic key-value container built on a
fixed-size list of buckets, where each bucket holds the head of a singly linked
chain of Entry nodes. Collisions are resolved by chaining; the bucket list grows
geometrically when the number of live entries reaches the configured load factor.

Key Classes and Functionality:

1. Entry:
   - A chain node holding an immutable key, a mutable value and a link to the
     next node in the same bucket.

2. HashTable:
   - Computes bucket indices as abs(hash(key)) % capacity, with no secondary
     mixing, so a poor key hash degrades directly into long chains.
   - Supports put/get/remove, key and value membership tests, and fresh
     key/value/entry views built by scanning every chain on each call.
   - Doubles its bucket count (stop-the-world rehash) before an insertion once
     size >= capacity * load_factor.

Notes on Key Equality:
- put() and remove() treat two keys as equal only when their hashes match AND
  they compare equal with ==.
- get() and contains_key() compare keys with == alone. For well-behaved keys
  (equal objects have equal hashes) the two rules agree; the difference is only
  observable with keys that violate the hash/eq contract.

Notes on Iteration:
- No ordering is guaranteed; views reflect bucket order, which changes on resize.
- The table is not thread-safe and must not be mutated while being iterated.
"""
import logging
from pathlib import Path
from typing import Any, Iterator, List, Optional, Set, Tuple, Union

from chained_hashmap.config.table_config import (
    DEFAULT_CAPACITY,
    DEFAULT_LOAD_FACTOR,
    MULTIPLIER,
    TableSettings,
)
from chained_hashmap.utils import config_utils
from chained_hashmap.utils.data_structures.associative_map import AssociativeMap, K, MapEntry, V

logger = logging.getLogger(__name__)  # Initialize logger for module


class Entry(MapEntry[K, V]):
    """
    A node in a bucket chain.

    Attributes:
        key (K): The entry's key, fixed at creation.
        value (V): The value stored under the key; replaced in place on overwrite.
        next (Optional[Entry]): The following node in the same bucket, or None.
    """

    def __init__(self, key: K, value: V, next: Optional["Entry[K, V]"] = None):
        self._key = key
        self._value = value
        self._next = next

    @property
    def key(self) -> K:
        return self._key

    @property
    def value(self) -> V:
        return self._value

    @value.setter
    def value(self, value: V) -> None:
        self._value = value

    @property
    def next(self) -> Optional["Entry[K, V]"]:
        return self._next

    @next.setter
    def next(self, entry: Optional["Entry[K, V]"]) -> None:
        self._next = entry

    def __repr__(self) -> str:
        return f"Entry(key={self._key!r}, value={self._value!r})"


class HashTable(AssociativeMap[K, V]):
    """
    A chained hash table mapping hashable keys to arbitrary values.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY, load_factor: float = DEFAULT_LOAD_FACTOR):
        """
        Initialize an empty table.

        Args:
            capacity (int): Initial number of buckets (default 16).
            load_factor (float): Occupancy threshold in (0, 1] that triggers growth (default 0.75).

        Raises:
            InvalidConfigurationError: If capacity <= 0 or load_factor is outside (0, 1].
        """
        # Validate before allocating anything so no partial table is ever produced
        settings = TableSettings(capacity=capacity, load_factor=load_factor).validate()

        # Set the load factor threshold for when to resize
        self._load_factor = settings.load_factor

        # Each slot holds the head of a chain, or None for an empty bucket
        self._buckets: List[Optional[Entry[K, V]]] = [None] * settings.capacity

        # Track the number of live entries (not the number of occupied buckets)
        self._size = 0

        logger.debug(f"Created HashTable with capacity {settings.capacity} and load factor {settings.load_factor}")

    @classmethod
    def from_settings(cls, settings: TableSettings) -> "HashTable[K, V]":
        """
        Build an empty table from a TableSettings object.
        """
        return cls(capacity=settings.capacity, load_factor=settings.load_factor)

    @classmethod
    def from_config(cls, config_file_path: Optional[Union[str, Path]] = None) -> "HashTable[K, V]":
        """
        Build an empty table from the 'hash_table' section of a YAML configuration file.

        Args:
            config_file_path (Optional[Union[str, Path]]): Path to the YAML file. Uses the packaged defaults when None.

        Returns:
            HashTable: A new, empty table sized according to the file.
        """
        return cls.from_settings(config_utils.load_table_settings(config_file_path))

    @property
    def capacity(self) -> int:
        """Current number of buckets."""
        return len(self._buckets)

    @property
    def load_factor(self) -> float:
        return self._load_factor

    def _index(self, key: K) -> int:
        # The key's own hash, no secondary mixing
        return abs(hash(key)) % len(self._buckets)

    @staticmethod
    def _keys_equal(first: K, second: K) -> bool:
        # Hash comparison first, then natural equality
        return hash(first) == hash(second) and first == second

    def put(self, key: K, value: V) -> None:
        """
        Insert or update the value associated with the key.

        If the number of live entries has reached capacity * load_factor the bucket
        list is doubled first, so the new entry is placed using the new capacity.

        Args:
            key (K): The key to associate with the value.
            value (V): The value to store.
        """
        # Grow before computing the index
        if self._size >= len(self._buckets) * self._load_factor:
            self._increase_array()

        self._insert(key, value)

    def _insert(self, key: K, value: V) -> None:
        """
        Place a key-value pair into its bucket chain without checking the load factor.
        """
        index = self._index(key)
        current = self._buckets[index]

        # Empty bucket: the new entry becomes the chain head
        if current is None:
            self._buckets[index] = Entry(key, value)
            self._size += 1
            return

        # Walk every node, tail included, looking for an existing key
        while True:
            if self._keys_equal(key, current.key):
                # Overwrite in place; placement and size are unchanged
                current.value = value
                return
            if current.next is None:
                break
            current = current.next

        # No match anywhere in the chain: append after the tail
        current.next = Entry(key, value)
        self._size += 1

    def _find(self, key: K) -> Optional[Entry[K, V]]:
        # Lookup walk; matches on == alone
        current = self._buckets[self._index(key)]
        while current is not None:
            if current.key == key:
                return current
            current = current.next
        return None

    def get(self, key: K, default: Any = None) -> Any:
        """
        Retrieve the value associated with the key.

        Args:
            key (K): The key to look up.
            default (Any): Value returned when the key is absent (None unless given).

        Returns:
            The stored value, or default if the key is not present.
        """
        entry = self._find(key)
        return default if entry is None else entry.value

    def remove(self, key: K) -> bool:
        """
        Remove the key-value pair from the table.

        Args:
            key (K): The key to remove.

        Returns:
            bool: True if the key was present and has been removed, False otherwise.
        """
        index = self._index(key)
        current = self._buckets[index]
        previous: Optional[Entry[K, V]] = None

        while current is not None:
            if self._keys_equal(current.key, key):
                # Unlink from the chain head or from the preceding node
                if previous is None:
                    self._buckets[index] = current.next
                else:
                    previous.next = current.next
                self._size -= 1
                return True
            previous = current
            current = current.next

        return False

    def contains_key(self, key: K) -> bool:
        return self._find(key) is not None

    def contains_value(self, value: Any) -> bool:
        """
        Check whether any live entry holds a value equal to the given one.

        This is a full scan of every chain and runs in O(capacity + size).
        """
        return any(entry.value == value for entry in self._iter_entries())

    def is_empty(self) -> bool:
        return self._size <= 0

    def key_set(self) -> Set[K]:
        """
        Return a new set of all keys currently stored.
        """
        return {entry.key for entry in self._iter_entries()}

    def values(self) -> List[V]:
        """
        Return a new list of all values currently stored; duplicates are kept.
        """
        return [entry.value for entry in self._iter_entries()]

    def entry_set(self) -> Set[Entry[K, V]]:
        """
        Return a new set of the live Entry nodes.

        The entries are the table's own nodes, so their values reflect later
        overwrites until the entry is removed or the table is resized or cleared.
        """
        return set(self._iter_entries())

    def items(self) -> Iterator[Tuple[K, V]]:
        """
        Yield (key, value) pairs in bucket order.
        """
        for entry in self._iter_entries():
            yield entry.key, entry.value

    def clear(self) -> None:
        """
        Discard all entries and reset the bucket list to the default capacity.

        The load factor chosen at construction is kept; a custom capacity is not.
        """
        self._buckets = [None] * DEFAULT_CAPACITY
        self._size = 0
        logger.debug(f"HashTable cleared; capacity reset to {DEFAULT_CAPACITY}")

    def size(self) -> int:
        return self._size

    def _iter_entries(self) -> Iterator[Entry[K, V]]:
        # Scan every bucket and follow each chain to its tail
        for head in self._buckets:
            current = head
            while current is not None:
                yield current
                current = current.next

    def _increase_array(self) -> None:
        """
        Resize the bucket list by MULTIPLIER and rehash every live entry into it.
        """
        # Snapshot the live entries before the old buckets are discarded
        entries = self.entry_set()

        old_capacity = len(self._buckets)
        new_capacity = old_capacity * MULTIPLIER
        logger.info(f"Resizing HashTable from capacity {old_capacity} to {new_capacity} ({self._size} entries)")

        self._buckets = [None] * new_capacity
        self._size = 0

        # Re-insert through the normal insertion path so every index is recomputed
        for entry in entries:
            self._insert(entry.key, entry.value)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return self.contains_key(key)

    def __getitem__(self, key: K) -> V:
        entry = self._find(key)
        if entry is None:
            raise KeyError(key)
        return entry.value

    def __setitem__(self, key: K, value: V) -> None:
        self.put(key, value)

    def __delitem__(self, key: K) -> None:
        if not self.remove(key):
            raise KeyError(key)

    def __iter__(self) -> Iterator[K]:
        for entry in self._iter_entries():
            yield entry.key

    def __repr__(self) -> str:
        pairs = ", ".join(f"{key!r}: {value!r}" for key, value in self.items())
        return f"{type(self).__name__}({{{pairs}}})"
