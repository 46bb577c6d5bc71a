# tests/conftest.py
import pytest
import sys
import os

# Add the parent directory to the system path to ensure correct module import
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from chained_hashmap.utils.data_structures.hash_table import HashTable

# Number of entries used by the bulk scenarios
COUNT_OBJECTS = 100000


class CollidingKey:
    """
    Test key with a caller-chosen hash, used to force several keys into one bucket.
    """

    def __init__(self, name: str, hash_value: int):
        self.name = name
        self.hash_value = hash_value

    def __hash__(self) -> int:
        return self.hash_value

    def __eq__(self, other) -> bool:
        return isinstance(other, CollidingKey) and self.name == other.name

    def __repr__(self) -> str:
        return f"CollidingKey({self.name!r}, {self.hash_value})"


@pytest.fixture
def table():
    """
    An empty table with default capacity and load factor.
    """
    return HashTable()


@pytest.fixture
def populated_table():
    """
    A default table holding "key0".."key99999" mapped to "value0".."value99999".
    """
    hash_table = HashTable()
    for i in range(COUNT_OBJECTS):
        hash_table.put(f"key{i}", f"value{i}")
    return hash_table
