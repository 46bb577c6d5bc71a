# File: chained_hashmap/config/table_config.py
# This file defines the sizing defaults for the chained hash table and the immutable settings object
# that carries a capacity and load factor into a table at construction time.

import logging  # For reporting rejected configurations
from dataclasses import dataclass  # For the immutable settings container
from numbers import Real  # For accepting any real-valued load factor
from chained_hashmap.utils.exceptions import InvalidConfigurationError  # Raised for out-of-range settings

logger = logging.getLogger(__name__)  # Create a logger specific to this module

# Number of buckets allocated by a table constructed without arguments and after clear()
DEFAULT_CAPACITY = 16

# Fraction of capacity that live entries may occupy before the bucket array grows
DEFAULT_LOAD_FACTOR = 0.75

# Growth factor applied to the bucket count on every resize
MULTIPLIER = 2


@dataclass(frozen=True)
class TableSettings:
    """
    Sizing parameters for a HashTable.

    Attributes:
        capacity (int): Initial number of buckets; must be a positive integer.
        load_factor (float): Occupancy threshold in the range (0, 1] that triggers growth.
    """
    capacity: int = DEFAULT_CAPACITY
    load_factor: float = DEFAULT_LOAD_FACTOR

    def validate(self) -> "TableSettings":
        """
        Check both parameters and return the settings unchanged when they are valid.

        Raises:
            InvalidConfigurationError: If the load factor is outside (0, 1] or the capacity is not a positive integer.
        """
        # bool is an int subclass but never a meaningful size or ratio
        if isinstance(self.load_factor, bool) or not isinstance(self.load_factor, Real):
            logger.error(f"Rejected non-numeric load factor: {self.load_factor!r}")
            raise InvalidConfigurationError("load factor", self.load_factor, "must be a number")
        if not (0 < self.load_factor <= 1):
            logger.error(f"Rejected load factor outside (0, 1]: {self.load_factor!r}")
            raise InvalidConfigurationError("load factor", self.load_factor, "must be in the range (0, 1]")

        if isinstance(self.capacity, bool) or not isinstance(self.capacity, int):
            logger.error(f"Rejected non-integer capacity: {self.capacity!r}")
            raise InvalidConfigurationError("capacity", self.capacity, "must be an integer")
        if self.capacity <= 0:
            logger.error(f"Rejected non-positive capacity: {self.capacity!r}")
            raise InvalidConfigurationError("capacity", self.capacity, "must be greater than 0")

        return self
