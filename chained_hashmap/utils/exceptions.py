class HashTableError(ValueError):
    """
    Base exception for errors raised by the hash table package.
    """
    pass


class InvalidConfigurationError(HashTableError):
    """
    Custom exception raised when a hash table is constructed with a capacity or load factor outside its valid range.
    """
    def __init__(self, parameter_name, parameter_value, reason):
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value
        message = f"Invalid {parameter_name}: {parameter_value!r} ({reason})"
        super().__init__(message)
