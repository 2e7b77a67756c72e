"""
Ropes exceptions.

Extraction misses are not exceptions; they are logged by the data object.
These are raised for programming errors in declarations and lookups.
"""


class RopesError(Exception):
    """Base exception for Ropes"""
    pass

class SchemaError(RopesError, ValueError):
    """Raised when a field specification list is invalid"""
    pass

class UnknownDataObjectError(RopesError, KeyError):
    """Raised when a registry lookup names a data object that was never registered"""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self):
        return f"No data object registered under '{self.name}'"

class DuplicateDataObjectError(RopesError, ValueError):
    """Raised when a name is registered twice"""
    pass
