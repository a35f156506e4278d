"""
Document store errors.
"""


class StoreError(Exception):
    """Base class for failures raised at the document store boundary."""


class StorageUnavailableError(StoreError):
    """The store could not serve a read or write (network, auth, quota)."""
    
    def __init__(self, operation: str, collection: str, message: str = ""):
        self.operation = operation
        self.collection = collection
        detail = f"{operation} on '{collection}' failed"
        if message:
            detail = f"{detail}: {message}"
        super().__init__(detail)


class UnsupportedQueryError(StoreError):
    """The store cannot serve the requested query shape (e.g. missing index for ordering)."""


class DocumentNotFoundError(Exception):
    """A document addressed by key does not exist."""
    
    def __init__(self, collection: str, key: str):
        self.collection = collection
        self.key = key
        super().__init__(f"No document '{key}' in '{collection}'")
