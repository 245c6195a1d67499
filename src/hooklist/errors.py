"""Exception classes for hooklist."""


class HookListError(Exception):
    """Base exception for all hooklist errors."""


class AllocationError(HookListError, MemoryError):
    """Raised when storage for a list, node or iterator cannot be obtained."""


class ListReleasedError(HookListError):
    """Raised when an operation is attempted on a list that was released."""
