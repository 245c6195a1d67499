"""Value hook configuration."""

from dataclasses import dataclass, replace
from typing import Any

from hooklist.types import DupMethod, FreeMethod, MatchMethod


@dataclass(frozen=True)
class ValueHooks:
    """Immutable set of the three optional value behaviours of a list.

    Attributes:
        dup: Returns an independent copy of a value. When unset, duplicating
            a list shares the value references.
        free: Releases a value when its node leaves the list. When unset,
            values are left to the caller.
        match: Compares a stored value with a search key. When unset,
            search compares by identity.
    """

    dup: DupMethod | None = None
    free: FreeMethod | None = None
    match: MatchMethod | None = None

    @classmethod
    def default(cls) -> "ValueHooks":
        """Return hooks with every behaviour unset."""
        return cls()

    def with_dup(self, dup: DupMethod | None) -> "ValueHooks":
        return replace(self, dup=dup)

    def with_free(self, free: FreeMethod | None) -> "ValueHooks":
        return replace(self, free=free)

    def with_match(self, match: MatchMethod | None) -> "ValueHooks":
        return replace(self, match=match)

    def copy_value(self, value: Any) -> Any:
        """Copy a value through the dup hook, or share it."""
        if self.dup is None:
            return value
        return self.dup(value)

    def free_value(self, value: Any) -> None:
        """Release a value through the free hook, if any."""
        if self.free is not None:
            self.free(value)

    def matches(self, value: Any, key: Any) -> bool:
        """Check a value against a key through the match hook or identity."""
        if self.match is None:
            return value is key
        return bool(self.match(value, key))
