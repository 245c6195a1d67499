"""Type definitions for hooklist."""

from collections.abc import Callable
from typing import Any, Literal, TypeAlias, TypeVar

# Value type held by list nodes
T = TypeVar("T")

# Traversal direction for iterators
Direction: TypeAlias = Literal["head", "tail"]

START_HEAD: Direction = "head"
START_TAIL: Direction = "tail"

# Value hooks
DupMethod: TypeAlias = Callable[[Any], Any]
FreeMethod: TypeAlias = Callable[[Any], None]
MatchMethod: TypeAlias = Callable[[Any, Any], bool]
