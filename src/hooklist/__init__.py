"""hooklist - Generic doubly-linked list with pluggable value hooks and O(1) splicing."""

import logging

from hooklist.errors import AllocationError, HookListError, ListReleasedError
from hooklist.hooks import ValueHooks
from hooklist.iterator import ListIter
from hooklist.linkedlist import DoublyLinkedList, Node
from hooklist.types import START_HEAD, START_TAIL, Direction

__version__ = "0.0.1"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DoublyLinkedList",
    "Node",
    "ListIter",
    "ValueHooks",
    "HookListError",
    "AllocationError",
    "ListReleasedError",
    "Direction",
    "START_HEAD",
    "START_TAIL",
]
