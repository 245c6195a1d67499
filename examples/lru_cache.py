"""Small LRU cache built on hooklist, showing the value hooks."""

from dataclasses import dataclass
from typing import Any

from hooklist import DoublyLinkedList, Node, ValueHooks


@dataclass
class Entry:
    key: str
    payload: Any


class LRUCache:
    """Most recently used entries live at the head of the list."""

    def __init__(self, capacity: int) -> None:
        self._capacity = capacity
        self._index: dict[str, Node[Entry]] = {}
        self._entries = DoublyLinkedList[Entry](
            ValueHooks(
                free=lambda entry: print(f"  evicted {entry.key}"),
                match=lambda entry, key: entry.key == key,
            )
        )

    def get(self, key: str) -> Any:
        node = self._index.get(key)
        if node is None:
            return None
        entry = self._entries.unlink_node(node).value
        self._index[key] = self._entries.add_head(entry)
        return entry.payload

    def put(self, key: str, payload: Any) -> None:
        node = self._index.pop(key, None)
        if node is not None:
            self._entries.unlink_node(node)
        self._index[key] = self._entries.add_head(Entry(key, payload))
        if len(self._entries) > self._capacity:
            tail = self._entries.tail
            assert tail is not None
            del self._index[tail.value.key]
            self._entries.delete_node(tail)

    def keys(self) -> list[str]:
        return [entry.key for entry in self._entries]


def main() -> None:
    cache = LRUCache(capacity=2)
    cache.put("a", 1)
    cache.put("b", 2)
    cache.get("a")
    cache.put("c", 3)
    print(f"Keys: {cache.keys()}")
    print(f"Lookup b via match hook: {cache._entries.search('b')}")


if __name__ == "__main__":
    main()
