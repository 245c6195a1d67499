"""Basic usage example for hooklist."""

from hooklist import START_TAIL, DoublyLinkedList


def main() -> None:
    """Demonstrate insertion, traversal and structural operations."""
    tasks = DoublyLinkedList[str]()

    print("=== Building a list ===\n")
    tasks.add_tail("parse")
    compile_node = tasks.add_tail("compile")
    tasks.add_head("fetch")
    tasks.insert(compile_node, "link", after=True)
    print(f"Tasks: {list(tasks)}")
    print(f"First: {tasks.index(0).value}, last: {tasks.index(-1).value}\n")

    print("=== Walking backward ===\n")
    it = tasks.get_iterator(START_TAIL)
    while (node := it.next()) is not None:
        print(f"  {node.value}")
    it.release()

    print("\n=== Round robin with rotate ===\n")
    for _ in range(len(tasks)):
        tasks.rotate()
        print(f"  {list(tasks)}")

    print("\n=== Joining a second batch ===\n")
    batch = DoublyLinkedList[str]()
    batch.add_tail("test")
    batch.add_tail("deploy")
    tasks.join(batch)
    print(f"Tasks: {list(tasks)}")
    print(f"Batch after join: {list(batch)}")

    tasks.release()


if __name__ == "__main__":
    main()
