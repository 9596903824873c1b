"""Basic usage example for forwardlist."""

from forwardlist import SingleLinkedList, swap


def main() -> None:
    """Demonstrate basic list operations."""
    print("=== Building and Traversing ===\n")
    tasks = SingleLinkedList(["fetch", "parse", "store"])
    print(f"Tasks: {list(tasks)} (size {tasks.get_size()})")

    # Front operations
    tasks.push_front("connect")
    print(f"After push_front: {list(tasks)}")
    print(f"Popped: {tasks.pop_front()}\n")

    print("=== Positional Edits ===\n")
    # Insert after "parse"
    cursor = tasks.begin().advance()
    inserted = tasks.insert_after(cursor, "validate")
    print(f"Inserted {inserted.value!r}: {list(tasks)}")

    # before_begin() makes the front an ordinary position
    tasks.insert_after(tasks.before_begin(), "open")
    print(f"Inserted at front: {list(tasks)}")

    # Drop every entry that starts with a vowel, resuming from erase_after()
    prev = tasks.before_begin()
    current = tasks.begin()
    while current != tasks.end():
        if current.value[0] in "aeiou":
            current = tasks.erase_after(prev)
        else:
            prev = current
            current = current.advanced()
    print(f"Without vowel-initial entries: {list(tasks)}\n")

    print("=== Comparing and Swapping ===\n")
    a = SingleLinkedList([1, 2, 3])
    b = SingleLinkedList([1, 2, 3])
    print(f"a == b: {a == b}")
    a.push_front(0)
    print(f"a < b after push_front(0): {a < b}")

    head = a.begin()
    swap(a, b)
    print(f"After swap: a={list(a)}, b={list(b)}")
    print(f"Cursor taken from a now reads {head.value} from b's front")


if __name__ == "__main__":
    main()
