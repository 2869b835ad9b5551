"""Basic usage example for ringqueue."""

import logging

from ringqueue import Queue


def main() -> None:
    """Demonstrate queue operations and transforms."""
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    queue = Queue()

    print("=== Insert and Remove ===\n")
    for word in ["gerbil", "bear", "dolphin", "bear", "meerkat"]:
        queue.insert_tail(word)
    queue.insert_head("zebra")
    print(f"Queue: {queue.values()} (size {queue.size()})")

    buf = bytearray(4)
    element = queue.remove_head(buf, len(buf))
    if element is not None:
        print(f"Removed {element.value!r}, buffer holds {bytes(buf)!r}")
        # Removed elements belong to the caller until released
        element.release()
    print()

    print("=== Transforms ===\n")
    queue.sort()
    print(f"Sorted:       {queue.values()}")
    queue.delete_dup()
    print(f"Deduplicated: {queue.values()}")
    queue.swap()
    print(f"Swapped:      {queue.values()}")
    queue.reverse()
    print(f"Reversed:     {queue.values()}")
    queue.delete_mid()
    print(f"Mid deleted:  {queue.values()}\n")

    queue.validate()
    queue.free()


if __name__ == "__main__":
    main()
