import logging
import os
import sys

from avltree import AVLTree, BinarySearchTree, Entry
from avltree.interfaces import SortedContainer

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger()

DEMO_VALUES = [5, 3, 7, 10, 20]


def run(tree: SortedContainer, values: list[int], removed: int) -> None:
    for value in values:
        tree.insert(value)
    logger.info("%s after inserts %s: %s (height %d)",
                type(tree).__name__, values, tree.in_order_traversal(), tree.height())

    tree.remove(removed)
    logger.info("%s after removing %d: %s",
                type(tree).__name__, removed, tree.in_order_traversal())

    tree.validate()


def run_entries() -> None:
    tree = AVLTree()
    tree.insert(Entry.of("alice", 1))
    tree.insert(Entry.of("bob", 2))
    tree.insert(Entry.of("alice", 3))

    stored = tree.search(Entry.probe("alice"))
    logger.info("Entries: %d stored, alice -> %r", tree.size(), stored.data)


def main() -> None:
    run(AVLTree(), DEMO_VALUES, 3)
    run(BinarySearchTree(), DEMO_VALUES, 3)
    run_entries()

    if len(sys.argv) > 1:
        count = int(sys.argv[1])
        avl = AVLTree()
        for i in range(count):
            avl.insert(i)
        logger.info("AVLTree height after %d ascending inserts: %d", count, avl.height())


if __name__ == "__main__":
    main()
