# Unbalanced binary search tree that keeps duplicates and supports
# insert, lookup, clear and ordered iteration.

import logging
import weakref

from inorder_iterator import InOrderIterator


logger = logging.getLogger(__name__)


class Node:

    def __init__(self, value, parent=None):
        self.value = value
        self.left = None
        self.right = None
        self.parent = parent

    @property
    def parent(self):
        return self._parent() if self._parent is not None else None

    @parent.setter
    def parent(self, node):
        # back reference only, children are owned through left/right
        self._parent = weakref.ref(node) if node is not None else None

    def __repr__(self):
        return f'Node({self.value!r})'


class OrderedTree:
    """Binary search tree ordered by ``<``.

    Values that compare equal to an existing node go to its right subtree,
    so duplicates are kept and iterate in insertion order. No rebalancing is
    done; inserting sorted input gives a tree as deep as it is long.

    The tree must not be changed while one of its iterators is in use. Doing
    so makes the iterator raise ``TreeModifiedError``.
    """

    def __init__(self, values=()):
        self._root = None
        self._size = 0
        self.mod_count = 0
        for value in values:
            self.insert(value)

    @property
    def root(self):
        return self._root

    def is_empty(self) -> bool:
        return self._root is None

    def insert(self, value):
        node = Node(value)
        parent = None
        current = self._root
        while current is not None:
            parent = current
            current = current.left if value < current.value else current.right

        if parent is None:
            self._root = node
        elif value < parent.value:
            parent.left = node
        else:
            parent.right = node
        node.parent = parent

        self._size += 1
        self.mod_count += 1
        return node

    def find(self, value):
        current = self._root
        while current is not None:
            if value < current.value:
                current = current.left
            elif current.value < value:
                current = current.right
            else:
                # neither is less, so equivalent under the ordering insert uses
                return current
        return None

    def clear(self):
        if self.is_empty():
            return

        released = 0
        stack = [self._root]
        while stack:
            node = stack.pop()
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
            node.left = node.right = node.parent = None
            released += 1

        logger.debug('cleared tree, released %d nodes', released)
        self._root = None
        self._size = 0
        self.mod_count += 1

    def create_iterator(self) -> InOrderIterator:
        return InOrderIterator(self, self._root)

    def begin(self) -> InOrderIterator:
        return self.create_iterator()

    def end(self) -> InOrderIterator:
        return InOrderIterator(self, None)

    def __iter__(self):
        return self.create_iterator()

    def __len__(self):
        return self._size

    def __contains__(self, value):
        return self.find(value) is not None

    def __repr__(self):
        return f'OrderedTree([{", ".join(repr(value) for value in self)}])'


def format_tree(tree: OrderedTree, sep=', '):
    return sep.join(str(value) for value in tree.create_iterator())
