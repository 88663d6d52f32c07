# External in-order iterator over an OrderedTree.
# Keeps an explicit stack of pending ancestors so the walk can be resumed
# one element at a time.

import logging


logger = logging.getLogger(__name__)


class EmptyIteration(LookupError):
    """Raised when an exhausted iterator is advanced or dereferenced."""


class TreeModifiedError(RuntimeError):
    """Raised when the tree changed after the iterator was created."""


class InOrderIterator:

    def __init__(self, tree, start):
        self.tree = tree
        # ancestors whose value is still owed, nearest on top
        self.pending = []
        self._mod_count = tree.mod_count if tree is not None else 0
        self._push_left(start)
        self.current = self._pop_pending()
        logger.debug('created iterator, start=%r', start)

    def has_more(self) -> bool:
        return self.current is not None or bool(self.pending)

    def advance(self):
        if not self.has_more():
            raise EmptyIteration('iterator is exhausted')
        self._check_unmodified()
        if self.current is None:
            self.current = self._pop_pending()

        node = self.current
        self._push_left(node.right)
        # resolve the cursor now so has_more() never has to
        self.current = self._pop_pending()
        return node.value

    def _push_left(self, node):
        while node is not None:
            self.pending.append(node)
            node = node.left

    def _pop_pending(self):
        return self.pending.pop() if self.pending else None

    # cursor form: it = tree.begin(); while it != tree.end(): it.value; it.step()

    @property
    def value(self):
        if self.current is None:
            raise EmptyIteration('cannot dereference an exhausted iterator')
        self._check_unmodified()
        return self.current.value

    def step(self):
        self.advance()
        return self

    def __eq__(self, other):
        if not isinstance(other, InOrderIterator):
            return NotImplemented
        if self.current is not other.current:
            return False
        if len(self.pending) != len(other.pending):
            return False
        return all(a is b for a, b in zip(self.pending, other.pending))

    def __iter__(self):
        return self

    def __next__(self):
        try:
            return self.advance()
        except EmptyIteration:
            raise StopIteration from None

    def _check_unmodified(self):
        if self.tree is not None and self.tree.mod_count != self._mod_count:
            raise TreeModifiedError('tree was modified during iteration')

    def __repr__(self):
        state = 'exhausted' if self.current is None else f'at {self.current.value!r}'
        return f'<InOrderIterator {state}, {len(self.pending)} pending>'
