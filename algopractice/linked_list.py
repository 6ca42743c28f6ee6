"""A singly linked list of values addressed through positions, with a header node."""


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value=None, next_node=None):
        self.value = value
        self.next = next_node


class LinkedList:
    """Singly linked list with a header node.

    A position refers to the element that follows it: ``first()`` is the
    position of the first element and ``last()`` is the position just past
    the final element, where new values are appended.
    """

    def __init__(self, values=()):
        self._head = _Node()
        self._last = self._head
        self._size = 0
        for value in values:
            self.insert(self._last, value)

    def first(self):
        """Return the position of the first element."""
        return self._head

    def last(self):
        """Return the position after the final element."""
        return self._last

    def next(self, position):
        """Return the position following ``position``."""
        if position.next is None:
            raise IndexError("no position after the end of the list")
        return position.next

    def get(self, position):
        """Return the value stored at ``position``."""
        if position.next is None:
            raise IndexError("no element at the end position")
        return position.next.value

    def insert(self, position, value):
        """Insert ``value`` at ``position``, shifting later elements back."""
        node = _Node(value, position.next)
        position.next = node
        if position is self._last:
            self._last = node
        self._size += 1

    def delete(self, position):
        """Remove the element at ``position``."""
        target = position.next
        if target is None:
            raise IndexError("no element at the end position")
        if target is self._last:
            self._last = position
        position.next = target.next
        self._size -= 1

    def is_empty(self):
        """Return True when the list holds no elements."""
        return self._head.next is None

    def __len__(self):
        return self._size

    def __iter__(self):
        node = self._head.next
        while node is not None:
            yield node.value
            node = node.next