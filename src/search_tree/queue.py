"""FIFO scratch container backed by a growable ring buffer.

Dequeued slots are reset to None so the buffer never holds on to nodes that
have already been visited.
"""

from .errors import EmptyContainerError

_INITIAL_CAPACITY = 4


class Queue:
    def __init__(self):
        self._slots = [None] * _INITIAL_CAPACITY
        self._front = 0
        self._count = 0

    def enqueue(self, value):
        if self._count == len(self._slots):
            self._resize(2 * len(self._slots))
        rear = (self._front + self._count) % len(self._slots)
        self._slots[rear] = value
        self._count += 1

    def dequeue(self):
        if self._count == 0:
            raise EmptyContainerError("dequeue from empty queue")
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._front = (self._front + 1) % len(self._slots)
        self._count -= 1
        return value

    def peek(self):
        if self._count == 0:
            return None
        return self._slots[self._front]

    def size(self):
        return self._count

    def is_empty(self):
        return self._count == 0

    def clear(self):
        self._slots = [None] * _INITIAL_CAPACITY
        self._front = 0
        self._count = 0

    def _resize(self, capacity):
        capacity_before = len(self._slots)
        self._slots = [
            self._slots[(self._front + i) % capacity_before] for i in range(self._count)
        ] + [None] * (capacity - self._count)
        self._front = 0

    def __len__(self):
        return self._count

    def __bool__(self):
        return self._count > 0
