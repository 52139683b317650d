"""
pyeightpuzzle - Solve 8-puzzle with Python

Array backed d-ary min-heap

Version : 1.0.0
Author : Hamidreza Mahdavipanah
Repository: http://github.com/mahdavipanah/pynpuzzle
License : MIT License
"""

# Number of slots the heap starts with
DEFAULT_CAPACITY = 1000


class PriorityQueue:
    """
    A d-ary min-heap ordered by key(item).

    The backing list doubles whenever a push finds it full, it never shrinks.
    """

    def __init__(self, key=None, arity=2, capacity=DEFAULT_CAPACITY):
        if arity < 2:
            raise ValueError("Heap arity must be at least 2.")
        if capacity < 1:
            raise ValueError("Heap capacity must be positive.")

        self.key = key if key is not None else (lambda item: item)
        self.arity = arity
        self._heap = [None] * capacity
        self._size = 0

    def __len__(self):
        return self._size

    def __bool__(self):
        return self._size > 0

    @property
    def capacity(self):
        return len(self._heap)

    def _ensure_capacity(self):
        if self._size >= len(self._heap):
            self._heap.extend([None] * len(self._heap))

    def _parent(self, pos):
        return (pos - 1) // self.arity

    def push(self, item):
        self._ensure_capacity()
        heap = self._heap
        key = self.key

        # Add element to end of heap and sift it up
        pos = self._size
        heap[pos] = item
        self._size += 1
        item_key = key(item)
        while pos > 0:
            parent = self._parent(pos)
            if key(heap[parent]) > item_key:
                heap[pos] = heap[parent]
                pos = parent
            else:
                break
        heap[pos] = item

    def peek(self):
        if not self._size:
            raise IndexError("peek from an empty priority queue")
        return self._heap[0]

    def pop_min(self):
        if not self._size:
            raise IndexError("pop from an empty priority queue")

        heap = self._heap
        key = self.key
        top = heap[0]

        # Move the bottom element to the top
        self._size -= 1
        last = heap[self._size]
        heap[self._size] = None
        if not self._size:
            return top

        # Sift it down, always towards the smallest child
        pos = 0
        last_key = key(last)
        while True:
            first_child = pos * self.arity + 1
            if first_child >= self._size:
                break
            child = first_child
            child_key = key(heap[child])
            for other in range(first_child + 1, min(first_child + self.arity, self._size)):
                other_key = key(heap[other])
                if other_key < child_key:
                    child, child_key = other, other_key
            if child_key < last_key:
                heap[pos] = heap[child]
                pos = child
            else:
                break
        heap[pos] = last

        return top

    def items(self):
        """
        Returns heap's items in their array order.
        """
        return self._heap[:self._size]
