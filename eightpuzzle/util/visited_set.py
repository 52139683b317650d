"""
pyeightpuzzle - Solve 8-puzzle with Python

Open addressing hash set of encoded boards

Version : 1.0.0
Author : Hamidreza Mahdavipanah
Repository: http://github.com/mahdavipanah/pynpuzzle
License : MIT License
"""
import math

DEFAULT_CAPACITY = 1000
DEFAULT_LOAD_FACTOR = 0.7

# Slot states
EMPTY = 0
OCCUPIED = 1
DELETED = 2


def is_prime(n):
    if n <= 1:
        return False
    # Iterate from 2 to sqrt(n)
    for i in range(2, math.isqrt(n) + 1):
        if n % i == 0:
            return False
    return True


def next_prime(n):
    """
    Returns the smallest prime number which is not less than n.
    """
    i = max(n, 2)
    while not is_prime(i):
        i += 1
    return i


def probe(capacity, key, i):
    # Linear probe
    return (key + i) % capacity


class VisitedSet:
    """
    A hash set of non-negative integer keys using linear probing.

    Each slot has it's own state so no key value is reserved as a marker.
    """

    def __init__(self, capacity=DEFAULT_CAPACITY, load_factor_threshold=DEFAULT_LOAD_FACTOR):
        if not 0 < load_factor_threshold < 1:
            raise ValueError("Load factor threshold must be between 0 and 1.")

        self.load_factor_threshold = load_factor_threshold
        self._capacity = next_prime(capacity)
        self._keys = [0] * self._capacity
        self._states = bytearray(self._capacity)
        self._size = 0
        self._deleted = 0

    def __len__(self):
        return self._size

    @property
    def capacity(self):
        return self._capacity

    @property
    def load_factor(self):
        return self._size / self._capacity

    def _find(self, key):
        """
        Returns (slot of key or None, first reusable slot on key's probe sequence).
        """
        reusable = None
        for i in range(self._capacity):
            p = probe(self._capacity, key, i)
            state = self._states[p]
            if state == EMPTY:
                return None, p if reusable is None else reusable
            if state == DELETED:
                if reusable is None:
                    reusable = p
            elif self._keys[p] == key:
                return p, reusable
        return None, reusable

    def _place(self, key, slot):
        if self._states[slot] == DELETED:
            self._deleted -= 1
        self._keys[slot] = key
        self._states[slot] = OCCUPIED
        self._size += 1

    def rehash(self):
        # Keep references to old structures before creating new structures
        old_keys = self._keys
        old_states = self._states

        self._capacity = next_prime(self._capacity * 2)
        self._keys = [0] * self._capacity
        self._states = bytearray(self._capacity)
        self._size = 0
        self._deleted = 0

        # Add all keys from the old table to the new one
        for key, state in zip(old_keys, old_states):
            if state == OCCUPIED:
                self._place(key, self._find(key)[1])

    def add(self, key):
        """
        Inserts key. Returns False if key was already in the set.

        The table is rehashed first when (size + tombstones + 1) / capacity would exceed
        load_factor_threshold, so at least one slot always stays empty.
        """
        slot, reusable = self._find(key)
        if slot is not None:
            return False

        # Rehash when load factor (tombstones included) would exceed threshold
        if (self._size + self._deleted + 1) / self._capacity > self.load_factor_threshold:
            self.rehash()
            reusable = self._find(key)[1]

        self._place(key, reusable)
        return True

    def discard(self, key):
        slot = self._find(key)[0]
        if slot is None:
            return False
        self._states[slot] = DELETED
        self._size -= 1
        self._deleted += 1
        return True

    def __contains__(self, key):
        return self._find(key)[0] is not None

    def __iter__(self):
        for key, state in zip(self._keys, self._states):
            if state == OCCUPIED:
                yield key
