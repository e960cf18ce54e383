"""Fixed-capacity ring buffer used as a filter delay line.

The write cursor moves *backwards*: a value written at slot ``c`` is
followed in time by a value written at slot ``c - 1`` (mod capacity). Read
forward from the cursor, the buffer therefore lists samples from newest to
oldest, which is exactly the order a transfer-function coefficient array
expects (``b[0]`` pairs with the current input, ``b[1]`` with the previous
one, and so on).
"""

from __future__ import annotations

import numpy as np


class RingBuffer:
    """Delay line of fixed capacity with a wrap-around write cursor.

    Usage:
        rb = RingBuffer(3)
        rb.write(x)                        # current sample goes under the cursor
        acc = rb.newest_first_dot(coeffs)  # coeffs[0] * x + coeffs[1] * x[-1] + ...
        rb.advance()                       # next write lands one slot earlier

    ``push(x)`` combines ``write`` and ``advance``.
    """

    def __init__(self, capacity: int):
        if capacity < 1:
            raise ValueError(f"Ring buffer capacity must be positive, got {capacity}")
        self._buffer = np.zeros(capacity, dtype=float)
        self._capacity = capacity
        self._cursor = capacity - 1

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def cursor(self) -> int:
        """Slot that the next ``write`` fills."""
        return self._cursor

    def __len__(self) -> int:
        return self._capacity

    def write(self, value: float) -> None:
        """Store `value` under the cursor without moving it."""
        self._buffer[self._cursor] = value

    def advance(self) -> None:
        """Move the cursor one slot back, wrapping to the last slot."""
        self._cursor -= 1
        if self._cursor < 0:
            self._cursor = self._capacity - 1

    def push(self, value: float) -> int:
        """Write `value` as the newest sample and advance the cursor.

        Returns:
            The slot `value` was written to.
        """
        slot = self._cursor
        self.write(value)
        self.advance()
        return slot

    def newest_first_dot(self, coeffs: np.ndarray, skip: int = 0) -> float:
        """Dot product of `coeffs` with the buffer read from the cursor.

        Slots are visited from the cursor to the end, then from 0 up to the
        cursor, and paired with ``coeffs[0], coeffs[1], ...`` in that order.
        The first `skip` pairs are left out of the sum.

        Args:
            coeffs: Array of exactly `capacity` coefficients.
            skip: Number of leading pairs to omit.

        Returns:
            The accumulated sum as a Python float.
        """
        if len(coeffs) != self._capacity:
            raise ValueError(
                f"Expected {self._capacity} coefficients, got {len(coeffs)}"
            )

        split = self._capacity - self._cursor
        total = 0.0

        # cursor .. end
        if skip < split:
            total += float(np.dot(coeffs[skip:split], self._buffer[self._cursor + skip :]))
            skip = split

        # 0 .. cursor - 1
        if skip < self._capacity:
            total += float(np.dot(coeffs[skip:], self._buffer[skip - split : self._cursor]))

        return total

    def newest_first(self) -> np.ndarray:
        """Contents ordered from the most recently pushed value to the oldest."""
        start = (self._cursor + 1) % self._capacity
        return np.concatenate((self._buffer[start:], self._buffer[:start]))

    def oldest_first(self) -> np.ndarray:
        """Contents ordered from the oldest value to the most recently pushed."""
        return self.newest_first()[::-1].copy()

    def reset(self) -> None:
        """Zero the buffer and rewind the cursor."""
        self._buffer[:] = 0.0
        self._cursor = self._capacity - 1
