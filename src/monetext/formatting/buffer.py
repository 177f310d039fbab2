"""Fixed-capacity character buffer for bounded formatting.

Python 3.13+. Zero external dependencies.
"""

from monetext.constants import FORMAT_BUFFER_SIZE

__all__ = ["FormatBuffer"]


class FormatBuffer:
    """Caller-owned output region with a fixed character capacity.

    Writes that would exceed the capacity are refused whole; the buffer
    never grows by itself. Use grown() for a larger, empty buffer.

    Example:
        >>> buffer = FormatBuffer(4)
        >>> buffer.write("USD")
        True
        >>> buffer.write(" 10")
        False
        >>> buffer.getvalue()
        'USD'
    """

    __slots__ = ("_capacity", "_chars", "_length")

    def __init__(self, capacity: int = FORMAT_BUFFER_SIZE) -> None:
        if capacity <= 0:
            msg = f"FormatBuffer capacity must be positive, got {capacity}"
            raise ValueError(msg)
        self._capacity = capacity
        self._chars: list[str] = [""] * capacity
        self._length = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def remaining(self) -> int:
        return self._capacity - self._length

    def __len__(self) -> int:
        return self._length

    def write(self, text: str) -> bool:
        """Append text if it fits entirely; return whether it was written."""
        end = self._length + len(text)
        if end > self._capacity:
            return False
        self._chars[self._length : end] = text
        self._length = end
        return True

    def reset(self) -> None:
        """Discard the contents."""
        self._length = 0

    def getvalue(self) -> str:
        """Return the written characters."""
        return "".join(self._chars[: self._length])

    def grown(self) -> "FormatBuffer":
        """Return a new, empty buffer with twice the capacity."""
        return FormatBuffer(self._capacity * 2)
