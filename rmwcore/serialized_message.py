"""Serialized messages held as a growable string of bytes."""

from __future__ import annotations

from typing import Optional

from rmwcore.errors import RmwInvalidArgumentError

__all__ = ["SerializedMessage"]


class SerializedMessage:
    """A serialized message: a byte buffer with a used length and a capacity.

    A new message is zero initialized and holds no storage; :meth:`init`
    allocates it and :meth:`fini` releases it again.
    """

    def __init__(self) -> None:
        self.buffer: Optional[bytearray] = None
        self.buffer_length = 0

    @property
    def buffer_capacity(self) -> int:
        """Size of the storage held."""
        return 0 if self.buffer is None else len(self.buffer)

    @property
    def is_initialized(self) -> bool:
        """Whether storage has been allocated with :meth:`init`."""
        return self.buffer is not None

    def init(self, capacity: int) -> None:
        """Allocate ``capacity`` zeroed bytes; the used length starts at zero."""
        if not isinstance(capacity, int) or isinstance(capacity, bool) or capacity < 0:
            raise RmwInvalidArgumentError("capacity must be a non-negative integer")
        self.buffer = bytearray(capacity)
        self.buffer_length = 0

    def fini(self) -> None:
        """Release the storage and return to the zero-initialized state."""
        if self.buffer is None:
            raise RmwInvalidArgumentError("serialized message is not initialized")
        self.buffer = None
        self.buffer_length = 0

    def resize(self, new_size: int) -> None:
        """Change the capacity to ``new_size`` bytes, keeping existing content.

        Shrinking truncates the content and the used length.
        """
        if self.buffer is None:
            raise RmwInvalidArgumentError("serialized message is not initialized")
        if not isinstance(new_size, int) or isinstance(new_size, bool):
            raise RmwInvalidArgumentError("new_size must be an integer")
        if new_size <= 0:
            raise RmwInvalidArgumentError("new size of uint8_array has to be greater than zero")
        current = len(self.buffer)
        if new_size < current:
            del self.buffer[new_size:]
        else:
            self.buffer.extend(bytes(new_size - current))
        self.buffer_length = min(self.buffer_length, new_size)

    def __repr__(self) -> str:
        return (
            f"SerializedMessage(buffer_length={self.buffer_length}, "
            f"buffer_capacity={self.buffer_capacity})"
        )