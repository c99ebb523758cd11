"""Zero-copy value handles returned by database lookups.

A :class:`ValueRef` holds either a read-only view into a memory-mapped
region (the plaintext fast path) or an owned ``bytes`` object (for
example, plaintext produced by decryption). Both behave the same to the
caller: they have a length, compare equal to byte strings and can be
turned into ``bytes``.

While a mapped :class:`ValueRef` is alive, the view it holds keeps the
underlying mapping exported, so the mapping cannot be closed out from
under the reader.
"""

from __future__ import annotations

from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]


class ValueRef:
    """Reference to a value stored in the database."""

    __slots__ = ("_data",)

    def __init__(self, data: bytes | memoryview) -> None:
        self._data = data

    @classmethod
    def from_mmap(cls, mapping, start: int, end: int) -> "ValueRef":
        """Reference the half-open byte range ``[start, end)`` of *mapping*.

        *mapping* may be any object supporting the buffer protocol, such
        as an :class:`mmap.mmap`. The returned reference keeps the
        mapping pinned for as long as it exists.
        """
        view = memoryview(mapping)
        if view.ndim != 1 or view.itemsize != 1:
            view = view.cast("B")
        if start < 0 or end < start:
            raise ValueError(f"invalid range [{start}, {end})")
        if end > len(view):
            raise ValueError(
                f"ValueRef range [{start}, {end}) past mapping end {len(view)}"
            )
        return cls(view[start:end].toreadonly())

    @classmethod
    def from_owned(cls, data: BytesLike) -> "ValueRef":
        """Take ownership of *data* as an immutable byte string."""
        return cls(bytes(data))

    def view(self) -> memoryview:
        """Borrow the value as a read-only memoryview, without copying."""
        if isinstance(self._data, memoryview):
            return self._data
        return memoryview(self._data)

    def to_bytes(self) -> bytes:
        """Return the value as ``bytes``.

        Owned values are returned as-is; mapped values are copied out.
        """
        if isinstance(self._data, bytes):
            return self._data
        return self._data.tobytes()

    def __len__(self) -> int:
        return len(self._data)

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ValueRef):
            return self.to_bytes() == other.to_bytes()
        if isinstance(other, (bytes, bytearray)):
            return self.to_bytes() == bytes(other)
        if isinstance(other, memoryview):
            return self.to_bytes() == other.tobytes()
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.to_bytes())

    def __repr__(self) -> str:
        kind = "owned" if isinstance(self._data, bytes) else "mmap"
        return f"ValueRef({kind}, {self.to_bytes()!r})"