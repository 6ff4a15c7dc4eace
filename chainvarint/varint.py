"""Variable-length unsigned 32-bit integer with LEB128-style encoding."""

from __future__ import annotations

from dataclasses import dataclass

_MAX_U32 = 0xFFFFFFFF


@dataclass(frozen=True, order=True)
class VarUint32:
    """An unsigned 32-bit integer packed as 7-bit groups, low group first."""

    n: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.n, bool) or not isinstance(self.n, int):
            raise TypeError(f"VarUint32 value must be an int, got {type(self.n).__name__}")
        if not 0 <= self.n <= _MAX_U32:
            raise ValueError(f"VarUint32 value out of range: {self.n}")

    def value(self) -> int:
        """Return the wrapped integer."""
        return self.n

    def size(self) -> int:
        """Number of bytes the packed form occupies."""
        if self.n == 0:
            return 1
        return (self.n.bit_length() + 6) // 7

    def pack(self) -> bytes:
        """Encode the value as bytes."""
        val = self.n
        if val == 0:
            return b"\x00"
        out = bytearray()
        while val > 0:
            group = val & 0x7F
            val >>= 7
            if val > 0:
                group |= 0x80
            out.append(group)
        return bytes(out)

    @classmethod
    def unpack(cls, data: bytes) -> tuple[VarUint32, int]:
        """Decode from the start of ``data``.

        Returns the decoded value and the number of bytes consumed. Decoding
        stops at the first byte without the continuation bit, or at the end of
        the data.
        """
        value = 0
        shift = 0
        consumed = 0
        for byte in data:
            value |= (byte & 0x7F) << shift
            shift += 7
            consumed += 1
            if not byte & 0x80:
                break
        return cls(value & _MAX_U32), consumed

    def __int__(self) -> int:
        return self.n

    def __str__(self) -> str:
        return str(self.n)