"""Variable-length unsigned 32-bit integer serialization (VarUint32)."""

__version__ = "0.1.0"
__all__ = ["varint"]