"""Pure-Python XXH32 (xxh32 module) and XXH64 (xxh64 module) hashing."""

__version__ = "0.1.0"
__all__ = ["xxh32", "xxh64"]