"""
Opaque handles for source files and definitions.

Handles are minted by the compiler's allocator; this package only compares
and hashes them.
"""

from dataclasses import dataclass

# Largest index an allocator may hand out
MAX_INDEX = 0xFFFF_FF00


@dataclass(frozen=True, order=True)
class _Index:
    index: int

    def __post_init__(self):
        if not isinstance(self.index, int) or isinstance(self.index, bool):
            raise TypeError(
                f"{type(self).__name__} index must be an int, got {self.index!r}"
            )
        if not 0 <= self.index <= MAX_INDEX:
            raise ValueError(
                f"{type(self).__name__} index out of range: {self.index}"
            )

    def __int__(self) -> int:
        return self.index

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.index})"


@dataclass(frozen=True, order=True, repr=False)
class FileId(_Index):
    """Identifies one source file within a compilation."""


@dataclass(frozen=True, order=True, repr=False)
class DefId(_Index):
    """Identifies one definition within a compilation."""
