from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from genconvert.errors import MalformedInputError

# Sizes are carried as unsigned 32-bit quantities.
MAX_ROM_SIZE = 0xFFFFFFFF


class FormatTag(Enum):
    """
    On-disk byte layouts a Genesis / Mega Drive ROM can come in.

    LINEAR:      plain byte order (.bin)
    INTERLEAVED: two ROM halves alternated byte by byte (.md)
    SMD:         third-party copier format; recognised but never converted
    UNKNOWN:     anything we could not identify
    """
    LINEAR = "bin"
    INTERLEAVED = "md"
    SMD = "smd"
    UNKNOWN = "???"

    @property
    def extension(self) -> str:
        return "." + self.value


@dataclass
class RomImage:
    """
    A whole ROM held in memory.

    data is owned by the instance: anything other than a bytearray is
    copied on construction. size is always len(data).
    """
    data: bytearray

    def __post_init__(self) -> None:
        if not isinstance(self.data, (bytes, bytearray, memoryview)):
            raise TypeError("RomImage: data must be bytes-like")
        if not isinstance(self.data, bytearray):
            self.data = bytearray(self.data)
        if len(self.data) > MAX_ROM_SIZE:
            raise MalformedInputError(
                f"RomImage: size {len(self.data)} does not fit in 32 bits",
                size=len(self.data),
            )

    @property
    def size(self) -> int:
        return len(self.data)
