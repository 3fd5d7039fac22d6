from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from genconvert.errors import FileOpenError, MalformedInputError, SizeDiscrepancyError
from genconvert.rom import MAX_ROM_SIZE, RomImage

PathLike = Union[str, Path]

logger = logging.getLogger(__name__)


def read_rom(path: PathLike) -> RomImage:
    """
    Read a whole ROM file into memory.
    The number of bytes read must match the size the filesystem reports;
    reads stop one byte past it so devices and growing files cannot run on.
    """
    p = Path(path)
    try:
        expected = p.stat().st_size
        if expected > MAX_ROM_SIZE:
            raise MalformedInputError(
                f"read_rom: {p} is {expected} bytes; sizes must fit in 32 bits",
                size=expected,
            )
        with p.open("rb") as f:
            data = f.read(expected + 1)
    except OSError as e:
        raise FileOpenError(f"read_rom: unable to open {p}: {e.strerror or e}", path=str(p)) from e

    if len(data) != expected:
        raise SizeDiscrepancyError(
            f"read_rom: read {len(data)} of {expected} bytes from {p}",
            path=str(p), expected=expected, actual=len(data),
        )

    logger.debug("Read %d bytes from %s", len(data), p)
    return RomImage(bytearray(data))


def write_rom(path: PathLike, rom: RomImage) -> int:
    """
    Write rom to path, replacing any existing file. Returns bytes written.
    Parent directories are not created.
    """
    if not isinstance(rom, RomImage):
        raise TypeError("write_rom: rom must be a RomImage")

    p = Path(path)
    try:
        f = p.open("wb")
    except OSError as e:
        raise FileOpenError(f"write_rom: unable to open {p}: {e.strerror or e}", path=str(p)) from e

    try:
        with f:
            written = f.write(rom.data)
    except OSError as e:
        raise SizeDiscrepancyError(
            f"write_rom: write to {p} failed: {e.strerror or e}",
            path=str(p), expected=rom.size,
        ) from e

    if written != rom.size:
        raise SizeDiscrepancyError(
            f"write_rom: wrote {written} of {rom.size} bytes to {p}",
            path=str(p), expected=rom.size, actual=written,
        )

    logger.debug("Wrote %d bytes to %s", written, p)
    return written
