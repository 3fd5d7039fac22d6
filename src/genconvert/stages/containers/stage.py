from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from genconvert.rom import RomImage

from .modules.rom_file import read_rom, write_rom


@dataclass(frozen=True)
class Config:
    """
    Containers stage config.

    path: ROM file to read from (load) or write to (save)
    """
    path: Optional[str] = None


def load(cfg: Config) -> RomImage:
    """
    Read the ROM at cfg.path.
    """
    if cfg.path is None:
        raise ValueError("containers.load: cfg.path is None")
    return read_rom(cfg.path)


def save(rom: RomImage, cfg: Config) -> int:
    """
    Write rom to cfg.path. Returns bytes written.
    Load/save errors are raised unchanged for the caller to report.
    """
    if cfg.path is None:
        # Explicit is better than implicit: saving requires a destination
        raise ValueError("containers.save: cfg.path is None")
    return write_rom(cfg.path, rom)
