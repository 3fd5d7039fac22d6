from __future__ import annotations

from dataclasses import dataclass
import importlib
import logging
import pkgutil

from genconvert.errors import UnsupportedConversionError, UnsupportedFormatError
from genconvert.rom import FormatTag, RomImage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Config:
    """
    Layout stage config.

    source: layout the ROM is currently in
    target: layout the caller wants back
    """
    source: FormatTag = FormatTag.INTERLEAVED
    target: FormatTag = FormatTag.LINEAR


# (source, target) -> (layout module, function)
_ROUTES: dict[tuple[FormatTag, FormatTag], tuple[str, str]] = {
    (FormatTag.INTERLEAVED, FormatTag.LINEAR): ("interleave", "to_linear"),
    (FormatTag.LINEAR, FormatTag.INTERLEAVED): ("interleave", "to_interleaved"),
}


def available_modules() -> list[str]:
    """
    Enumerate available layout modules under stages/layout/modules.
    """
    pkg = importlib.import_module(f"{__package__}.modules")
    names = [m.name for m in pkgutil.iter_modules(pkg.__path__)]
    return sorted([n for n in names if not n.startswith("_")])


def routes() -> list[tuple[FormatTag, FormatTag]]:
    """
    Supported non-identity (source, target) pairs.
    """
    return list(_ROUTES)


def _import_layout_module(name: str):
    if not isinstance(name, str) or not name:
        raise ValueError("layout module name must be a non-empty string")
    return importlib.import_module(f"{__package__}.modules.{name}")


def _resolve_route(source: FormatTag, target: FormatTag):
    route = _ROUTES.get((source, target))
    if route is None:
        raise UnsupportedConversionError(
            f"convert: no conversion from {source.extension} to {target.extension}",
            source=source.value,
            target=target.value,
        )

    module_name, fn_name = route
    mod = _import_layout_module(module_name)
    fn = getattr(mod, fn_name, None)
    if fn is None:
        raise AttributeError(f"layout module '{module_name}' missing {fn_name}")
    return fn


def convert(rom: RomImage, *, cfg: Config) -> RomImage:
    """
    Route rom from cfg.source to cfg.target.

    - same layout: the very same instance comes back, nothing is copied
    - SMD on either side: UnsupportedFormatError
    - linear <-> interleaved: a new RomImage; rom is left untouched
    - anything else: UnsupportedConversionError
    """
    if not isinstance(rom, RomImage):
        raise TypeError("convert: rom must be a RomImage")

    source, target = cfg.source, cfg.target
    logger.debug("Converting from %s to %s", source.extension, target.extension)

    if source == target:
        logger.debug("No conversion necessary")
        return rom

    if FormatTag.SMD in (source, target):
        raise UnsupportedFormatError(
            "convert: SMD is not supported",
            fmt=FormatTag.SMD.value,
            details={"source": source.value, "target": target.value},
        )

    fn = _resolve_route(source, target)
    out = RomImage(fn(rom.data))
    logger.debug("Converted %d bytes", out.size)
    return out
