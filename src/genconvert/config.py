from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from genconvert.formats import format_from_filename, parse_format
from genconvert.rom import FormatTag

DEFAULT_OUTFILE = "out.bin"
DEFAULT_SOURCE = FormatTag.INTERLEAVED
DEFAULT_TARGET = FormatTag.LINEAR


@dataclass(frozen=True)
class ConvertConfig:
    """
    One conversion run, fully resolved.

    Formats not given explicitly are inferred from the filenames:
      source from infile (no extension -> INTERLEAVED)
      target from outfile (no extension -> LINEAR)

    quiet always wins over verbose.
    """
    infile: str
    outfile: str = DEFAULT_OUTFILE
    source: FormatTag = DEFAULT_SOURCE
    target: FormatTag = DEFAULT_TARGET
    verbose: bool = False
    quiet: bool = False

    # Whether source/target came from filenames rather than explicit arguments.
    source_inferred: bool = False
    target_inferred: bool = False

    @classmethod
    def resolve(
        cls,
        infile: str,
        outfile: Optional[str] = None,
        source: Optional[str] = None,
        target: Optional[str] = None,
        verbose: bool = False,
        quiet: bool = False,
    ) -> "ConvertConfig":
        outfile = outfile or DEFAULT_OUTFILE

        if source is None:
            src = format_from_filename(infile, DEFAULT_SOURCE)
        else:
            src = parse_format(source)

        if target is None:
            tgt = format_from_filename(outfile, DEFAULT_TARGET)
        else:
            tgt = parse_format(target)

        return cls(
            infile=infile,
            outfile=outfile,
            source=src,
            target=tgt,
            verbose=verbose and not quiet,
            quiet=quiet,
            source_inferred=source is None,
            target_inferred=target is None,
        )
