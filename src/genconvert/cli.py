"""
genconvert command line.

    genconvert INFILE [-o OUTFILE] [-f FROM] [-t TO] [-v] [-q]

Formats are bin, md or smd (smd is recognised but never converted).
Missing formats are inferred from the file extensions.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from genconvert.config import DEFAULT_OUTFILE, ConvertConfig
from genconvert.errors import (
    FileOpenError,
    MalformedInputError,
    SizeDiscrepancyError,
    UnsupportedConversionError,
    UnsupportedFormatError,
)
from genconvert.formats import ensure_extension
from genconvert.log import LOGGER_NAME, setup_logging
from genconvert.rom import FormatTag
from genconvert.stages.containers import stage as containers_stage
from genconvert.stages.layout import stage as layout_stage

logger = logging.getLogger(LOGGER_NAME)

EXIT_OK = 0
EXIT_NO_INPUT = 1
EXIT_BAD_SOURCE_FORMAT = 2
EXIT_BAD_TARGET_FORMAT = 3
EXIT_LOAD_FAILED = 4
EXIT_UNSUPPORTED_CONVERSION = 5
EXIT_SAVE_OPEN_FAILED = 6
EXIT_SAVE_SIZE_DISCREPANCY = 7
EXIT_UNSUPPORTED_FORMAT = 8
EXIT_MALFORMED_INPUT = 9

_CONVERT_EXIT_CODES = (
    (UnsupportedFormatError, EXIT_UNSUPPORTED_FORMAT),
    (MalformedInputError, EXIT_MALFORMED_INPUT),
    (UnsupportedConversionError, EXIT_UNSUPPORTED_CONVERSION),
)


def _convert_exit_code(e: Exception) -> int:
    for cls, code in _CONVERT_EXIT_CODES:
        if isinstance(e, cls):
            return code
    raise e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="genconvert",
        description="Convert Sega Genesis / Mega Drive ROMs between .bin and .md layouts.",
    )
    parser.add_argument("infile", nargs="?", help="ROM file to convert")
    parser.add_argument(
        "-o", "--outfile",
        metavar="FILE",
        default=DEFAULT_OUTFILE,
        help=f"Output file (default: {DEFAULT_OUTFILE})",
    )
    parser.add_argument(
        "-f", "--from",
        dest="source",
        metavar="FROM",
        help="Original format [bin, md, smd]. Omission infers from INFILE.",
    )
    parser.add_argument(
        "-t", "--to",
        dest="target",
        metavar="TO",
        help="Target format [bin, md, smd]. Omission infers from the output file.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Print extra information")
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Print nothing at all. Overrides --verbose.",
    )
    return parser


def run(cfg: ConvertConfig) -> int:
    """
    Load, convert and save one ROM. Returns a process exit code.
    """
    if cfg.source_inferred:
        logger.debug("No starting format given. Inferring %s from %s", cfg.source.extension, cfg.infile)
    if cfg.target_inferred:
        logger.debug("No target format given. Inferring %s from %s", cfg.target.extension, cfg.outfile)

    if cfg.source is FormatTag.UNKNOWN:
        logger.error("Invalid source format.")
        return EXIT_BAD_SOURCE_FORMAT
    if cfg.target is FormatTag.UNKNOWN:
        logger.error("Invalid target format.")
        return EXIT_BAD_TARGET_FORMAT

    try:
        rom = containers_stage.load(containers_stage.Config(path=cfg.infile))
    except (FileOpenError, SizeDiscrepancyError, MalformedInputError) as e:
        logger.error("Unable to read input file \"%s\": %s", cfg.infile, e)
        logger.debug("%s", e.to_dict())
        return EXIT_LOAD_FAILED

    logger.debug("Input file: \"%s\" Size: %d bytes Format: %s", cfg.infile, rom.size, cfg.source.extension)

    try:
        out = layout_stage.convert(rom, cfg=layout_stage.Config(source=cfg.source, target=cfg.target))
    except (UnsupportedConversionError, UnsupportedFormatError, MalformedInputError) as e:
        logger.error("Conversion not possible: %s", e)
        logger.debug("%s", e.to_dict())
        return _convert_exit_code(e)

    outfile, renamed = ensure_extension(cfg.outfile, cfg.target)
    if renamed:
        logger.warning("Filename didn't match target format. Writing to \"%s\" instead.", outfile)

    logger.debug("Output file: \"%s\" Size: %d bytes Format: %s", outfile, out.size, cfg.target.extension)

    try:
        containers_stage.save(out, containers_stage.Config(path=outfile))
    except FileOpenError:
        logger.error("Could not open \"%s\" for writing.", outfile)
        return EXIT_SAVE_OPEN_FAILED
    except SizeDiscrepancyError:
        logger.error("Size discrepancy when writing. \"%s\" may be incorrect.", outfile)
        return EXIT_SAVE_SIZE_DISCREPANCY

    logger.info("Converted \"%s\" (%s) to \"%s\" (%s).",
                cfg.infile, cfg.source.extension, outfile, cfg.target.extension)
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(verbose=args.verbose, quiet=args.quiet)

    if not args.infile:
        logger.error("No input file.")
        return EXIT_NO_INPUT

    cfg = ConvertConfig.resolve(
        infile=args.infile,
        outfile=args.outfile,
        source=args.source,
        target=args.target,
        verbose=args.verbose,
        quiet=args.quiet,
    )

    return run(cfg)


if __name__ == "__main__":
    sys.exit(main())
