"""
Map user-facing strings (format arguments, filenames) to FormatTag.
All comparisons are case-insensitive.
"""
from __future__ import annotations

from pathlib import PurePath
from typing import Tuple

from genconvert.rom import FormatTag

_BY_NAME = {
    "bin": FormatTag.LINEAR,
    "md": FormatTag.INTERLEAVED,
    "smd": FormatTag.SMD,
}


def parse_format(text: str) -> FormatTag:
    """
    "bin", ".BIN" and "game.bin" all parse to LINEAR.
    Anything unrecognised parses to UNKNOWN.
    """
    if not isinstance(text, str):
        raise TypeError("parse_format: text must be str")
    name = text.strip().rpartition(".")[2]
    return _BY_NAME.get(name.casefold(), FormatTag.UNKNOWN)


def format_from_filename(filename: str, default: FormatTag) -> FormatTag:
    """
    Infer a format from the filename's extension.
    No extension -> default; unrecognised extension -> UNKNOWN.
    Dot-files count: ".md" is an md file.
    """
    name = PurePath(filename).name
    if "." not in name:
        return default
    return parse_format(name.rpartition(".")[2])


def ensure_extension(filename: str, fmt: FormatTag) -> Tuple[str, bool]:
    """
    Append fmt's extension when filename would not infer to fmt.
    Returns (filename, changed).
    """
    if format_from_filename(filename, FormatTag.LINEAR) == fmt:
        return filename, False
    return filename + fmt.extension, True
