import pytest

from genconvert.errors import (
    FileOpenError,
    GenConvertError,
    MalformedInputError,
    RomIOError,
    SizeDiscrepancyError,
    UnsupportedConversionError,
    UnsupportedFormatError,
)


@pytest.mark.parametrize(
    "exc,code",
    [
        (MalformedInputError("x", size=3), "MALFORMED_INPUT"),
        (UnsupportedFormatError("x", fmt="smd"), "UNSUPPORTED_FORMAT"),
        (UnsupportedConversionError("x", source="???", target="bin"), "UNSUPPORTED_CONVERSION"),
        (FileOpenError("x", path="a.md"), "FILE_OPEN_FAILURE"),
        (SizeDiscrepancyError("x", path="a.md", expected=4, actual=2), "SIZE_DISCREPANCY"),
    ],
)
def test_error_codes_are_distinct_and_structured(exc, code):
    assert isinstance(exc, GenConvertError)
    assert exc.error_code == code
    d = exc.to_dict()
    assert d["error_code"] == code
    assert d["message"] == "x"


def test_conversion_errors_are_value_errors():
    for cls in (MalformedInputError, UnsupportedFormatError, UnsupportedConversionError):
        assert issubclass(cls, ValueError)


def test_file_errors_share_a_base_and_carry_path():
    e = SizeDiscrepancyError("short", path="out.bin", expected=4, actual=2)
    assert isinstance(e, RomIOError)
    assert e.path == "out.bin"
    assert e.details == {"expected": 4, "actual": 2, "path": "out.bin"}


@pytest.mark.parametrize(
    "make",
    [
        lambda d: GenConvertError("x", details=d),
        lambda d: MalformedInputError("x", size=3, details=d),
        lambda d: UnsupportedFormatError("x", fmt="smd", details=d),
        lambda d: UnsupportedConversionError("x", source="md", target="???", details=d),
        lambda d: FileOpenError("x", path="a.md", details=d),
        lambda d: SizeDiscrepancyError("x", path="a.md", expected=4, actual=2, details=d),
    ],
)
def test_caller_details_left_untouched(make):
    ctx = {"ctx": 1}
    e = make(ctx)
    assert ctx == {"ctx": 1}
    assert e.details["ctx"] == 1
