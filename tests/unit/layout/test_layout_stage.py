import pytest

from genconvert.errors import UnsupportedConversionError, UnsupportedFormatError
from genconvert.rom import FormatTag, RomImage
from genconvert.stages.layout import stage as layout_stage


def _cfg(source, target):
    return layout_stage.Config(source=source, target=target)


@pytest.mark.parametrize("fmt", list(FormatTag))
def test_same_format_returns_same_instance(fmt):
    rom = RomImage(bytearray(b"\x01\x02\x03"))  # odd length: identity never transforms
    out = layout_stage.convert(rom, cfg=_cfg(fmt, fmt))
    assert out is rom
    assert out.data is rom.data


def test_interleaved_to_linear_scenario():
    rom = RomImage(bytearray([0x11, 0x22, 0x33, 0x44]))
    out = layout_stage.convert(rom, cfg=_cfg(FormatTag.INTERLEAVED, FormatTag.LINEAR))
    assert out is not rom
    assert out.data == bytearray([0x22, 0x44, 0x11, 0x33])

    back = layout_stage.convert(out, cfg=_cfg(FormatTag.LINEAR, FormatTag.INTERLEAVED))
    assert back.data == bytearray([0x11, 0x22, 0x33, 0x44])


def test_convert_does_not_touch_input(payload):
    data = payload(256)
    rom = RomImage(bytearray(data))
    out = layout_stage.convert(rom, cfg=_cfg(FormatTag.LINEAR, FormatTag.INTERLEAVED))
    assert bytes(rom.data) == data
    assert out.size == rom.size


@pytest.mark.parametrize(
    "source,target",
    [
        (FormatTag.SMD, FormatTag.LINEAR),
        (FormatTag.LINEAR, FormatTag.SMD),
        (FormatTag.SMD, FormatTag.INTERLEAVED),
        (FormatTag.INTERLEAVED, FormatTag.SMD),
        (FormatTag.SMD, FormatTag.UNKNOWN),
    ],
)
def test_smd_rejected_without_transform(monkeypatch, source, target):
    monkeypatch.setattr(
        layout_stage, "_resolve_route",
        lambda *a: pytest.fail("SMD must be rejected before any route is resolved"),
    )
    rom = RomImage(bytearray(4))
    with pytest.raises(UnsupportedFormatError):
        layout_stage.convert(rom, cfg=_cfg(source, target))


@pytest.mark.parametrize(
    "source,target",
    [
        (FormatTag.UNKNOWN, FormatTag.LINEAR),
        (FormatTag.LINEAR, FormatTag.UNKNOWN),
        (FormatTag.UNKNOWN, FormatTag.INTERLEAVED),
        (FormatTag.INTERLEAVED, FormatTag.UNKNOWN),
    ],
)
def test_unknown_pairs_rejected(source, target):
    rom = RomImage(bytearray(4))
    with pytest.raises(UnsupportedConversionError) as ei:
        layout_stage.convert(rom, cfg=_cfg(source, target))
    assert ei.value.details == {"source": source.value, "target": target.value}


def test_odd_length_rom_rejected_and_left_intact():
    from genconvert.errors import MalformedInputError

    rom = RomImage(bytearray(b"\xAA\xBB\xCC"))
    with pytest.raises(MalformedInputError):
        layout_stage.convert(rom, cfg=_cfg(FormatTag.INTERLEAVED, FormatTag.LINEAR))
    assert rom.data == bytearray(b"\xAA\xBB\xCC")


def test_convert_requires_rom_image():
    with pytest.raises(TypeError):
        layout_stage.convert(b"\x00\x01", cfg=layout_stage.Config())


def test_default_config_is_md_to_bin():
    cfg = layout_stage.Config()
    assert (cfg.source, cfg.target) == (FormatTag.INTERLEAVED, FormatTag.LINEAR)


def test_routes_are_exactly_the_two_directions():
    assert set(layout_stage.routes()) == {
        (FormatTag.INTERLEAVED, FormatTag.LINEAR),
        (FormatTag.LINEAR, FormatTag.INTERLEAVED),
    }


def test_every_route_resolves_to_an_available_module():
    mods = layout_stage.available_modules()
    assert "interleave" in mods
    for source, target in layout_stage.routes():
        fn = layout_stage._resolve_route(source, target)
        assert callable(fn)


@pytest.mark.parametrize("route", layout_stage.routes())
def test_stage_roundtrip_all_routes(route, payload):
    source, target = route
    rom = RomImage(bytearray(payload(1024)))
    there = layout_stage.convert(rom, cfg=_cfg(source, target))
    back = layout_stage.convert(there, cfg=_cfg(target, source))
    assert back.data == rom.data
