import sys

from genconvert.rom import FormatTag
from genconvert.stages.containers import stage as containers_stage
from genconvert.stages.layout import stage as layout_stage


if __name__ == "__main__":
    if len(sys.argv) != 3:
        sys.exit("usage: 00_md_to_bin.py GAME.md GAME.bin")
    src, dst = sys.argv[1], sys.argv[2]

    rom = containers_stage.load(containers_stage.Config(path=src))
    out = layout_stage.convert(
        rom, cfg=layout_stage.Config(source=FormatTag.INTERLEAVED, target=FormatTag.LINEAR)
    )

    # Hard correctness check: converting back must give the original bytes
    back = layout_stage.convert(
        out, cfg=layout_stage.Config(source=FormatTag.LINEAR, target=FormatTag.INTERLEAVED)
    )
    assert back.data == rom.data, "Round-trip mismatch: md -> bin -> md != md"

    containers_stage.save(out, containers_stage.Config(path=dst))
    print(f"Wrote {dst} ({out.size} bytes)")
