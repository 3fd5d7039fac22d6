from __future__ import annotations

import random
from pathlib import Path

import pytest


def random_bytes(n: int, seed: int = 0) -> bytes:
    """
    Deterministic pseudo-random payload of n bytes.
    """
    rng = random.Random(0xC0FFEE + seed * 1000 + n)
    return bytes(rng.randrange(256) for _ in range(n))


@pytest.fixture
def payload():
    return random_bytes


@pytest.fixture
def make_rom_file(tmp_path: Path):
    """
    Write bytes to a file under tmp_path and return its path as str.
    """
    def _make(name: str, data: bytes) -> str:
        p = tmp_path / name
        p.write_bytes(data)
        return str(p)

    return _make
