"""
Linear <-> interleaved layout permutation.

The interleaved layout alternates the two halves of the linear image:
  interleaved[2*j + 1] = linear[j]          for j in [0, mid)
  interleaved[2*(j - mid)] = linear[j]      for j in [mid, n)

Both directions are length-preserving permutations and exact inverses:
  to_interleaved(to_linear(x)) == x
  to_linear(to_interleaved(x)) == x

Only even lengths have a half-point split; odd lengths are rejected.
Uniform module API: fn(bytes-like) -> new bytearray, source untouched.
"""
from __future__ import annotations

import numpy as np

from genconvert.errors import MalformedInputError


def to_linear(data: bytes) -> bytearray:
    """
    Interleaved -> linear.
    Odd source bytes become the first half, even source bytes the second.
    """
    src = _as_u8(data, "to_linear")
    n = src.size
    mid = n // 2

    out = np.empty(n, dtype=np.uint8)
    out[:mid] = src[1::2]
    out[mid:] = src[0::2]
    return bytearray(out.tobytes())


def to_interleaved(data: bytes) -> bytearray:
    """
    Linear -> interleaved.
    First half goes to odd positions, second half to even positions.
    """
    src = _as_u8(data, "to_interleaved")
    n = src.size
    mid = n // 2

    out = np.empty(n, dtype=np.uint8)
    out[1::2] = src[:mid]
    out[0::2] = src[mid:]
    return bytearray(out.tobytes())


# ----------------------------
# Internal
# ----------------------------

def _as_u8(data: bytes, op: str) -> np.ndarray:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"{op}: data must be bytes-like")

    if isinstance(data, memoryview) and not data.contiguous:
        raise TypeError(f"{op}: memoryview must be contiguous")

    # Only read from src; it may alias a writable caller buffer.
    src = np.frombuffer(data, dtype=np.uint8)
    if src.size % 2 != 0:
        raise MalformedInputError(
            f"{op}: length {src.size} is odd; layout transforms need an even length",
            size=int(src.size),
        )
    return src
