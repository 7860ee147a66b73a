from __future__ import annotations
from struct import pack, unpack_from

import logging

from sha3sponge.constants import (
    DIGEST_SIZES, LANE_SIZE, MAX_RATE, PAD_END, SHA3_SUFFIX, rate
)
from sha3sponge.keccak import keccakf


class SpongeError(ValueError):
    """
    Base class for errors raised on contract violations of the sponge.
    """
    pass


class InvalidDigestLength(SpongeError):
    pass


class BufferTooSmall(SpongeError):
    pass


def _as_bytes(
    data: bytes | bytearray | memoryview, inlen: int | None
) -> memoryview:
    # Any contiguous buffer is viewed as raw bytes; `inlen` counts bytes.
    view = memoryview(data)
    if view.format != 'B' or view.ndim != 1:
        view = view.cast('B')
    if inlen is None:
        return view
    if inlen < 0:
        raise SpongeError('`inlen` must be a non-negative byte count.')
    if inlen > len(view):
        raise BufferTooSmall(
            f'`inlen` is {inlen} bytes but the buffer holds {len(view)}.'
        )
    return view[:inlen]


def _sponge(view: memoryview, mdlen: int) -> bytes:
    rsiz = rate(mdlen)
    rsizw = rsiz // LANE_SIZE
    fmt = f'<{rsizw}Q'
    st = [0] * 25

    inlen = len(view)
    pos = 0
    while inlen - pos >= rsiz:
        for i, w in enumerate(unpack_from(fmt, view, pos)):
            st[i] ^= w
        keccakf(st)
        pos += rsiz

    # last block and padding
    n = inlen - pos
    # holds the final block for any supported rate
    temp = bytearray(MAX_RATE)
    temp[:n] = view[pos:]
    temp[n] = SHA3_SUFFIX
    temp[rsiz - 1] |= PAD_END
    for i, w in enumerate(unpack_from(fmt, temp)):
        st[i] ^= w
    keccakf(st)

    return pack('<25Q', *st)[:mdlen]


def hash(
    data: bytes | bytearray | memoryview,
    inlen: int | None,
    mdlen: int,
    iterate: int = 1
) -> bytes:
    """
    SHA-3 digest of the first `inlen` bytes of `data`.

    `mdlen` selects the digest length in bytes:

        224 bits -- 28
        256 bits -- 32
        384 bits -- 48
        512 bits -- 64

    `inlen` is a byte count, even when `data` is a buffer of wider elements
    (e.g. `array.array('I')`); `None` hashes the whole buffer.

    With `iterate` > 1 the digest is re-hashed `iterate - 1` more times, each
    pass hashing the previous digest rather than the message. This stretching
    mode is not part of FIPS 202.
    """
    if mdlen not in DIGEST_SIZES:
        raise InvalidDigestLength(
            f'Digest length must be one of {DIGEST_SIZES}, got {mdlen}.'
        )
    if iterate < 1:
        raise ValueError('`iterate` must be at least 1.')
    md = _sponge(_as_bytes(data, inlen), mdlen)
    if iterate > 1:
        logging.debug(f'Re-hashing {mdlen}-byte digest {iterate - 1} times.')
        for _ in range(iterate - 1):
            md = _sponge(memoryview(md), mdlen)
    return md


def sum224(data: bytes | bytearray | memoryview, inlen: int | None = None) -> bytes:
    return hash(data, inlen, 28)


def sum256(data: bytes | bytearray | memoryview, inlen: int | None = None) -> bytes:
    return hash(data, inlen, 32)


def sum384(data: bytes | bytearray | memoryview, inlen: int | None = None) -> bytes:
    return hash(data, inlen, 48)


def sum512(data: bytes | bytearray | memoryview, inlen: int | None = None) -> bytes:
    return hash(data, inlen, 64)

