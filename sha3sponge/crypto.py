from __future__ import annotations
from sha3sponge import sha3 as _sha3

import asyncio


async def sha3(
    msg: bytes | bytearray | memoryview,
    mdlen: int = 32,
    iterate: int = 1,
    loop: asyncio.AbstractEventLoop | None = None
) -> bytes:
    loop = loop or asyncio.get_running_loop()
    return await loop.run_in_executor(
        None, _sha3.hash, msg, None, mdlen, iterate
    )


async def sha3_224(
    msg: bytes | bytearray | memoryview,
    loop: asyncio.AbstractEventLoop | None = None
) -> bytes:
    loop = loop or asyncio.get_running_loop()
    return await loop.run_in_executor(None, _sha3.sum224, msg)


async def sha3_256(
    msg: bytes | bytearray | memoryview,
    loop: asyncio.AbstractEventLoop | None = None
) -> bytes:
    loop = loop or asyncio.get_running_loop()
    return await loop.run_in_executor(None, _sha3.sum256, msg)


async def sha3_384(
    msg: bytes | bytearray | memoryview,
    loop: asyncio.AbstractEventLoop | None = None
) -> bytes:
    loop = loop or asyncio.get_running_loop()
    return await loop.run_in_executor(None, _sha3.sum384, msg)


async def sha3_512(
    msg: bytes | bytearray | memoryview,
    loop: asyncio.AbstractEventLoop | None = None
) -> bytes:
    loop = loop or asyncio.get_running_loop()
    return await loop.run_in_executor(None, _sha3.sum512, msg)
