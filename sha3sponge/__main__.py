from __future__ import annotations
from sha3sponge import crypto

import argparse
import asyncio
import logging
import sys


logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')


# Digest size in bytes for each `-a` choice; 224 is the sha3sum default.
ALGORITHMS = {224: 28, 256: 32, 384: 48, 512: 64}


def _iterations(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError('iterations must be at least 1')
    return n


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='sha3sum', description='Print SHA-3 digests of files.'
    )
    parser.add_argument(
        '-a', '--algorithm', type=int, choices=sorted(ALGORITHMS),
        default=224, help='digest size in bits (default: 224)'
    )
    parser.add_argument(
        '-n', '--iterations', type=_iterations, default=1,
        help='re-hash the digest until it has been computed N times'
    )
    parser.add_argument(
        'files', nargs='*', metavar='FILE',
        help="files to hash; '-' or none reads standard input"
    )
    return parser.parse_args(argv)


def read(name: str) -> bytes:
    if name == '-':
        return sys.stdin.buffer.read()
    with open(name, 'rb') as f:
        return f.read()


async def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    loop = asyncio.get_running_loop()
    mdlen = ALGORITHMS[args.algorithm]
    status = 0
    for name in args.files or ['-']:
        try:
            data = await loop.run_in_executor(None, read, name)
        except OSError as e:
            logging.error(f'{name}: {e.strerror}')
            status = 1
            continue
        md = await crypto.sha3(data, mdlen, args.iterations, loop)
        print(f'{md.hex()}  {name}')
    return status


def run() -> None:
    sys.exit(asyncio.run(main()))


if __name__ == '__main__':
    run()
