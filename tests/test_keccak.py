
from sha3sponge import keccak
from sha3sponge.constants import (
    DIGEST_SIZES, KECCAK_ROUNDS, MAX_RATE, PILN, RNDC, ROTC, rate
)
from os import urandom


# Rho offsets indexed by lane x + 5*y.
rho = [
    0,  1,  62, 28, 27,
    36, 44, 6,  55, 20,
    3,  10, 43, 25, 39,
    41, 45, 15, 21, 8,
    18, 2,  61, 56, 14
]


def reference_keccakf(st):
    ROTL64 = lambda x, n: ((x << n) ^ (x >> (64 - n))) % 2**64
    A = {(x, y): st[x + 5*y] for y in range(5) for x in range(5)}
    for RC in RNDC:
        B, C, D = {}, {}, {}
        for x in range(5):
            C[x] = A[(x, 0)] ^ A[(x, 1)] ^ A[(x, 2)] ^ A[(x, 3)] ^ A[(x, 4)]
        for x in range(5):
            D[x] = C[(x - 1) % 5] ^ ROTL64(C[(x + 1) % 5], 1)
        for y in range(5):
            for x in range(5):
                A[(x, y)] ^= D[x]
        for y in range(5):
            for x in range(5):
                B[(y, (2*x + 3*y) % 5)] = ROTL64(A[(x, y)], rho[x + 5*y])
        for y in range(5):
            for x in range(5):
                A[(x, y)] = B[(x, y)] ^ ((~B[((x + 1) % 5, y)]) & B[((x + 2) % 5, y)])
        A[(0, 0)] ^= RC
    return [A[(x, y)] for y in range(5) for x in range(5)]


def test_tables():
    assert KECCAK_ROUNDS == len(RNDC) == len(ROTC) == len(PILN) == 24
    assert sorted(PILN) == list(range(1, 25))
    assert all(0 < r < 64 for r in ROTC)
    assert MAX_RATE == 144
    for mdlen in DIGEST_SIZES:
        assert rate(mdlen) % 8 == 0
        assert rate(mdlen) <= MAX_RATE


def test_rotl64():
    assert keccak.rotl64(1, 1) == 2
    assert keccak.rotl64(1 << 63, 1) == 1
    assert keccak.rotl64(0x8000000000000001, 4) == 0x18
    x = int.from_bytes(urandom(8), 'little')
    for n in range(1, 64):
        y = keccak.rotl64(x, n)
        assert 0 <= y < 2**64
        assert keccak.rotl64(y, 64 - n) == x


def test_keccakf_zero_state():
    st = [0] * 25
    out = keccak.keccakf(st)
    assert out is st
    assert st[0] == 0xf1258f7940e1dde7
    assert st[1] == 0x84d5ccf933c0478a
    assert st[2] == 0xd598261ea65aa9ee


def test_keccakf_matches_reference():
    for _ in range(8):
        st = [int.from_bytes(urandom(8), 'little') for _ in range(25)]
        expected = reference_keccakf(st)
        assert keccak.keccakf(list(st)) == expected


def test_keccakf_lanes_stay_64_bit():
    st = [0xffffffffffffffff] * 25
    keccak.keccakf(st)
    assert all(0 <= lane < 2**64 for lane in st)


def test_keccakf_zero_rounds_is_identity():
    st = [int.from_bytes(urandom(8), 'little') for _ in range(25)]
    assert keccak.keccakf(list(st), 0) == st


def test_keccakf_deterministic():
    st = [int.from_bytes(urandom(8), 'little') for _ in range(25)]
    assert keccak.keccakf(list(st)) == keccak.keccakf(list(st))
