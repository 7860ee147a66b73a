from sha3sponge.constants import KECCAK_ROUNDS, RNDC, ROTC, PILN


MASK64 = 0xffffffffffffffff


def rotl64(x: int, n: int) -> int:
    return ((x << n) | (x >> (64 - n))) & MASK64


def keccakf(st: list[int], rounds: int = KECCAK_ROUNDS) -> list[int]:
    """
    Apply Keccak-f[1600] to the 25-lane state `st` in place.

    Lane `x + 5*y` holds column x of row y. Rounds past the 24 defined round
    constants are not supported. Returns `st` for convenience.
    """
    bc = [0] * 5
    for round in range(rounds):
        # theta
        for i in range(5):
            bc[i] = st[i] ^ st[i + 5] ^ st[i + 10] ^ st[i + 15] ^ st[i + 20]
        for i in range(5):
            t = bc[(i + 4) % 5] ^ rotl64(bc[(i + 1) % 5], 1)
            for j in range(0, 25, 5):
                st[j + i] ^= t
        # rho and pi
        t = st[1]
        for i in range(24):
            j = PILN[i]
            bc[0] = st[j]
            st[j] = rotl64(t, ROTC[i])
            t = bc[0]
        # chi
        for j in range(0, 25, 5):
            bc[:] = st[j:j + 5]
            for i in range(5):
                st[j + i] ^= (~bc[(i + 1) % 5] & MASK64) & bc[(i + 2) % 5]
        # iota
        st[0] ^= RNDC[round]
    return st
