# https://nvlpubs.nist.gov/nistpubs/FIPS/NIST.FIPS.202.pdf
# https://keccak.team/keccak_specs_summary.html


KECCAK_ROUNDS = 24

# State width in bytes (25 lanes of 64 bits).
STATE_SIZE = 200
LANE_SIZE = 8

# Supported digest lengths in bytes: SHA3-224, SHA3-256, SHA3-384, SHA3-512.
DIGEST_SIZES = (28, 32, 48, 64)

# Domain separator and final bit of the SHA-3 pad10*1 padding.
SHA3_SUFFIX = 0x06
PAD_END = 0x80

# Round constants for iota.
RNDC = (
    0x0000000000000001, 0x0000000000008082, 0x800000000000808a,
    0x8000000080008000, 0x000000000000808b, 0x0000000080000001,
    0x8000000080008081, 0x8000000000008009, 0x000000000000008a,
    0x0000000000000088, 0x0000000080008009, 0x000000008000000a,
    0x000000008000808b, 0x800000000000008b, 0x8000000000008089,
    0x8000000000008003, 0x8000000000008002, 0x8000000000000080,
    0x000000000000800a, 0x800000008000000a, 0x8000000080008081,
    0x8000000000008080, 0x0000000080000001, 0x8000000080008008,
)

# Rho rotation offsets, in pi visiting order starting from lane 1.
ROTC = (
     1,  3,  6, 10, 15, 21, 28, 36, 45, 55,  2, 14,
    27, 41, 56,  8, 25, 43, 62, 18, 39, 61, 20, 44,
)

# Pi destination lanes, in the same order as ROTC.
PILN = (
    10,  7, 11, 17, 18,  3,  5, 16,  8, 21, 24,  4,
    15, 23, 19, 13, 12,  2, 20, 14, 22,  9,  6,  1,
)


def rate(mdlen: int) -> int:
    return STATE_SIZE - 2 * mdlen


# Largest rate across DIGEST_SIZES, i.e. the rate of the shortest digest.
MAX_RATE = max(rate(n) for n in DIGEST_SIZES)
