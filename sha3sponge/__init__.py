from sha3sponge.sha3 import (
    SpongeError, InvalidDigestLength, BufferTooSmall,
    hash, sum224, sum256, sum384, sum512
)
