"""Seeded 64-bit hashing for sketch rows.

Each sketch row needs its own hash function. Rather than keeping k
separate algorithms, we use one seedable algorithm and pass the row
index as the seed: h_r(x) = H(x, seed=r). For a hash with good
avalanche behaviour, outputs under different seeds are uniform and
uncorrelated, which is what gives every row an independent chance of
dodging a given collision.

Three interchangeable implementations are provided:

    Xxh3Hasher     xxHash3-64 (default, fastest)
    Murmur3Hasher  MurmurHash3 x64, low 64 bits
    Blake2bHasher  BLAKE2b with an 8-byte digest, seed in the salt

None of them is meant to be cryptographically strong. All of them are
stable across processes and Python versions (unlike the builtin
hash(), which is randomized per process for str and bytes), so a
sketch written to disk by one process can be queried by another.
"""
from __future__ import annotations

import hashlib
from typing import Protocol

import mmh3
import xxhash

from wordsketch.sketch.errors import InvalidParameter

HASH_BITS = 64
HASH_MASK = (1 << HASH_BITS) - 1


Token = str | bytes | bytearray | memoryview


def to_bytes(token: Token) -> bytes:
    """Tokens are hashed as bytes; str tokens are UTF-8 encoded first."""
    if isinstance(token, str):
        return token.encode("utf-8")
    if isinstance(token, bytes):
        return token
    if isinstance(token, (bytearray, memoryview)):
        return bytes(token)
    raise TypeError(f"token must be str or bytes-like, got {type(token).__name__}")


class Hasher(Protocol):
    """Anything callable as hasher(token, seed) -> unsigned 64-bit int."""

    name: str

    def __call__(self, token: bytes, seed: int) -> int: ...


class Xxh3Hasher:
    name = "xxh3"

    def __call__(self, token: bytes, seed: int) -> int:
        return xxhash.xxh3_64_intdigest(token, seed=seed)

    def __repr__(self) -> str:
        return "Xxh3Hasher()"


class Murmur3Hasher:
    """MurmurHash3 x64-128, keeping the first 64-bit word.

    mmh3 takes a 32-bit seed, which is plenty for row indices.
    """

    name = "murmur3"

    def __call__(self, token: bytes, seed: int) -> int:
        low, _high = mmh3.hash64(token, seed=seed, signed=False)
        return low

    def __repr__(self) -> str:
        return "Murmur3Hasher()"


class Blake2bHasher:
    """BLAKE2b keyed through its salt parameter.

    BLAKE2b accepts up to 16 bytes of salt, so the seed is packed as an
    8-byte little-endian integer. Slower than the other two by roughly
    an order of magnitude, but needs nothing outside the stdlib.
    """

    name = "blake2b"

    def __call__(self, token: bytes, seed: int) -> int:
        h = hashlib.blake2b(token, digest_size=8, salt=seed.to_bytes(8, "little"))
        return int.from_bytes(h.digest(), "little")

    def __repr__(self) -> str:
        return "Blake2bHasher()"


_HASHERS: dict[str, type] = {
    Xxh3Hasher.name: Xxh3Hasher,
    Murmur3Hasher.name: Murmur3Hasher,
    Blake2bHasher.name: Blake2bHasher,
}

DEFAULT_HASHER: Hasher = Xxh3Hasher()


def available_hashers() -> list[str]:
    return sorted(_HASHERS)


def get_hasher(name: str) -> Hasher:
    """Look up a hasher by name ("xxh3", "murmur3", "blake2b")."""
    try:
        return _HASHERS[name]()
    except KeyError:
        raise InvalidParameter(
            f"unknown hasher {name!r}, expected one of {available_hashers()}"
        ) from None
