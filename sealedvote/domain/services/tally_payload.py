"""Tally payload codec.

The decryption oracle returns plaintexts as a sequence of 32-byte
big-endian unsigned words, one per submitted ciphertext, in submission
order. A tally payload is exactly two words: the "for" count followed by
the "against" count. Encrypted tallies are 64-bit unsigned integers, so
a word with any of its upper 192 bits set cannot be a tally.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from sealedvote.domain.errors.decryption import DecodeError

WORD_SIZE: int = 32
TALLY_WORD_COUNT: int = 2
TALLY_PAYLOAD_SIZE: int = WORD_SIZE * TALLY_WORD_COUNT
TALLY_VALUE_BITS: int = 64

_MAX_WORD: int = (1 << (WORD_SIZE * 8)) - 1
_MAX_TALLY: int = (1 << TALLY_VALUE_BITS) - 1


@dataclass(frozen=True, eq=True)
class TallyCounts:
    """Decoded plaintext tally."""

    for_votes: int
    against_votes: int


def encode_words(values: Sequence[int]) -> bytes:
    """Encode unsigned integers as consecutive 32-byte big-endian words.

    Raises:
        ValueError: If a value is negative or does not fit in a word.
    """
    out = bytearray()
    for value in values:
        if value < 0 or value > _MAX_WORD:
            raise ValueError(f"value {value} does not fit in an unsigned word")
        out += value.to_bytes(WORD_SIZE, "big")
    return bytes(out)


def encode_tally_payload(for_votes: int, against_votes: int) -> bytes:
    """Encode a (for, against) pair as a tally payload."""
    return encode_words((for_votes, against_votes))


def decode_tally_payload(payload: bytes) -> TallyCounts:
    """Decode a tally payload into its ordered (for, against) pair.

    Raises:
        DecodeError: If the payload is not exactly two words, or a word
            exceeds the 64-bit tally range.
    """
    if len(payload) != TALLY_PAYLOAD_SIZE:
        raise DecodeError(TALLY_PAYLOAD_SIZE, len(payload))
    for_votes = int.from_bytes(payload[:WORD_SIZE], "big")
    against_votes = int.from_bytes(payload[WORD_SIZE:], "big")
    for name, value in (("for", for_votes), ("against", against_votes)):
        if value > _MAX_TALLY:
            raise DecodeError(
                TALLY_PAYLOAD_SIZE,
                len(payload),
                reason=f"{name} count exceeds {TALLY_VALUE_BITS} bits",
            )
    return TallyCounts(for_votes=for_votes, against_votes=against_votes)
