"""Pure domain services (no I/O)."""

from sealedvote.domain.services.tally_payload import (
    TALLY_PAYLOAD_SIZE,
    WORD_SIZE,
    TallyCounts,
    decode_tally_payload,
    encode_tally_payload,
    encode_words,
)

__all__: list[str] = [
    "TALLY_PAYLOAD_SIZE",
    "WORD_SIZE",
    "TallyCounts",
    "decode_tally_payload",
    "encode_tally_payload",
    "encode_words",
]
