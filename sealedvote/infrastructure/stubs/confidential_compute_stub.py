"""Confidential computation stub implementation.

In-memory stand-in for the external confidential-computation library,
for development and testing. Follows the DEV_MODE_WATERMARK pattern.

Plaintexts live in a private table keyed by random 32-byte handles, so
handles carry no information about the value they reference. Arithmetic
wraps modulo 2**64 like a 64-bit encrypted unsigned integer.

The decryption oracle is simulated by fulfill(): it decrypts the handles
of a pending request, encodes them as 32-byte words, and signs
``request_id (32-byte big-endian) || payload`` with Ed25519. The signature
is the authenticity proof checked by verify_authenticity().

WARNING: This is a development stub. Not for production use.
"""

from __future__ import annotations

import secrets
from dataclasses import dataclass

import structlog
from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)

from sealedvote.domain.errors import InvalidInputError, UnknownRequestError
from sealedvote.domain.models.ciphertext import HANDLE_SIZE, CiphertextHandle
from sealedvote.domain.services.tally_payload import (
    TALLY_VALUE_BITS,
    WORD_SIZE,
    encode_words,
)

# DEV_MODE_WATERMARK per dev stub convention
DEV_MODE_WATERMARK: str = "DEV_STUB:ConfidentialComputeStub:v1"

# Plaintext domain of the simulated encrypted integers
VALUE_BITS: int = TALLY_VALUE_BITS

logger = structlog.get_logger()


@dataclass(frozen=True)
class PendingDecryption:
    """A decryption request awaiting fulfillment.

    Attributes:
        request_id: Id returned to the requester.
        handles: Transport-form handles, in submission order.
        callback_selector: Entry point the oracle will call.
    """

    request_id: int
    handles: tuple[bytes, ...]
    callback_selector: str


class ConfidentialComputeStub:
    """In-memory ConfidentialComputeProtocol with an Ed25519-signing oracle.

    Attributes:
        _plaintexts: handle bytes -> plaintext value.
        _pending: request id -> pending decryption.
        _next_request_id: Next id to issue (ids start at 1).
        _signing_key: Oracle signing key.
    """

    def __init__(self, signing_key: Ed25519PrivateKey | None = None) -> None:
        """Initialize an empty library.

        Args:
            signing_key: Oracle key. A fresh key is generated if omitted.
        """
        self._plaintexts: dict[bytes, int] = {}
        self._pending: dict[int, PendingDecryption] = {}
        self._next_request_id: int = 1
        self._signing_key = signing_key or Ed25519PrivateKey.generate()
        self._modulus = 1 << VALUE_BITS

    @property
    def public_key(self) -> Ed25519PublicKey:
        """The oracle's verification key."""
        return self._signing_key.public_key()

    # =========================================================================
    # ConfidentialComputeProtocol Implementation
    # =========================================================================

    async def encrypt_zero(self) -> CiphertextHandle:
        return self._store(0)

    async def add(
        self,
        left: CiphertextHandle,
        right: CiphertextHandle,
    ) -> CiphertextHandle:
        return self._store(self._lookup(left.value) + self._lookup(right.value))

    async def to_transport_form(self, handle: CiphertextHandle) -> bytes:
        self._lookup(handle.value)
        return handle.value

    async def from_transport_form(self, raw: bytes) -> CiphertextHandle:
        if len(raw) != HANDLE_SIZE:
            raise InvalidInputError(
                "ciphertext", f"expected {HANDLE_SIZE} bytes, got {len(raw)}"
            )
        self._lookup(raw)
        return CiphertextHandle(raw)

    async def request_decryption(
        self,
        handles: list[bytes],
        callback_selector: str,
    ) -> int:
        for raw in handles:
            self._lookup(raw)
        request_id = self._next_request_id
        self._next_request_id += 1
        self._pending[request_id] = PendingDecryption(
            request_id=request_id,
            handles=tuple(handles),
            callback_selector=callback_selector,
        )
        logger.debug(
            "decryption_requested",
            request_id=request_id,
            handle_count=len(handles),
            watermark=DEV_MODE_WATERMARK,
        )
        return request_id

    async def verify_authenticity(
        self,
        request_id: int,
        payload: bytes,
        proof: bytes,
    ) -> bool:
        try:
            self.public_key.verify(proof, self._signable(request_id, payload))
        except InvalidSignature:
            return False
        return True

    # =========================================================================
    # Client and oracle simulation
    # =========================================================================

    async def encrypt(self, value: int) -> CiphertextHandle:
        """Encrypt ``value`` as a client would before casting a vote."""
        if value < 0:
            raise InvalidInputError("value", "must be unsigned")
        return self._store(value)

    def pending_requests(self) -> list[PendingDecryption]:
        """Return unfulfilled requests, oldest first."""
        return sorted(self._pending.values(), key=lambda p: p.request_id)

    def fulfill(self, request_id: int) -> tuple[bytes, bytes]:
        """Decrypt a pending request and sign the result.

        The request stays answerable: the oracle may deliver the same
        result more than once, and rejecting duplicates is the
        receiver's job.

        Returns:
            (payload, proof) ready to pass to the callback entry point.

        Raises:
            UnknownRequestError: If the request was never issued.
        """
        pending = self._pending.get(request_id)
        if pending is None:
            raise UnknownRequestError(request_id)
        payload = encode_words([self._plaintexts[h] for h in pending.handles])
        proof = self._signing_key.sign(self._signable(request_id, payload))
        return payload, proof

    def sign(self, request_id: int, payload: bytes) -> bytes:
        """Sign an arbitrary payload as the oracle would."""
        return self._signing_key.sign(self._signable(request_id, payload))

    # =========================================================================
    # Internals
    # =========================================================================

    def _store(self, value: int) -> CiphertextHandle:
        raw = secrets.token_bytes(HANDLE_SIZE)
        while raw in self._plaintexts:
            raw = secrets.token_bytes(HANDLE_SIZE)
        self._plaintexts[raw] = value % self._modulus
        return CiphertextHandle(raw)

    def _lookup(self, raw: bytes) -> int:
        try:
            return self._plaintexts[raw]
        except KeyError:
            raise InvalidInputError("ciphertext", "unknown handle") from None

    @staticmethod
    def _signable(request_id: int, payload: bytes) -> bytes:
        return request_id.to_bytes(WORD_SIZE, "big") + payload
