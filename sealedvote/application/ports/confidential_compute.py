"""Confidential computation port.

Defines the narrow contract the core consumes from the external
confidential-computation library: opaque ciphertext handles, homomorphic
addition, and the out-of-band decryption protocol.

Contract:
    - add() is commutative and associative, so the order in which votes
      are folded in never changes the aggregate. Overflow behavior is the
      library's concern.
    - request_decryption() returns immediately with an opaque, non-zero
      request id. The plaintext arrives later through the callback entry
      point; nothing blocks waiting for it.
    - verify_authenticity() is the only thing that establishes a payload
      came from the legitimate oracle for that request.
"""

from __future__ import annotations

from typing import Protocol

from sealedvote.domain.models.ciphertext import CiphertextHandle


class ConfidentialComputeProtocol(Protocol):
    """Port for the confidential-computation library.

    Methods:
        encrypt_zero: Fresh encryption of 0.
        add: Homomorphic sum of two handles.
        to_transport_form: 32-byte wire form of a handle.
        from_transport_form: Handle for a client-supplied wire form.
        request_decryption: Submit handles for out-of-band decryption.
        verify_authenticity: Check a decryption result's proof.
    """

    async def encrypt_zero(self) -> CiphertextHandle:
        """Return a new handle encrypting 0."""
        ...

    async def add(
        self,
        left: CiphertextHandle,
        right: CiphertextHandle,
    ) -> CiphertextHandle:
        """Return a handle encrypting the sum of both operands.

        Raises:
            InvalidInputError: If either handle is unknown to the library.
        """
        ...

    async def to_transport_form(self, handle: CiphertextHandle) -> bytes:
        """Return the 32-byte transport form of ``handle``."""
        ...

    async def from_transport_form(self, raw: bytes) -> CiphertextHandle:
        """Resolve a client-supplied transport form to a handle.

        Raises:
            InvalidInputError: If ``raw`` is not a valid handle.
        """
        ...

    async def request_decryption(
        self,
        handles: list[bytes],
        callback_selector: str,
    ) -> int:
        """Submit transport-form handles for decryption.

        Args:
            handles: Handles in the order their plaintexts must be returned.
            callback_selector: Name of the entry point the oracle invokes.

        Returns:
            Non-zero opaque request id.
        """
        ...

    async def verify_authenticity(
        self,
        request_id: int,
        payload: bytes,
        proof: bytes,
    ) -> bool:
        """Check that ``proof`` authenticates ``payload`` for ``request_id``.

        Returns:
            True if authentic. Implementations may also raise on failure.
        """
        ...
