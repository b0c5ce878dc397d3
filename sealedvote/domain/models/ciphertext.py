"""Opaque ciphertext handle value object.

A CiphertextHandle references an encrypted unsigned integer held by the
confidential-computation library. The core never looks inside it: handles
are only passed back to the library for homomorphic addition, conversion
to transport form, or decryption requests.
"""

from __future__ import annotations

from dataclasses import dataclass

# Handles travel as a single 32-byte word
HANDLE_SIZE: int = 32


@dataclass(frozen=True, eq=True)
class CiphertextHandle:
    """Reference to an encrypted value.

    Attributes:
        value: 32-byte handle identifier issued by the library.
    """

    value: bytes

    def __post_init__(self) -> None:
        """Validate handle shape."""
        if not isinstance(self.value, bytes):
            raise TypeError(
                f"handle value must be bytes, got {type(self.value).__name__}"
            )
        if len(self.value) != HANDLE_SIZE:
            raise ValueError(
                f"handle value must be {HANDLE_SIZE} bytes, got {len(self.value)}"
            )

    @classmethod
    def from_hex(cls, text: str) -> CiphertextHandle:
        """Parse a handle from its hex form (``0x`` prefix optional).

        Raises:
            ValueError: If the text is not 64 hex digits.
        """
        raw = text[2:] if text.startswith(("0x", "0X")) else text
        return cls(bytes.fromhex(raw))

    def hex(self) -> str:
        """Return the ``0x``-prefixed hex form of the handle."""
        return "0x" + self.value.hex()

    def short(self) -> str:
        """Return a short prefix suitable for log lines."""
        return self.value.hex()[:8]

    def __repr__(self) -> str:
        return f"CiphertextHandle({self.short()}...)"
