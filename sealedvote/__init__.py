"""
SealedVote - Confidential proposal voting with encrypted tallies.

Votes are accepted as opaque ciphertext handles and folded into running
encrypted sums. Nobody, the ledger operator included, can read an
individual choice. Only the aggregate is decrypted, out of band, once the
voting window has closed, and it is committed exactly once after the
decryption oracle's proof has been verified.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
