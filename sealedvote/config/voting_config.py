"""Voting system configuration.

Frozen configuration with environment variable overrides.

Environment Variables:
- SEALEDVOTE_ADMINISTRATOR_ID: Identity allowed to create proposals (default: admin)
- SEALEDVOTE_MAX_VOTING_DURATION_SECONDS: Longest voting window (default: 365 days)
- SEALEDVOTE_MAX_DESCRIPTION_LENGTH: Longest description (default: 10000)
- SEALEDVOTE_CALLBACK_SELECTOR: Entry point named in decryption requests
  (default: on_decryption_callback)
- SEALEDVOTE_ENVIRONMENT: 'production' or 'development' (default: development)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_MAX_VOTING_DURATION_SECONDS: int = 365 * 24 * 60 * 60
DEFAULT_CALLBACK_SELECTOR: str = "on_decryption_callback"

_ENVIRONMENTS: frozenset[str] = frozenset({"production", "development"})


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_str_env(key: str, default: str) -> str:
    value = os.environ.get(key, "").strip()
    return value or default


@dataclass(frozen=True)
class VotingConfig:
    """Configuration for the confidential voting core.

    Attributes:
        administrator_id: Identity granted proposal creation by the default
            authorization policy.
        max_voting_duration_seconds: Upper bound on a proposal's window.
        max_description_length: Upper bound on description length.
        callback_selector: Entry point the decryption oracle is asked to call.
        environment: 'production' (JSON logs) or 'development' (console logs).
    """

    administrator_id: str = "admin"
    max_voting_duration_seconds: int = DEFAULT_MAX_VOTING_DURATION_SECONDS
    max_description_length: int = 10_000
    callback_selector: str = DEFAULT_CALLBACK_SELECTOR
    environment: str = "development"

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not self.administrator_id.strip():
            raise ValueError("administrator_id must not be empty")
        if self.max_voting_duration_seconds < 1:
            raise ValueError(
                "max_voting_duration_seconds must be positive, "
                f"got {self.max_voting_duration_seconds}"
            )
        if self.max_description_length < 1:
            raise ValueError(
                "max_description_length must be positive, "
                f"got {self.max_description_length}"
            )
        if not self.callback_selector:
            raise ValueError("callback_selector must not be empty")
        if self.environment not in _ENVIRONMENTS:
            raise ValueError(
                f"environment must be one of {sorted(_ENVIRONMENTS)}, "
                f"got {self.environment!r}"
            )

    @classmethod
    def from_environment(cls) -> VotingConfig:
        """Create config from environment variables with defaults."""
        return cls(
            administrator_id=_get_str_env("SEALEDVOTE_ADMINISTRATOR_ID", "admin"),
            max_voting_duration_seconds=_get_int_env(
                "SEALEDVOTE_MAX_VOTING_DURATION_SECONDS",
                DEFAULT_MAX_VOTING_DURATION_SECONDS,
            ),
            max_description_length=_get_int_env(
                "SEALEDVOTE_MAX_DESCRIPTION_LENGTH", 10_000
            ),
            callback_selector=_get_str_env(
                "SEALEDVOTE_CALLBACK_SELECTOR", DEFAULT_CALLBACK_SELECTOR
            ),
            environment=_get_str_env("SEALEDVOTE_ENVIRONMENT", "development").lower(),
        )


DEFAULT_VOTING_CONFIG = VotingConfig()
