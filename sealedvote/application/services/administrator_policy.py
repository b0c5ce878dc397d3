"""Default authorization policy: a single administrator creates proposals."""

from __future__ import annotations


class SingleAdministratorPolicy:
    """Grants proposal creation to exactly one identity.

    Attributes:
        administrator_id: The privileged identity.
    """

    def __init__(self, administrator_id: str) -> None:
        if not administrator_id:
            raise ValueError("administrator_id is required")
        self.administrator_id = administrator_id

    def can_create_proposal(self, caller: str) -> bool:
        return caller == self.administrator_id
