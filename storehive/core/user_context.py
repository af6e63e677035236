"""Acting-user context passed to domain services."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserContext:
    """Identity of the user performing the current request.

    Attributes:
        user_id: Recorded in created_by / last_updated_by audit columns
    """

    user_id: int
