"""
Reviewer identity.

The identity collaborator supplies the current user. The hub treats the
user id as an opaque string and uses the display name for ``created_by``,
reviewer stamps and comment authorship.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, constr


class Identity(BaseModel):
    """The authenticated user acting on the hub."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    user_id: constr(min_length=1, max_length=128)
    email: Optional[str] = None

    def display_name(self, default: str = "You") -> str:
        """Local part of the email address, else ``default``."""
        if self.email:
            local = self.email.split("@", 1)[0].strip()
            if local:
                return local
        return default
