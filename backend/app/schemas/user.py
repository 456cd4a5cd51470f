"""
Request schemas for the users collection.

Users are loosely typed documents keyed by `email`. Besides `email` and the
optional `role`, any field the client sends (displayName, photo, ...) is kept.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class UserPayload(BaseModel):
    """
    Body of POST /users and PUT /users.

    `email` is optional at the schema level so that its absence surfaces as
    the uniform 400 validation error raised by the user service.
    """
    model_config = ConfigDict(extra="allow")

    email: Optional[str] = Field(default=None, description="Logical unique key of the user")
    role: Optional[str] = Field(default=None, description="'admin' marks privileged users")

    def document(self) -> Dict[str, Any]:
        """The user document as sent, without null placeholders for omitted fields."""
        return self.model_dump(exclude_unset=True)


class AdminGrant(BaseModel):
    """Body of PUT /users/admin."""
    email: Optional[str] = Field(default=None, description="Email of the user to promote")
