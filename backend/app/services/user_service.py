"""
Mobile Bazar Backend — User Service
=====================================

What:  Account records and the admin flag, on the `users` collection.
Who:   Called by the users route handlers.

Identity:
    Users are addressed by `email`, never by their generated `_id`.
    Email uniqueness is assumed (the storefront only ever upserts by email)
    and is not enforced here.

Admin role:
    is_admin() is deliberately failure-free: an unknown email, or a database
    that cannot be reached, both answer "not an admin". Callers cannot tell a
    missing account from an unprivileged one.

    grant_admin() performs no check on who is asking. There is no caller
    identity in this API; every grant is logged at WARNING so it can be audited.
"""

import logging
from typing import Optional

from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from app.database import USERS_COLLECTION
from app.exceptions import NotFoundError, ValidationError
from app.schemas.common import InsertAck, UpdateAck
from app.schemas.user import AdminGrant, UserPayload
from app.services.repository import CollectionService, update_ack

logger = logging.getLogger(__name__)

ADMIN_ROLE = "admin"


def _require_email(email: Optional[str]) -> str:
    if email is None or not str(email).strip():
        raise ValidationError(message="'email' is required", field="email")
    return email


class UserService(CollectionService):
    """Business logic layer for user operations."""

    collection_name = USERS_COLLECTION
    resource = "user"

    async def is_admin(self, db: AsyncDatabase, email: str) -> bool:
        """True only when a user with this email exists and has role 'admin'."""
        try:
            user = await self.collection(db).find_one({"email": email})
        except PyMongoError as e:
            logger.warning("Admin check for %s degraded to False: %s", email, str(e))
            return False
        return bool(user) and user.get("role") == ADMIN_ROLE

    async def create_user(self, db: AsyncDatabase, payload: UserPayload) -> InsertAck:
        _require_email(payload.email)
        return await self._insert(db, payload.document())

    async def upsert_user(self, db: AsyncDatabase, payload: UserPayload) -> UpdateAck:
        """
        Update the user with this email, or insert it when none exists.

        Every provided field is `$set`; a client-supplied `_id` is dropped
        because a stored document's `_id` cannot change.

        Raises:
            ValidationError: email missing (→ 400, store untouched)
        """
        email = _require_email(payload.email)
        document = payload.document()
        document.pop("_id", None)

        result = await self._execute(
            "save",
            self.collection(db).update_one({"email": email}, {"$set": document}, upsert=True),
            {"email": email},
        )
        if result.upserted_id is not None:
            logger.info("Created user %s via upsert", email)
        return update_ack(result)

    async def grant_admin(self, db: AsyncDatabase, grant: AdminGrant) -> UpdateAck:
        """
        Give an existing user the admin role.

        Raises:
            ValidationError: email missing (→ 400)
            NotFoundError: no user with this email (→ 404)
        """
        email = _require_email(grant.email)
        logger.warning("Granting admin role to %s (no caller authorization)", email)
        result = await self._execute(
            "update",
            self.collection(db).update_one({"email": email}, {"$set": {"role": ADMIN_ROLE}}),
            {"email": email},
        )
        if result.matched_count == 0:
            raise NotFoundError(resource="user", resource_id=email)
        return update_ack(result)


user_service = UserService()
