"""
Mobile Bazar Backend — User Route Handlers
============================================

What:  Account and admin-role endpoints backed by the `users` collection.
Who:   Called by the storefront after sign-in (save user, check admin)
       and by the admin dashboard (make admin).

Routes:
    GET /users/{email}   {"admin": bool}, never an error
    POST /users          save a new user
    PUT /users           save a user, creating it when the email is new
    PUT /users/admin     give an existing user the admin role

Security Note:
    `admin` is advisory data for the client. No route here checks it, and
    PUT /users/admin does not authenticate its caller.
"""

from fastapi import APIRouter, Depends
from pymongo.asynchronous.database import AsyncDatabase

from app.database import get_database
from app.schemas.common import AdminStatus, ErrorResponse, InsertAck, UpdateAck
from app.schemas.user import AdminGrant, UserPayload
from app.services.user_service import user_service

router = APIRouter(tags=["Users"])


@router.get(
    "/users/{email}",
    response_model=AdminStatus,
    summary="Check whether a user is an admin",
)
async def check_admin(
    email: str,
    db: AsyncDatabase = Depends(get_database),
) -> AdminStatus:
    return AdminStatus(admin=await user_service.is_admin(db, email))


@router.post(
    "/users",
    status_code=201,
    response_model=InsertAck,
    responses={400: {"description": "Missing email", "model": ErrorResponse}},
    summary="Save a new user",
)
async def create_user(
    payload: UserPayload,
    db: AsyncDatabase = Depends(get_database),
) -> InsertAck:
    return await user_service.create_user(db, payload)


@router.put(
    "/users/admin",
    response_model=UpdateAck,
    responses={
        400: {"description": "Missing email", "model": ErrorResponse},
        404: {"description": "User not found", "model": ErrorResponse},
    },
    summary="Grant the admin role",
)
async def grant_admin(
    grant: AdminGrant,
    db: AsyncDatabase = Depends(get_database),
) -> UpdateAck:
    return await user_service.grant_admin(db, grant)


@router.put(
    "/users",
    response_model=UpdateAck,
    responses={400: {"description": "Missing email", "model": ErrorResponse}},
    summary="Save a user, keyed by email",
)
async def upsert_user(
    payload: UserPayload,
    db: AsyncDatabase = Depends(get_database),
) -> UpdateAck:
    return await user_service.upsert_user(db, payload)
