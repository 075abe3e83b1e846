"""
Auth Router

Google sign-in and guest registration. Both paths end in the identity
resolver, which returns the canonical user for the email.
"""
import secrets

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.database import get_db
from app.integrations.google.client import GoogleOAuthClient
from app.models.user import GUEST_ID_PREFIX
from app.routers.deps import get_google_client, get_identity_service
from app.schemas.auth import AuthUrlResponse, GuestLogin, IdentityResponse
from app.services.identity_service import IdentityService


router = APIRouter()

# Mounted without the API prefix: the redirect URI registered with Google
callback_router = APIRouter()


@router.get("/url", response_model=AuthUrlResponse)
async def get_auth_url(google: GoogleOAuthClient = Depends(get_google_client)):
    """URL of the Google consent screen"""
    return AuthUrlResponse(url=google.authorization_url())


@callback_router.get("/auth/callback", response_model=IdentityResponse)
async def oauth_callback(
    code: str = Query(..., description="Authorization code issued by Google"),
    google: GoogleOAuthClient = Depends(get_google_client),
    identity: IdentityService = Depends(get_identity_service),
    db: AsyncSession = Depends(get_db),
):
    """Exchange the authorization code and resolve the Google identity"""
    profile = await google.fetch_profile(code)
    user = await identity.resolve_external_identity(profile.id, profile.email, profile.name)
    await db.commit()
    return user


@router.post("/guest", response_model=IdentityResponse)
async def guest_login(
    payload: GuestLogin,
    identity: IdentityService = Depends(get_identity_service),
    db: AsyncSession = Depends(get_db),
):
    """Register (or re-enter as) a guest user"""
    guest_id = payload.id or f"{GUEST_ID_PREFIX}{secrets.token_hex(5)}"
    email = payload.email or f"{guest_id}@{settings.GUEST_EMAIL_DOMAIN}"
    name = payload.name or "Guest User"
    user = await identity.resolve_guest_identity(guest_id, email, name)
    await db.commit()
    return user
