"""Shared request dependencies: Supabase client, identity, stores."""

from __future__ import annotations

import logging

from fastapi import Depends, Header, HTTPException, status

from ..db.supabase import get_supabase_client
from ..models.domain import Profile
from ..persistence.profiles import get_profile_for_user
from ..services.booking import RideSeatStore, SupabaseRideStore
from ..services.geocoding import GeocodingClient

logger = logging.getLogger(__name__)


def get_database():
    client = get_supabase_client()
    if client is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Supabase not configured. Set COVOIT_SUPABASE_URL and COVOIT_SUPABASE_KEY environment variables.",
        )
    return client


def get_ride_store(client=Depends(get_database)) -> RideSeatStore:
    return SupabaseRideStore(client)


def get_geocoding_client() -> GeocodingClient:
    return GeocodingClient()


def _bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def get_current_profile(authorization: str | None = Header(default=None)) -> Profile:
    """Resolve the caller's profile from a Supabase access token; 401 otherwise."""

    token = _bearer_token(authorization)
    if token is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Vous devez être connecté",
            headers={"WWW-Authenticate": "Bearer"},
        )

    client = get_database()
    try:
        user_response = client.auth.get_user(token)
    except Exception as exc:
        logger.info(f"Rejected access token: {exc}")
        user_response = None

    user = getattr(user_response, "user", None)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Session invalide ou expirée",
            headers={"WWW-Authenticate": "Bearer"},
        )

    profile = get_profile_for_user(client, str(user.id))
    if profile is None:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Profil introuvable")
    return profile
