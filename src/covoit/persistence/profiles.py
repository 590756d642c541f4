"""Profile lookup for authenticated users."""

from __future__ import annotations

import logging
from typing import Optional

from ..models.domain import Profile

logger = logging.getLogger(__name__)


def get_profile_for_user(client, user_id: str) -> Optional[Profile]:
    try:
        response = client.table("profiles").select("*").eq("user_id", user_id).limit(1).execute()
    except Exception as e:
        logger.warning(f"Failed to load profile for user {user_id}: {e}")
        return None

    rows = response.data or []
    if not rows:
        return None
    row = rows[0]
    return Profile(
        id=str(row["id"]),
        user_id=str(row["user_id"]),
        full_name=row.get("full_name") or "",
        is_driver=bool(row.get("is_driver")),
        phone_number=row.get("phone_number"),
        rating=row.get("rating"),
        vehicle_brand=row.get("vehicle_brand"),
        vehicle_model=row.get("vehicle_model"),
        vehicle_color=row.get("vehicle_color"),
        license_plate=row.get("license_plate"),
        raw=row,
    )
