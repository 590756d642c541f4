#!/usr/bin/env python3
"""Helper script to check and create .env file for Supabase configuration."""

from pathlib import Path
import os
import sys

TEMPLATE = """# Supabase Configuration (Required for rides and reservations)
# Get these from: https://supabase.com/dashboard -> Your Project -> Settings -> API
COVOIT_SUPABASE_URL=https://your-project-id.supabase.co
COVOIT_SUPABASE_KEY=your-service-role-key-here

# API Configuration
COVOIT_API_PREFIX=/api
# COVOIT_FRONTEND_ALLOWED_ORIGINS accepts a JSON array or comma-separated list

# Pricing (moto_taxi_parity, fuel_sharing, fuel_wear_toll_sharing)
COVOIT_PRICING_MODEL=moto_taxi_parity
COVOIT_ZEM_BASE_PRICE=200
COVOIT_ZEM_PER_KM_RATE=100
"""


def _mask(value: str) -> str:
    return value[:20] + "..." + value[-10:] if len(value) > 30 else value


def main() -> None:
    project_root = Path(__file__).parent
    env_file = project_root / ".env"

    print("=" * 60)
    print("Supabase Environment Variables Checker")
    print("=" * 60)

    if not env_file.exists():
        env_file.write_text(TEMPLATE, encoding="utf-8")
        print(f"Created template .env file at: {env_file}")
        print("Please edit .env and add your Supabase credentials.")
        return

    print(f"Found .env file at: {env_file}")
    for name in ("COVOIT_SUPABASE_URL", "COVOIT_SUPABASE_KEY"):
        value = os.getenv(name)
        print(f"{name} (from environment): {_mask(value) if value else 'not set'}")

    sys.path.insert(0, str(project_root / "src"))
    try:
        from covoit.config import settings
    except Exception as e:
        print(f"Error loading config: {e}")
        return

    if settings.supabase_url and settings.supabase_key:
        print("SUCCESS: Supabase is configured!")
    else:
        print("ERROR: Supabase is NOT configured")
        print("Make sure variables start with the COVOIT_ prefix and restart the backend.")


if __name__ == "__main__":
    main()
