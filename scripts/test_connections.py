#!/usr/bin/env python3
"""
Connection Test Script

Run this to verify the database is reachable and the schema is in place.
Usage: python scripts/test_connections.py
"""
from sqlalchemy import inspect

from jobhunter.core.config import get_settings
from jobhunter.db.postgres import check_database_connection, engine
from jobhunter.db.tables import metadata


def main():
    settings = get_settings()
    print("=" * 50)
    print("JOB HUNTER - CONNECTION TEST")
    print("=" * 50)

    print("\n[1] Testing database...")
    print(f"    URL: {engine.url.render_as_string(hide_password=True)}")
    if not check_database_connection():
        print("    ❌ Database: FAILED")
        return 1
    print("    ✅ Database: CONNECTED")

    print("\n[2] Checking tables...")
    existing = set(inspect(engine).get_table_names())
    missing = [name for name in metadata.tables if name not in existing]
    if missing:
        print(f"    ⚠️  Missing tables (created on first server start): {', '.join(missing)}")
    else:
        print("    ✅ All tables present")

    print("\n[3] Checking JWT secret...")
    if settings.uses_default_secret:
        print("    ⚠️  JWT_SECRET_KEY not set, default secret in use")
    else:
        print("    ✅ JWT_SECRET_KEY configured")

    print("\n" + "=" * 50)
    print("Connection test complete!")
    print("=" * 50)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
