#!/usr/bin/env python3
"""
Bootstrap Admin Script

Admin accounts can only be created by another admin through the API, so
the very first one has to be inserted directly.

Usage: python scripts/create_admin.py --email admin@example.com --full-name "Site Admin"
       (the password is prompted for unless --password is given)
"""
import argparse
import getpass

from jobhunter.core.errors import JobHunterError
from jobhunter.db.postgres import engine
from jobhunter.db.tables import metadata
from jobhunter.schemas.schemas import CreateAdminRequest
from jobhunter.services.account_service import get_account_service


def main():
    parser = argparse.ArgumentParser(description="Create an admin account")
    parser.add_argument("--email", required=True)
    parser.add_argument("--full-name", required=True)
    parser.add_argument("--password")
    parser.add_argument("--level", type=int, default=5, help="admin level 1-5")
    args = parser.parse_args()

    password = args.password or getpass.getpass("Password: ")
    data = CreateAdminRequest(
        email=args.email,
        password=password,
        full_name=args.full_name,
        admin_level=args.level,
    )

    metadata.create_all(bind=engine)
    try:
        user = get_account_service().create_admin(data)
    except JobHunterError as e:
        print(f"❌ {e.message}")
        return 1

    print(f"✅ Admin created: {user.email} ({user.id})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
