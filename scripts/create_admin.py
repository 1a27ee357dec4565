#!/usr/bin/env python3
"""
Admin Bootstrap Script

With AUTH_GATE=signup or AUTH_GATE=all, POST /signup needs an admin
token, so the first admin has to be written straight to the database.

Usage: python scripts/create_admin.py <email> <name>
The password is prompted for.
"""
import sys
sys.path.insert(0, '.')

import argparse
import getpass

from smartclass.core.errors import ConflictError
from smartclass.db.mongodb import close_mongo, connect_mongo, get_mongo_db, init_mongo_indexes
from smartclass.schemas.schemas import SignupRequest
from smartclass.services.auth_service import AuthService


def main(argv=None):
    parser = argparse.ArgumentParser(description="Create a SmartClass admin account")
    parser.add_argument("email")
    parser.add_argument("name")
    args = parser.parse_args(argv)

    password = getpass.getpass("Password: ")
    if not password or password != getpass.getpass("Repeat password: "):
        print("❌ Passwords are empty or do not match")
        return 1

    connect_mongo()
    try:
        db = get_mongo_db()
        init_mongo_indexes(db)
        request = SignupRequest(role="admin", name=args.name, email=args.email, password=password)
        AuthService(db).signup(request)
    except ConflictError as e:
        print(f"❌ {e.message}")
        return 1
    finally:
        close_mongo()

    print(f"✅ Admin created: {request.email.lower()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
