#!/usr/bin/env python3
"""
Provision a profile row for an identity-provider uid.
Run from the project root: python -m scripts.create_profile <uid> --email a@b.c --username alice
or: PYTHONPATH=. python scripts/create_profile.py <uid> ...
"""
import argparse
import os
import sys

# project root on PYTHONPATH
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from postwall.db.session import SessionLocal, init_db
from postwall.services.profiles.service import ProfileService


def main():
    parser = argparse.ArgumentParser(description="Create a user profile")
    parser.add_argument("uid", help="identity provider uid")
    parser.add_argument("--email")
    parser.add_argument("--username")
    parser.add_argument("--subscriber", action="store_true", help="start with an active subscription")
    args = parser.parse_args()

    init_db()
    db = SessionLocal()
    try:
        service = ProfileService(db)
        if service.get(args.uid) is not None:
            print(f"Profile {args.uid} already exists.")
            return
        profile = service.create(
            args.uid,
            email=args.email,
            username=args.username,
            subscription_active=args.subscriber,
        )
        active = profile.subscription.active if profile.subscription else False
        print(f"Created profile {profile.uid} (subscriber: {active})")
    finally:
        db.close()


if __name__ == "__main__":
    main()
