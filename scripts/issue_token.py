#!/usr/bin/env python3
# scripts/issue_token.py

import argparse
import os
import sys
from datetime import timedelta

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from worklog.core.security import create_access_token


def main():
    parser = argparse.ArgumentParser(description="Mint a bearer token for local development")
    parser.add_argument("uid", help="User id placed in the sub claim")
    parser.add_argument(
        "--role",
        dest="roles",
        action="append",
        help="Role to grant; repeat for several. Omit to issue a token without a roles claim",
    )
    parser.add_argument("--minutes", type=int, default=None, help="Lifetime in minutes (default from settings)")
    args = parser.parse_args()

    expires_delta = timedelta(minutes=args.minutes) if args.minutes else None
    token = create_access_token(args.uid, roles=args.roles, expires_delta=expires_delta)

    print(f"Token for {args.uid} (roles: {args.roles or 'none, treated as user'}):")
    print(token)


if __name__ == "__main__":
    main()
