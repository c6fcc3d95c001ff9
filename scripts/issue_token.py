"""
Print an access token for local use
Run with: python3 -m scripts.issue_token coach-anna --team 1 --team 2
"""
import argparse

from core.auth import create_access_token
from core.roles import UserRole


def main():
    parser = argparse.ArgumentParser(description="Issue a bearer token for the roster API")
    parser.add_argument("subject", help="Who the token is for")
    parser.add_argument("--role", choices=[r.value for r in UserRole], default=UserRole.COACH.value)
    parser.add_argument("--team", dest="teams", type=int, action="append", default=[],
                        help="Team id the coach may manage (repeatable)")
    args = parser.parse_args()

    token = create_access_token(args.subject, role=UserRole(args.role), teams=args.teams)
    print(token)


if __name__ == "__main__":
    main()
