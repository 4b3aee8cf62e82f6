"""Print a long-lived bearer token for an existing login.

Usage:
    python create_token.py <login> [days]
"""
import sys

from pitch_planner_api.app.core.security import create_access_token


def main() -> None:
    if len(sys.argv) < 2:
        sys.exit(__doc__)
    login = sys.argv[1].lower()
    days = int(sys.argv[2]) if len(sys.argv) > 2 else 365
    print(create_access_token({"sub": login}, expires_delta=days * 24 * 60 * 60))


if __name__ == "__main__":
    main()
