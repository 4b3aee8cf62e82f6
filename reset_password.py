#!/usr/bin/env python3
"""
Reset a user's password in the Pitch Planner SQLite database.

The script never reads existing passwords; it stores a new PBKDF2 hash
for the given login.  It can also re-activate a deactivated account.

Usage:
    python reset_password.py --db ./pitch_planner_api/pitch_planner.db --login alice --password "NewStrongPass!234"

If --password is omitted, you will be prompted to enter it securely.
"""

import argparse
import getpass
import os
import sqlite3
import sys
from typing import List, Optional

from pitch_planner_api.app.core.security import hash_password


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Reset a Pitch Planner user's password (SQLite).")
    ap.add_argument("--db", required=True, help="Path to SQLite DB file (e.g., ./pitch_planner_api/pitch_planner.db)")
    ap.add_argument("--login", required=True, help="Login of the user to update")
    ap.add_argument("--password", help="New password. If omitted, you'll be prompted securely.")
    ap.add_argument("--activate", action="store_true", help="Also mark the account as activated")
    args = ap.parse_args(argv)

    if not os.path.exists(args.db):
        print(f"[!] DB not found: {args.db}", file=sys.stderr)
        return 1

    new_password = args.password or getpass.getpass("Enter NEW password: ")
    if not new_password:
        print("[!] Empty password is not allowed.", file=sys.stderr)
        return 1

    login = args.login.lower()
    conn = sqlite3.connect(args.db)
    try:
        cur = conn.cursor()
        cur.execute("SELECT id FROM users WHERE login = ?", (login,))
        if not cur.fetchone():
            print(f"[!] No user found with login: {login}", file=sys.stderr)
            return 2
        if args.activate:
            cur.execute(
                "UPDATE users SET password = ?, activated = 1 WHERE login = ?",
                (hash_password(new_password), login),
            )
        else:
            cur.execute("UPDATE users SET password = ? WHERE login = ?", (hash_password(new_password), login))
        conn.commit()
        print(f"[+] Password updated for user: {login}")
    finally:
        conn.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
