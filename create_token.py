#!/usr/bin/env python3
"""
Set the shared chat token in the Ownerbot database.

Creates the database if needed, stores the token under the configured
token key and prints it so it can be pasted into the chat platform's
bot configuration.  Optionally seeds the service directory from a JSON
file in the format produced by the ``export`` command.

Usage:
    python create_token.py --db ./ownerbot.db
    python create_token.py --token "s3cret" --services ./backup.json
"""

import argparse
import asyncio
import json
import secrets
import sys

from ownerbot_api.app.core.config import settings
from ownerbot_api.app.core.db import init_db
from ownerbot_api.app.services.kv_store import SQLiteKeyValueStore


async def main() -> None:
    ap = argparse.ArgumentParser(description="Set the Ownerbot chat token (SQLite).")
    ap.add_argument("--db", help="Path to SQLite DB file. Defaults to DATABASE_URL.")
    ap.add_argument("--token", help="Token to store. A random one is generated if omitted.")
    ap.add_argument("--services", help="Export JSON file to load as the service directory.")
    args = ap.parse_args()

    init_db(args.db)
    store = SQLiteKeyValueStore(args.db)

    token = args.token or secrets.token_urlsafe(32)
    await store.put(settings.token_key, token)
    print(token)

    if args.services:
        with open(args.services, encoding="utf-8") as fh:
            document = json.load(fh)
        if not isinstance(document.get("services"), list):
            print(f"[!] {args.services} has no 'services' list", file=sys.stderr)
            sys.exit(1)
        await store.put(settings.services_key, json.dumps(document))
        print(f"[+] Loaded {len(document['services'])} services", file=sys.stderr)


if __name__ == "__main__":
    asyncio.run(main())
