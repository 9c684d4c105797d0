#!/usr/bin/env python3
"""
Management commands for a local Wishlist API database.

Usage:
    python manage.py init-db
    python manage.py add-product --id abc123 --name Widget --price 9.99
    python manage.py create-token --email a@x.com --expires 86400

Table names, the database path and the signing secret are read from
the same environment variables as the API (see
``wishlist_api.app.core.config``).  The database path can also be
given with ``--db``.
"""

import argparse
import dataclasses
import sys
from typing import List, Optional

from wishlist_api.app.core.config import Settings, settings as default_settings
from wishlist_api.app.core.db import get_database_path, init_db, upsert_product
from wishlist_api.app.core.security import create_access_token
from wishlist_api.app.schemas.product import Product


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Manage the Wishlist API SQLite database.")
    ap.add_argument("--db", help="Path to SQLite DB file (defaults to DATABASE_URL)")
    sub = ap.add_subparsers(dest="command", required=True)

    sub.add_parser("init-db", help="Create tables and apply migrations")

    product = sub.add_parser("add-product", help="Insert or update a catalog product")
    product.add_argument("--id", required=True, dest="product_id", help="Product identifier (stored upper case)")
    product.add_argument("--name", required=True, help="Product name")
    product.add_argument("--price", required=True, type=float, help="Product price")

    token = sub.add_parser("create-token", help="Print a signed bearer token for local testing")
    token.add_argument("--email", required=True, help="Identity to embed in the token")
    token.add_argument(
        "--expires",
        type=int,
        default=None,
        help="Lifetime in seconds (defaults to ACCESS_TOKEN_EXPIRE_MINUTES)",
    )
    return ap


def main(argv: Optional[List[str]] = None, settings: Optional[Settings] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = settings or default_settings
    if args.db:
        settings = dataclasses.replace(settings, database_url=args.db)

    if args.command == "init-db":
        init_db(settings)
        print(f"[+] Database ready: {get_database_path(settings)}")
        return 0

    if args.command == "add-product":
        if args.price < 0:
            print("[!] Price must not be negative.", file=sys.stderr)
            return 1
        init_db(settings)
        product = Product(product_id=args.product_id.upper(), product_name=args.name, price=args.price)
        upsert_product(settings, product)
        print(f"[+] Saved product {product.product_id}")
        return 0

    if args.command == "create-token":
        expires = args.expires if args.expires is not None else settings.access_token_expire_minutes * 60
        claims = {settings.identity_claim: args.email}
        print(create_access_token(claims, settings.jwt_secret, expires_delta=expires))
        return 0

    return 1


if __name__ == "__main__":
    sys.exit(main())
