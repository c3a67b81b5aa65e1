"""Store database management CLI.

Provides commands to create and drop database schemas for all domains, and
to list catalogue products as reviewable when no Catalogue domain publishes
them.

Usage:
    python src/manage.py setup-db        # Create all tables
    python src/manage.py drop-db         # Drop all tables
    python src/manage.py seed-products   # List data/products.json for reviews
"""

import argparse
import sys
from pathlib import Path

_DOMAIN_NAMES = ["identity", "reviews"]
DEFAULT_PRODUCT_FEED = Path(__file__).resolve().parent.parent / "data" / "products.json"


def _load_domains(names=None):
    from identity.domain import identity
    from reviews.domain import reviews

    all_domains = {"identity": identity, "reviews": reviews}
    return {name: all_domains[name] for name in names} if names else all_domains


def setup_databases(domains=None):
    """Create database schemas for the specified (or all) domains."""
    from shared.database import setup_db

    for name, domain in _load_domains(domains).items():
        print(f"Initializing {name} domain...")
        domain.init()
        print(f"Creating {name} database schema...")
        setup_db(domain)
        print(f"  {name} schema ready.")

    print("Done.")


def drop_databases(domains=None):
    """Drop database schemas for the specified (or all) domains."""
    from shared.database import drop_db

    for name, domain in _load_domains(domains).items():
        print(f"Initializing {name} domain...")
        domain.init()
        print(f"Dropping {name} database schema...")
        drop_db(domain)
        print(f"  {name} schema dropped.")

    print("Done.")


def seed_products(path):
    """Publish a product feed into the reviews domain's ReviewableProduct projection."""
    from reviews.domain import reviews
    from reviews.review.product_feed import load_products, publish_products
    from reviews.review.reference_events import subscribe_to_relay

    print("Initializing reviews domain...")
    reviews.init()
    subscribe_to_relay()
    count = publish_products(load_products(path))
    print(f"  {count} products listed from {path}.")
    print("Done.")


def main():
    parser = argparse.ArgumentParser(description="Store database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    for command, help_text in (("setup-db", "Create all database tables"), ("drop-db", "Drop all database tables")):
        sub = subparsers.add_parser(command, help=help_text)
        sub.add_argument(
            "--domain",
            choices=_DOMAIN_NAMES,
            nargs="*",
            help="Specific domain(s) to target (default: all)",
        )

    seed = subparsers.add_parser("seed-products", help="List catalogue products as reviewable")
    seed.add_argument("--file", default=str(DEFAULT_PRODUCT_FEED), help="JSON product feed")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_databases(args.domain)
    elif args.command == "drop-db":
        drop_databases(args.domain)
    elif args.command == "seed-products":
        seed_products(args.file)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
