"""Protean Engine runner for Store domains.

Starts Engine workers that process events asynchronously when
event_processing is "async" (the production overlay):
- Identity: projectors such as UserLookup
- Reviews: inbound Identity/Catalogue event handlers feeding the
  ReviewAuthor and ReviewableProduct projections

Usage:
    python src/server.py                   # Run both domain engines
    python src/server.py --domain reviews  # Run only the reviews engine
"""

import argparse
import asyncio

from protean.server.engine import Engine

_DOMAIN_NAMES = ["identity", "reviews"]


def _get_domain(name):
    """Import and initialize a domain by name."""
    if name == "identity":
        from identity.domain import identity

        identity.init()
        return identity
    elif name == "reviews":
        from reviews.domain import reviews

        reviews.init()
        return reviews
    else:
        raise ValueError(f"Unknown domain: {name}")


async def run(domain_names):
    engines = [Engine(_get_domain(name)) for name in domain_names]
    await asyncio.gather(*(engine.run() for engine in engines))


def main():
    parser = argparse.ArgumentParser(description="Store Engine runner")
    parser.add_argument(
        "--domain",
        choices=_DOMAIN_NAMES,
        help="Run a single domain engine (default: run all)",
    )
    args = parser.parse_args()

    domain_names = [args.domain] if args.domain else _DOMAIN_NAMES

    asyncio.run(run(domain_names))


if __name__ == "__main__":
    main()
