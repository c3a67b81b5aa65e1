"""Catalogue product feed for deployments without a Catalogue domain.

A JSON file lists products as objects with ``product_id``, ``sku`` and
``title``, plus an optional ``"discontinued": true``. Each record is
published on the event relay exactly as the Catalogue domain would publish
it, so seeded products reach the ReviewableProduct projection through the
regular handlers.
"""

import json
from datetime import UTC, datetime
from pathlib import Path

from shared import event_relay

from reviews.domain import logger
from reviews.review.reference_events import PRODUCT_CREATED, PRODUCT_DISCONTINUED

_REQUIRED_KEYS = ("product_id", "sku", "title")


def load_products(path) -> list[dict]:
    records = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(records, list):
        raise ValueError(f"{path}: expected a JSON array of products")

    for position, record in enumerate(records):
        missing = [key for key in _REQUIRED_KEYS if not record.get(key)]
        if missing:
            raise ValueError(f"{path}: product #{position} is missing {', '.join(missing)}")
    return records


def publish_products(records: list[dict]) -> int:
    """Announce every product on the relay. Returns the number of products published."""
    now = datetime.now(UTC)
    for record in records:
        event_relay.publish(
            PRODUCT_CREATED,
            {
                "product_id": str(record["product_id"]),
                "sku": record["sku"],
                "title": record["title"],
                "created_at": now,
            },
        )
        if record.get("discontinued"):
            event_relay.publish(
                PRODUCT_DISCONTINUED,
                {"product_id": str(record["product_id"]), "sku": record["sku"], "discontinued_at": now},
            )

    logger.info("Product feed published", products=len(records))
    return len(records)
