"""Store FastAPI application.

Multi-domain web server that processes commands synchronously via HTTP.
Each request is wrapped in the correct domain context based on URL prefix.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload

Outside production the domains exchange events in process (shared.event_relay)
and the product feed in PRODUCT_FEED_FILE (default: data/products.json) is
published at startup, so reviews can be written against the listed products.
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# Domains are initialized at module level so uvicorn workers share them.
# PROTEAN_ENV controls which domain.toml overlay is applied:
#   - "test"       → in-memory providers, synchronous event processing
#   - "production" → PostgreSQL provider, asynchronous event processing
import os
import uuid
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from identity.domain import identity
from reviews.domain import reviews
from reviews.review.product_feed import load_products, publish_products
from reviews.review.reference_events import subscribe_to_relay
from shared.http import install_error_handlers
from shared.logging import add_context, clear_context, current_env

identity.init()
reviews.init()

_DEFAULT_PRODUCT_FEED = Path(__file__).resolve().parent.parent / "data" / "products.json"


def _publish_product_feed() -> None:
    path = os.getenv("PRODUCT_FEED_FILE")
    if path:
        publish_products(load_products(path))
    elif _DEFAULT_PRODUCT_FEED.exists():
        publish_products(load_products(_DEFAULT_PRODUCT_FEED))


# In production the Engine delivers cross-domain events through Redis and
# products come from the Catalogue (or `manage.py seed-products`).
if current_env() not in ("production", "staging"):
    subscribe_to_relay()
    _publish_product_feed()

# ---------------------------------------------------------------------------
# Route-to-domain mapping
# ---------------------------------------------------------------------------
_ROUTE_DOMAIN_MAP = {
    "/api/v1/users": identity,
    "/api/v1/reviews": reviews,
}


def _resolve_domain(path: str):
    """Return the domain for the given request path, or None."""
    for prefix, domain in _ROUTE_DOMAIN_MAP.items():
        if path.startswith(prefix):
            return domain
    return None


def _allowed_origins() -> list[str]:
    return [origin.strip() for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",") if origin.strip()]


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Store API",
    description="E-commerce platform: Identity and Reviews domains",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_allowed_origins(),
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
)

install_error_handlers(app)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the correct Protean domain context for each request."""
    clear_context()
    add_context(request_id=request.headers.get("X-Request-ID") or uuid.uuid4().hex)

    domain = _resolve_domain(request.url.path)
    if domain is not None:
        with domain.domain_context():
            response = await call_next(request)
        return response
    # No domain match: pass through (health check, docs, etc.)
    return await call_next(request)


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from identity.api import router as identity_router  # noqa: E402
from reviews.api import review_router  # noqa: E402

app.include_router(identity_router)
app.include_router(review_router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "domains": {
                "identity": {"name": identity.name},
                "reviews": {"name": reviews.name},
            },
        }
    )
