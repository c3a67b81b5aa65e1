"""Reviews bounded context: product reviews and likes.

Handles review creation, idempotent like/unlike, and read access by review,
product and author. Knows about users and products only through local
projections fed by Identity and Catalogue events.
"""

from protean.domain import Domain
from shared.logging import configure_logging, get_logger

configure_logging()

reviews = Domain(name="reviews")

logger = get_logger(__name__)
