"""ReviewAuthors — users known to the Reviews domain.

Populated by the UserRegistered cross-domain event handler. The CreateReview
handler rejects reviews from users that are not in this projection.
"""

from protean.fields import DateTime, Identifier, String

from reviews.domain import reviews


@reviews.projection
class ReviewAuthor:
    user_id = Identifier(identifier=True, required=True)
    first_name = String()
    last_name = String()
    registered_at = DateTime()
