"""EmailAddress value object for validated email addresses."""

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import String

from identity.domain import identity

_FORBIDDEN_CHARACTERS = (";", ",", "(", ")", '"', ":", "<", ">", "[", "]", "\\")


@identity.value_object
class EmailAddress:
    """A validated, case-normalized email address.

    Checks structure only: one @, non-empty local and domain parts, a dotted
    domain, no whitespace, no consecutive dots and no forbidden characters.
    """

    address: String(required=True, max_length=254)

    @invariant.post
    def verify_email_address(self):
        email = self.address
        if email is None:
            return

        def _reject():
            raise ValidationError({"email": [f"Invalid email address: {email!r}"]})

        if any(ch.isspace() for ch in email) or email.count("@") != 1:
            _reject()

        local_part, domain_part = email.split("@", 1)
        for part in (local_part, domain_part):
            if not part or part.startswith(".") or part.endswith(".") or ".." in part:
                _reject()

        if "." not in domain_part:
            _reject()

        for label in domain_part.split("."):
            if label.startswith("-") or label.endswith("-"):
                _reject()

        if any(ch in email for ch in _FORBIDDEN_CHARACTERS):
            _reject()
