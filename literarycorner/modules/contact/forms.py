"""Contact and newsletter form validation.

Nothing is delivered anywhere yet: accepted submissions are written to the
log. Hook a mail/CRM integration into `submit_contact` / `subscribe` when
one exists.
"""

from __future__ import annotations

import logging
import re
from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping

logger = logging.getLogger(__name__)

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

NAME_MAX = 100
EMAIL_MAX = 255
SUBJECT_MAX = 200
MESSAGE_MAX = 2000

CONTACT_FIELDS = ("name", "email", "subject", "message")


@dataclass(frozen=True)
class ContactMessage:
    name: str
    email: str
    subject: str
    message: str

    @classmethod
    def from_form(cls, data: Mapping[str, Any]) -> "ContactMessage":
        return cls(**{f: _field(data, f) for f in CONTACT_FIELDS})

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


def _field(data: Mapping[str, Any], name: str) -> str:
    value = data.get(name)
    return value.strip() if isinstance(value, str) else ""


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_RE.match(email or ""))


def validate_contact(data: Mapping[str, Any]) -> Dict[str, str]:
    """Return a field -> message mapping; empty when the form is valid."""
    errors: Dict[str, str] = {}

    name = _field(data, "name")
    if not name:
        errors["name"] = "Name is required"
    elif len(name) > NAME_MAX:
        errors["name"] = f"Name must be less than {NAME_MAX} characters"

    email = _field(data, "email")
    if not email:
        errors["email"] = "Email is required"
    elif not is_valid_email(email):
        errors["email"] = "Please enter a valid email address"
    elif len(email) > EMAIL_MAX:
        errors["email"] = f"Email must be less than {EMAIL_MAX} characters"

    subject = _field(data, "subject")
    if not subject:
        errors["subject"] = "Subject is required"
    elif len(subject) > SUBJECT_MAX:
        errors["subject"] = f"Subject must be less than {SUBJECT_MAX} characters"

    message = _field(data, "message")
    if not message:
        errors["message"] = "Message is required"
    elif len(message) > MESSAGE_MAX:
        errors["message"] = f"Message must be less than {MESSAGE_MAX} characters"

    return errors


def validate_newsletter(data: Mapping[str, Any]) -> Dict[str, str]:
    email = _field(data, "email")
    if not email or not is_valid_email(email) or len(email) > EMAIL_MAX:
        return {"email": "Please enter a valid email address."}
    return {}


def contact_prefill(book_title: str) -> Dict[str, str]:
    """Initial form values for the "Contact to Buy" link on a book page."""
    book_title = (book_title or "").strip()
    if not book_title:
        return {f: "" for f in CONTACT_FIELDS}
    return {
        "name": "",
        "email": "",
        "subject": f"Inquiry about: {book_title}",
        "message": f'I\'m interested in purchasing "{book_title}". Please provide more information.',
    }


def submit_contact(msg: ContactMessage) -> None:
    logger.info("Contact form submitted: %s", msg.to_dict())


def subscribe(email: str) -> None:
    logger.info("Newsletter signup: %s", email.strip())
