from __future__ import annotations

from flask import Blueprint

from literarycorner.app.common.validation import get_json, raise_for_field_errors
from literarycorner.modules.contact.forms import (
    ContactMessage,
    submit_contact,
    subscribe,
    validate_contact,
    validate_newsletter,
)

bp = Blueprint("contact", __name__)


@bp.post("/contact")
def post_contact():
    """POST /api/contact - Validate and accept a contact message."""
    data = get_json()
    raise_for_field_errors(validate_contact(data))

    msg = ContactMessage.from_form(data)
    submit_contact(msg)
    return {"status": "received", "message": "Thank you for your message! We'll get back to you soon."}, 202


@bp.post("/newsletter")
def post_newsletter():
    """POST /api/newsletter - Newsletter signup."""
    data = get_json()
    raise_for_field_errors(validate_newsletter(data))

    subscribe(data["email"])
    return {"status": "subscribed", "message": "Thank you for subscribing to our newsletter!"}, 202
