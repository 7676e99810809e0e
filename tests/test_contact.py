import logging

import pytest

from literarycorner.modules.contact.forms import contact_prefill, validate_contact, validate_newsletter

VALID = {
    "name": "Ada Reader",
    "email": "ada@example.com",
    "subject": "Hello",
    "message": "Do you have Middlemarch?",
}


def test_valid_contact_has_no_errors():
    assert validate_contact(VALID) == {}


@pytest.mark.parametrize(
    "field, value, message",
    [
        ("name", "   ", "Name is required"),
        ("name", "x" * 101, "Name must be less than 100 characters"),
        ("email", "", "Email is required"),
        ("email", "not-an-email", "Please enter a valid email address"),
        ("email", "a@b", "Please enter a valid email address"),
        ("email", "a" * 250 + "@example.com", "Email must be less than 255 characters"),
        ("subject", "", "Subject is required"),
        ("subject", "s" * 201, "Subject must be less than 200 characters"),
        ("message", "", "Message is required"),
        ("message", "m" * 2001, "Message must be less than 2000 characters"),
    ],
)
def test_contact_field_errors(field, value, message):
    errors = validate_contact(dict(VALID, **{field: value}))
    assert errors == {field: message}


def test_newsletter_validation():
    assert validate_newsletter({"email": "reader@example.com"}) == {}
    assert "email" in validate_newsletter({"email": "reader@"})
    assert "email" in validate_newsletter({})


def test_contact_prefill_from_book():
    form = contact_prefill("Dune")
    assert form["subject"] == "Inquiry about: Dune"
    assert '"Dune"' in form["message"]
    assert contact_prefill("")["subject"] == ""


def test_contact_page_prefilled(client):
    r = client.get("/contact?book=Dune")
    assert r.status_code == 200
    assert b'value="Inquiry about: Dune"' in r.data


def test_contact_post_invalid_rerenders_with_errors(client):
    r = client.post("/contact", data=dict(VALID, email="nope"))
    assert r.status_code == 400
    assert b"Please enter a valid email address" in r.data
    assert b'value="Ada Reader"' in r.data


def test_contact_post_valid_logs_and_redirects(client, caplog):
    with caplog.at_level(logging.INFO, logger="literarycorner.modules.contact.forms"):
        r = client.post("/contact", data=VALID, follow_redirects=True)
    assert r.status_code == 200
    assert b"Thank you for your message!" in r.data
    assert "ada@example.com" in caplog.text


def test_newsletter_post(client):
    r = client.post("/newsletter", data={"email": "reader@example.com", "next": "/about"})
    assert r.status_code == 302
    assert r.headers["Location"].endswith("/about")

    r = client.post("/newsletter", data={"email": "bad", "next": "https://evil.example"}, follow_redirects=True)
    assert b"Please enter a valid email address." in r.data


def test_api_contact(client):
    r = client.post("/api/contact", json=VALID)
    assert r.status_code == 202
    assert r.json["status"] == "received"

    r = client.post("/api/contact", json=dict(VALID, name=""))
    assert r.status_code == 400
    assert r.json["error"]["code"] == "validation_error"
    assert r.json["error"]["details"]["fields"] == {"name": "Name is required"}


def test_api_contact_requires_json(client):
    r = client.post("/api/contact", data="name=x")
    assert r.status_code == 400
    assert r.json["error"]["code"] == "invalid_json"


def test_api_newsletter(client):
    assert client.post("/api/newsletter", json={"email": "x@y.org"}).status_code == 202
    assert client.post("/api/newsletter", json={"email": "x"}).status_code == 400
