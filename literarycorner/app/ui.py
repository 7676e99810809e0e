"""Server-rendered pages.

Each view loads its own copy of the data for the request, so nothing here
outlives a single page render.
"""

from __future__ import annotations

import os

from flask import Blueprint, abort, current_app, flash, redirect, render_template, request, send_file, url_for

from literarycorner.app.data import find_by_id, load_blog_posts, load_books
from literarycorner.modules.catalog.engine import Criteria, SortKey, distinct_tags, featured_books, visible_books
from literarycorner.modules.contact.forms import (
    ContactMessage,
    contact_prefill,
    submit_contact,
    subscribe,
    validate_contact,
    validate_newsletter,
)

ui_bp = Blueprint("ui", __name__)

STATIC_DATA = {
    "books.json": "BOOKS_DATA_PATH",
    "blog-posts.json": "BLOG_DATA_PATH",
}


def _books():
    return load_books(current_app.config["BOOKS_DATA_PATH"])


def _posts():
    return load_blog_posts(current_app.config["BLOG_DATA_PATH"])


def _safe_next(target: str | None) -> str:
    # Local paths only.
    if target and target.startswith("/") and not target.startswith("//"):
        return target
    return url_for("ui.home")


@ui_bp.get("/")
def home():
    featured = featured_books(_books(), current_app.config["FEATURED_LIMIT"])
    return render_template("pages/home.html", featured=featured)


@ui_bp.get("/catalog")
def catalog():
    books = _books()
    criteria = Criteria.from_args(request.args)
    items = visible_books(books, criteria)

    return render_template(
        "pages/catalog.html",
        books=items,
        total=len(books),
        tags=distinct_tags(books),
        criteria=criteria,
        sort_keys=list(SortKey),
    )


@ui_bp.get("/book/<book_id>")
def book_detail(book_id: str):
    book = find_by_id(_books(), book_id)
    if not book:
        return render_template("pages/book_not_found.html"), 404
    return render_template("pages/book_detail.html", book=book)


@ui_bp.get("/blog")
def blog():
    return render_template("pages/blog.html", posts=_posts())


@ui_bp.get("/blog/<post_id>")
def blog_post(post_id: str):
    post = find_by_id(_posts(), post_id)
    if not post:
        return render_template("pages/post_not_found.html"), 404
    return render_template("pages/blog_post.html", post=post)


@ui_bp.get("/about")
def about():
    return render_template("pages/about.html")


@ui_bp.get("/contact")
def contact():
    form = contact_prefill(request.args.get("book", ""))
    return render_template("pages/contact.html", form=form, errors={})


@ui_bp.post("/contact")
def contact_post():
    errors = validate_contact(request.form)
    if errors:
        flash("Please fix the errors in the form", "error")
        form = {f: request.form.get(f, "") for f in ("name", "email", "subject", "message")}
        return render_template("pages/contact.html", form=form, errors=errors), 400

    submit_contact(ContactMessage.from_form(request.form))
    flash("Thank you for your message! We'll get back to you soon.", "success")
    return redirect(url_for("ui.contact"))


@ui_bp.post("/newsletter")
def newsletter():
    errors = validate_newsletter(request.form)
    if errors:
        flash(errors["email"], "error")
    else:
        subscribe(request.form["email"])
        flash("Thank you for subscribing to our newsletter!", "success")
    return redirect(_safe_next(request.form.get("next")))


@ui_bp.get("/data/<name>")
def static_data(name: str):
    """The raw JSON files, served the way a static host would."""
    key = STATIC_DATA.get(name)
    if not key:
        abort(404)
    path = current_app.config[key]
    if not os.path.isfile(path):
        abort(404)
    return send_file(os.path.abspath(path), mimetype="application/json")
