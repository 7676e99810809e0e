from __future__ import annotations

from flask import Blueprint, current_app

from literarycorner.app.common.errors import abort_json
from literarycorner.app.data import find_by_id, load_blog_posts

bp = Blueprint("blog", __name__)


@bp.get("/posts")
def list_posts():
    """GET /api/posts - All blog posts, in file order."""
    posts = load_blog_posts(current_app.config["BLOG_DATA_PATH"])
    return {"items": [p.to_dict() for p in posts], "count": len(posts)}, 200


@bp.get("/posts/<post_id>")
def get_post(post_id: str):
    """GET /api/posts/<id> - One post with its parsed body."""
    post = find_by_id(load_blog_posts(current_app.config["BLOG_DATA_PATH"]), post_id)
    if not post:
        abort_json(404, "not_found", "Blog post not found")
    return post.to_dict(with_content=True), 200
