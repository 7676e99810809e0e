import os
from pathlib import Path

DATA_DIR = Path(__file__).resolve().parent / "static" / "data"


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    JSON_SORT_KEYS = False

    # Static data files (read on every page load)
    BOOKS_DATA_PATH = os.getenv("BOOKS_DATA_PATH", str(DATA_DIR / "books.json"))
    BLOG_DATA_PATH = os.getenv("BLOG_DATA_PATH", str(DATA_DIR / "blog-posts.json"))

    SITE_NAME = os.getenv("SITE_NAME", "The Literary Corner")
    SITE_URL = os.getenv("SITE_URL", "https://yourdomain.com").rstrip("/")
    FEATURED_LIMIT = int(os.getenv("FEATURED_LIMIT", "3"))

    # Comma-separated list
    CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip()]

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
    APP_PORT = int(os.getenv("APP_PORT", "8080"))
