# contenthub/api/api.py

import logging
from fastapi import APIRouter
from contenthub.api.endpoints import (
    admin,
    articles,
    auth,
    categories,
    comments,
    contact,
    files,
    posts,
    site_settings,
)

# Set up logging
logger = logging.getLogger(__name__)

api_router = APIRouter()

ROUTERS = [
    (auth.router, "/auth", "auth"),
    (categories.router, "/categories", "categories"),
    (posts.router, "/posts", "posts"),
    (articles.router, "/articles", "articles"),
    (comments.router, "/comments", "comments"),
    (files.router, "/files", "files"),
    (site_settings.router, "/settings", "settings"),
    (admin.router, "/admin", "admin"),
    (contact.router, "/contact", "contact"),
]

for router, prefix, tag in ROUTERS:
    api_router.include_router(router, prefix=prefix, tags=[tag])
    logger.info(f"{tag.capitalize()} router included successfully")
