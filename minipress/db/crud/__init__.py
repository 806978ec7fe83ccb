"""CRUD operations module."""

from minipress.db.crud.posts import (
    create_post,
    delete_post,
    get_post,
    get_posts,
    update_post,
)
from minipress.db.crud.users import (
    create_user,
    delete_user,
    get_user,
    get_user_by_github_id,
    get_users,
    update_user,
)

__all__ = [
    "create_post",
    "create_user",
    "delete_post",
    "delete_user",
    "get_post",
    "get_posts",
    "get_user",
    "get_user_by_github_id",
    "get_users",
    "update_post",
    "update_user",
]
