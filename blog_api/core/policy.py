# File: blog_api/core/policy.py

"""
Post access rules.

Both predicates are pure: they look only at the post they are given and the
caller's user id (None for anonymous requests). Looking the post up, and
turning a False into a 403/404, is the caller's job.
"""

from typing import Optional, Protocol


class OwnedPost(Protocol):
    author_id: str
    published: bool


def is_author(post: OwnedPost, caller_id: Optional[str]) -> bool:
    return caller_id is not None and caller_id == post.author_id


def can_read(post: OwnedPost, caller_id: Optional[str]) -> bool:
    """Published posts are public; drafts are visible to their author only."""
    return bool(post.published) or is_author(post, caller_id)


def can_mutate(post: OwnedPost, caller_id: Optional[str]) -> bool:
    """Only the author may update or delete a post."""
    return is_author(post, caller_id)
