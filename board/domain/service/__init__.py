"""Domain services."""

from .base import Service
from .comment_service import CommentService, CommentSubmission
from .comment_tree import (
    CommentNode,
    CommentTree,
    build_comment_tree,
    flatten_comment_tree,
    replies_to_viewer,
    sort_comment_tree,
)
from .moderation_service import ModerationService
from .ownership_service import OwnershipService
from .post_service import PostService, PostSubmission
from .reaction_service import ReactionService, ReactionToggle
from .tag_service import TagService

__all__ = [
    "CommentNode",
    "CommentService",
    "CommentSubmission",
    "CommentTree",
    "ModerationService",
    "OwnershipService",
    "PostService",
    "PostSubmission",
    "ReactionService",
    "ReactionToggle",
    "Service",
    "TagService",
    "build_comment_tree",
    "flatten_comment_tree",
    "replies_to_viewer",
    "sort_comment_tree",
]
