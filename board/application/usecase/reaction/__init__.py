"""Reaction use cases."""

from .toggle_reaction import (
    ToggleCommentReactionRequest,
    ToggleCommentReactionUseCase,
    TogglePostReactionRequest,
    TogglePostReactionUseCase,
    ToggleReactionResponse,
)

__all__ = [
    "ToggleCommentReactionRequest",
    "ToggleCommentReactionUseCase",
    "TogglePostReactionRequest",
    "TogglePostReactionUseCase",
    "ToggleReactionResponse",
]
