"""Domain value objects for the board.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import Field, field_validator

from board.domain.value.common import RootValueObject, ValueObject


class ReactionKind(str, Enum):
    """Fixed set of reactions attachable to posts and comments.

    No other kinds are accepted at the boundary.
    """

    THUMBS_UP = "thumbs_up"
    HEART = "heart"
    HOPE = "hope"
    CLAP = "clap"

    @property
    def counter_field(self) -> str:
        """Column holding this kind's counter."""
        return f"reaction_{self.value}"

    @property
    def emoji(self) -> str:
        """Emoji shown on the reaction button."""
        return _REACTION_EMOJI[self]

    @property
    def label(self) -> str:
        """Human-readable label."""
        return _REACTION_LABELS[self]

    @classmethod
    def parse_set(cls, value: str | None) -> frozenset["ReactionKind"]:
        """Parse a comma-separated list of kinds, ignoring unknown entries."""
        if not value:
            return frozenset()
        allowed = {kind.value: kind for kind in cls}
        return frozenset(
            allowed[token.strip()]
            for token in value.split(",")
            if token.strip() in allowed
        )

    @classmethod
    def serialize_set(cls, kinds: frozenset["ReactionKind"]) -> str:
        """Serialize kinds in declaration order."""
        return ",".join(kind.value for kind in cls if kind in kinds)


_REACTION_EMOJI = {
    ReactionKind.THUMBS_UP: "\U0001f44d",
    ReactionKind.HEART: "\u2764\ufe0f",
    ReactionKind.HOPE: "\U0001f622",
    ReactionKind.CLAP: "\U0001f64c",
}

_REACTION_LABELS = {
    ReactionKind.THUMBS_UP: "Glad to hear",
    ReactionKind.HEART: "Sending a hug",
    ReactionKind.HOPE: "I understand",
    ReactionKind.CLAP: "I support you",
}


class ReactionCounts(ValueObject):
    """Reaction counters of a post or comment.

    Counters never go negative.
    """

    thumbs_up: int = Field(default=0, ge=0)
    heart: int = Field(default=0, ge=0)
    hope: int = Field(default=0, ge=0)
    clap: int = Field(default=0, ge=0)

    @property
    def total(self) -> int:
        """Sum of all four counters."""
        return self.thumbs_up + self.heart + self.hope + self.clap

    def get(self, kind: ReactionKind) -> int:
        """Counter for a single kind."""
        return getattr(self, kind.value)

    def adjusted(self, kind: ReactionKind, delta: int) -> "ReactionCounts":
        """Return counts with one counter moved by delta, floored at zero."""
        return self.model_copy(
            update={kind.value: max(0, self.get(kind) + delta)}
        )

    def as_dict(self) -> dict[ReactionKind, int]:
        """Counters keyed by kind."""
        return {kind: self.get(kind) for kind in ReactionKind}


class CommentSortOrder(str, Enum):
    """Sort order for comment threads."""

    RECENT = "recent"  # created_at DESC
    SUPPORT = "support"  # total reactions DESC, then created_at DESC


class TagName(RootValueObject[str]):
    """Tag name for categorizing posts.

    Lowercase, 1-30 characters, no commas or whitespace at the edges.
    Examples: 'anxiety', 'self-care', 'work'
    """

    @field_validator("root")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        """Validate tag name format."""
        if not 1 <= len(v) <= 30:
            raise ValueError("Tag name must be 1-30 characters")
        if v != v.strip().lower() or "," in v:
            raise ValueError("Tag name must be lowercase without commas")
        return v


class Slug(RootValueObject[str]):
    """URL-safe slug for posts.

    Must be lowercase, alphanumeric with hyphens, 1-100 characters.
    Examples: 'first-week-at-a-new-job', 'hello-2'
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug format."""
        if not re.match(r"^[a-z0-9]+(?:-[a-z0-9]+)*$", v):
            raise ValueError(
                "Slug must be lowercase alphanumeric with hyphens, "
                "no leading/trailing hyphens or consecutive hyphens"
            )
        if len(v) < 1 or len(v) > 100:
            raise ValueError("Slug must be 1-100 characters")
        return v


class OwnershipToken(RootValueObject[str]):
    """Opaque per-resource secret proving the holder created the resource."""

    @field_validator("root")
    @classmethod
    def validate_token_format(cls, v: str) -> str:
        """Validate token is not empty."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Token must be 1-255 characters")
        return v

    def matches(self, presented: str | None) -> bool:
        """Exact comparison against a presented token; None never matches."""
        return presented is not None and presented == self.root
