"""Cookie handling.

Browsers hold every credential this service knows about: one ownership
token per post or comment they wrote, the reactions they left, and an
optional moderation session. Each request turns those cookies into a
:class:`Viewer`.
"""

from uuid import UUID

from fastapi import Request, Response

from board.config import CookieSettings, ModerationSettings, Settings
from board.domain.value import CommentId, PostId, ReactionKind, Viewer

POST_TOKEN_PREFIX = "post_token_"
COMMENT_TOKEN_PREFIX = "comment_token_"
POST_REACTIONS_PREFIX = "post_reactions_"
COMMENT_REACTIONS_PREFIX = "comment_reactions_"
MODERATION_COOKIE = "moderation_token"


def _suffix_uuid(name: str, prefix: str) -> UUID | None:
    try:
        return UUID(name[len(prefix) :])
    except ValueError:
        return None


def viewer_from_cookies(cookies: dict[str, str]) -> Viewer:
    """Build the viewer context from raw cookies.

    Cookies with malformed ids are ignored, as are unknown reaction kinds.
    """
    post_tokens: dict[PostId, str] = {}
    comment_tokens: dict[CommentId, str] = {}
    post_reactions: dict[PostId, frozenset[ReactionKind]] = {}
    comment_reactions: dict[CommentId, frozenset[ReactionKind]] = {}

    for name, value in cookies.items():
        if not value:
            continue
        if name.startswith(POST_TOKEN_PREFIX):
            if (target := _suffix_uuid(name, POST_TOKEN_PREFIX)) is not None:
                post_tokens[PostId(target)] = value
        elif name.startswith(COMMENT_TOKEN_PREFIX):
            if (target := _suffix_uuid(name, COMMENT_TOKEN_PREFIX)) is not None:
                comment_tokens[CommentId(target)] = value
        elif name.startswith(POST_REACTIONS_PREFIX):
            if (target := _suffix_uuid(name, POST_REACTIONS_PREFIX)) is not None:
                post_reactions[PostId(target)] = ReactionKind.parse_set(value)
        elif name.startswith(COMMENT_REACTIONS_PREFIX):
            if (target := _suffix_uuid(name, COMMENT_REACTIONS_PREFIX)) is not None:
                comment_reactions[CommentId(target)] = ReactionKind.parse_set(value)

    return Viewer(
        post_tokens=post_tokens,
        comment_tokens=comment_tokens,
        post_reactions=post_reactions,
        comment_reactions=comment_reactions,
        moderation_token=cookies.get(MODERATION_COOKIE) or None,
    )


def get_viewer(request: Request) -> Viewer:
    """FastAPI dependency returning the current viewer."""
    return viewer_from_cookies(dict(request.cookies))


class CookieJar:
    """Writes board cookies onto a response.

    All cookies are ``SameSite=Lax``; tokens are also http-only.
    """

    def __init__(self, response: Response, settings: Settings):
        self.response = response
        self.cookies: CookieSettings = settings.cookies
        self.moderation: ModerationSettings = settings.moderation

    def _set(self, name: str, value: str, max_age: int, httponly: bool) -> None:
        self.response.set_cookie(
            key=name,
            value=value,
            max_age=max_age,
            path="/",
            httponly=httponly,
            secure=self.cookies.secure,
            samesite="lax",
        )

    def _delete(self, name: str, httponly: bool) -> None:
        self.response.delete_cookie(
            key=name,
            path="/",
            httponly=httponly,
            secure=self.cookies.secure,
            samesite="lax",
        )

    def set_post_token(self, post_id: str, token: str) -> None:
        self._set(
            POST_TOKEN_PREFIX + post_id,
            token,
            self.cookies.post_token_max_age,
            httponly=True,
        )

    def set_comment_token(self, comment_id: str, token: str) -> None:
        self._set(
            COMMENT_TOKEN_PREFIX + comment_id,
            token,
            self.cookies.comment_token_max_age,
            httponly=True,
        )

    def forget_post(self, post_id: str) -> None:
        self._delete(POST_TOKEN_PREFIX + post_id, httponly=True)
        self._delete(POST_REACTIONS_PREFIX + post_id, httponly=False)

    def forget_comment(self, comment_id: str) -> None:
        self._delete(COMMENT_TOKEN_PREFIX + comment_id, httponly=True)
        self._delete(COMMENT_REACTIONS_PREFIX + comment_id, httponly=False)

    def _set_reactions(self, name: str, kinds: list[ReactionKind]) -> None:
        if not kinds:
            self._delete(name, httponly=False)
            return
        self._set(
            name,
            ReactionKind.serialize_set(frozenset(kinds)),
            self.cookies.reaction_max_age,
            httponly=False,
        )

    def set_post_reactions(self, post_id: str, kinds: list[ReactionKind]) -> None:
        self._set_reactions(POST_REACTIONS_PREFIX + post_id, kinds)

    def set_comment_reactions(
        self, comment_id: str, kinds: list[ReactionKind]
    ) -> None:
        self._set_reactions(COMMENT_REACTIONS_PREFIX + comment_id, kinds)

    def set_moderation_token(self, token: str, max_age: int) -> None:
        self._set(MODERATION_COOKIE, token, max_age, httponly=True)

    def clear_moderation_token(self) -> None:
        self._delete(MODERATION_COOKIE, httponly=True)
