"""Reaction routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel

from board.application.usecase.reaction import (
    ToggleCommentReactionRequest,
    ToggleCommentReactionUseCase,
    TogglePostReactionRequest,
    TogglePostReactionUseCase,
    ToggleReactionResponse,
)
from board.config import Settings
from board.domain.error import DomainError
from board.domain.value import Viewer
from board.interface.api.cookies import CookieJar, get_viewer
from board.interface.error import internal_error, to_http_exception

router = APIRouter(tags=["reactions"], route_class=DishkaRoute)


class ReactionAPIRequest(BaseModel):
    """API request for toggling a reaction."""

    kind: str


@router.post("/posts/{slug}/reactions", response_model=ToggleReactionResponse)
async def toggle_post_reaction(
    slug: str,
    request: ReactionAPIRequest,
    response: Response,
    use_case: FromDishka[TogglePostReactionUseCase],
    settings: FromDishka[Settings],
    viewer: Viewer = Depends(get_viewer),
) -> ToggleReactionResponse:
    """Add or remove one of the viewer's reactions on a post.

    Args:
        slug: Post slug
        request: Reaction kind
        response: Outgoing response (for cookies)
        use_case: Toggle post reaction use case from DI
        settings: Application settings
        viewer: Viewer context from cookies

    Returns:
        New counts and the viewer's reactions on the post
    """
    try:
        result = await use_case.execute(
            TogglePostReactionRequest(slug=slug, kind=request.kind, viewer=viewer)
        )
    except DomainError as e:
        logfire.warn("Post reaction rejected", slug=slug, error=str(e))
        raise to_http_exception(e)
    except Exception as e:
        logfire.error("Unexpected error toggling post reaction", error=str(e))
        raise internal_error("toggle reaction")

    CookieJar(response, settings).set_post_reactions(
        result.target_id, result.reactions.viewer_reactions
    )
    return result


@router.post("/comments/{comment_id}/reactions", response_model=ToggleReactionResponse)
async def toggle_comment_reaction(
    comment_id: str,
    request: ReactionAPIRequest,
    response: Response,
    use_case: FromDishka[ToggleCommentReactionUseCase],
    settings: FromDishka[Settings],
    viewer: Viewer = Depends(get_viewer),
) -> ToggleReactionResponse:
    """Add or remove one of the viewer's reactions on a comment.

    Args:
        comment_id: Comment UUID
        request: Reaction kind
        response: Outgoing response (for cookies)
        use_case: Toggle comment reaction use case from DI
        settings: Application settings
        viewer: Viewer context from cookies

    Returns:
        New counts and the viewer's reactions on the comment
    """
    try:
        result = await use_case.execute(
            ToggleCommentReactionRequest(
                comment_id=comment_id, kind=request.kind, viewer=viewer
            )
        )
    except DomainError as e:
        logfire.warn("Comment reaction rejected", comment_id=comment_id, error=str(e))
        raise to_http_exception(e)
    except Exception as e:
        logfire.error("Unexpected error toggling comment reaction", error=str(e))
        raise internal_error("toggle reaction")

    CookieJar(response, settings).set_comment_reactions(
        result.target_id, result.reactions.viewer_reactions
    )
    return result
