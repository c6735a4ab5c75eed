"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel

from board.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)
from board.config import Settings
from board.domain.error import DomainError
from board.domain.value import CommentSortOrder, Viewer
from board.interface.api.cookies import CookieJar, get_viewer
from board.interface.error import internal_error, to_http_exception

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content: str = ""
    author_alias: str | None = None
    parent_id: str | None = None  # For replies


class UpdateCommentAPIRequest(BaseModel):
    """API request for editing a comment."""

    content: str = ""
    author_alias: str | None = None


@router.get("/posts/{slug}/comments", response_model=GetCommentsResponse)
async def get_comments(
    slug: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    sort: CommentSortOrder | None = None,
    viewer: Viewer = Depends(get_viewer),
) -> GetCommentsResponse:
    """Get the comment thread of a post.

    Args:
        slug: Post slug
        get_comments_use_case: Get comments use case from DI
        sort: recent or support (configured default when omitted)
        viewer: Viewer context from cookies

    Returns:
        Nested comment tree and the ids of replies addressed to the viewer
    """
    try:
        return await get_comments_use_case.execute(
            GetCommentsRequest(slug=slug, sort=sort, viewer=viewer)
        )
    except DomainError as e:
        logfire.warn("Comment thread fetch failed", slug=slug, error=str(e))
        raise to_http_exception(e)
    except Exception as e:
        logfire.error("Unexpected error fetching comments", slug=slug, error=str(e))
        raise internal_error("fetch comments")


@router.post(
    "/posts/{slug}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    slug: str,
    request: CreateCommentAPIRequest,
    response: Response,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    settings: FromDishka[Settings],
) -> CreateCommentResponse:
    """Create a comment on a post, optionally replying to another comment.

    Args:
        slug: Post slug
        request: Comment content, alias and optional parent
        response: Outgoing response (for cookies)
        create_comment_use_case: Create comment use case from DI
        settings: Application settings

    Returns:
        Created comment reference and its ownership token
    """
    try:
        result = await create_comment_use_case.execute(
            CreateCommentRequest(
                slug=slug,
                content=request.content,
                author_alias=request.author_alias,
                parent_id=request.parent_id,
            )
        )
    except DomainError as e:
        logfire.warn("Comment creation rejected", slug=slug, error=str(e))
        raise to_http_exception(e)
    except Exception as e:
        logfire.error("Unexpected error creating comment", slug=slug, error=str(e))
        raise internal_error("create comment")

    CookieJar(response, settings).set_comment_token(
        result.comment_id, result.author_token
    )
    return result


@router.patch("/comments/{comment_id}", response_model=UpdateCommentResponse)
async def update_comment(
    comment_id: str,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    viewer: Viewer = Depends(get_viewer),
) -> UpdateCommentResponse:
    """Edit a comment. Owner only.

    Args:
        comment_id: Comment UUID
        request: New content and alias
        update_comment_use_case: Update comment use case from DI
        viewer: Viewer context from cookies

    Returns:
        Updated comment
    """
    try:
        return await update_comment_use_case.execute(
            UpdateCommentRequest(
                comment_id=comment_id,
                content=request.content,
                author_alias=request.author_alias,
                viewer=viewer,
            )
        )
    except DomainError as e:
        logfire.warn("Comment update rejected", comment_id=comment_id, error=str(e))
        raise to_http_exception(e)
    except Exception as e:
        logfire.error(
            "Unexpected error updating comment", comment_id=comment_id, error=str(e)
        )
        raise internal_error("update comment")


@router.delete("/comments/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: str,
    response: Response,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    settings: FromDishka[Settings],
    viewer: Viewer = Depends(get_viewer),
) -> DeleteCommentResponse:
    """Delete a comment and its replies. Owner or moderator.

    Args:
        comment_id: Comment UUID
        response: Outgoing response (for cookies)
        delete_comment_use_case: Delete comment use case from DI
        settings: Application settings
        viewer: Viewer context from cookies

    Returns:
        Deleted comment reference
    """
    try:
        result = await delete_comment_use_case.execute(
            DeleteCommentRequest(comment_id=comment_id, viewer=viewer)
        )
    except DomainError as e:
        logfire.warn("Comment deletion rejected", comment_id=comment_id, error=str(e))
        raise to_http_exception(e)
    except Exception as e:
        logfire.error(
            "Unexpected error deleting comment", comment_id=comment_id, error=str(e)
        )
        raise internal_error("delete comment")

    CookieJar(response, settings).forget_comment(result.comment_id)
    return result
