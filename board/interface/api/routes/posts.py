"""Post routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, Field

from board.application.usecase.post import (
    CreatePostRequest,
    CreatePostResponse,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    GetPostRequest,
    GetPostResponse,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    UpdatePostRequest,
    UpdatePostResponse,
    UpdatePostUseCase,
)
from board.config import Settings
from board.domain.error import DomainError
from board.domain.repository.post import PostSortOrder
from board.domain.value import Viewer
from board.interface.api.cookies import CookieJar, get_viewer
from board.interface.error import InvalidQueryError, internal_error, to_http_exception

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class PostAPIRequest(BaseModel):
    """API request for creating or editing a post.

    Lengths are checked by the domain so every problem is reported at once.
    """

    title: str = ""
    content: str = ""
    author_alias: str | None = None
    tags: list[str] | str = Field(default_factory=list)

    def tag_list(self) -> list[str]:
        # Accept both a list and the comma-separated form field
        if isinstance(self.tags, str):
            return self.tags.split(",")
        return self.tags


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    sort: PostSortOrder = PostSortOrder.RECENT,
    tag: str | None = None,
    q: str | None = None,
    limit: int = 30,
    offset: int = 0,
    viewer: Viewer = Depends(get_viewer),
) -> ListPostsResponse:
    """List posts with filtering and pagination.

    Args:
        list_posts_use_case: List posts use case from DI
        sort: Sort order (recent or support)
        tag: Filter by tag name (optional)
        q: Case-insensitive search over title, excerpt and content (optional)
        limit: Maximum number of posts to return (1-100)
        offset: Number of posts to skip
        viewer: Viewer context from cookies

    Returns:
        List of posts
    """
    try:
        # Validate pagination
        if limit < 1 or limit > 100:
            raise InvalidQueryError("Limit must be between 1 and 100")
        if offset < 0:
            raise InvalidQueryError("Offset must be non-negative")
        if q is not None and len(q) > 200:
            raise InvalidQueryError("Search query is too long")

        request = ListPostsRequest(
            sort=sort,
            tag=tag,
            q=q,
            limit=limit,
            offset=offset,
            viewer=viewer,
        )
        return await list_posts_use_case.execute(request)

    except (DomainError, InvalidQueryError) as e:
        logfire.warn("List posts rejected", error=str(e))
        raise to_http_exception(e)
    except Exception as e:
        logfire.error("Unexpected error listing posts", error=str(e))
        raise internal_error("list posts")


@router.post("", response_model=CreatePostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: PostAPIRequest,
    response: Response,
    create_post_use_case: FromDishka[CreatePostUseCase],
    settings: FromDishka[Settings],
) -> CreatePostResponse:
    """Create a new post.

    The ownership token is returned once and also stored in an http-only
    cookie scoped to the new post.

    Args:
        request: Post creation data
        response: Outgoing response (for cookies)
        create_post_use_case: Create post use case from DI
        settings: Application settings

    Returns:
        Created post details
    """
    try:
        result = await create_post_use_case.execute(
            CreatePostRequest(
                title=request.title,
                content=request.content,
                author_alias=request.author_alias,
                tags=request.tag_list(),
            )
        )
    except DomainError as e:
        logfire.warn("Post creation domain error", error=str(e))
        raise to_http_exception(e)
    except Exception as e:
        logfire.error("Unexpected error creating post", error=str(e))
        raise internal_error("create post")

    CookieJar(response, settings).set_post_token(result.post_id, result.author_token)
    return result


@router.get("/{slug}", response_model=GetPostResponse)
async def get_post(
    slug: str,
    get_post_use_case: FromDishka[GetPostUseCase],
    viewer: Viewer = Depends(get_viewer),
) -> GetPostResponse:
    """Get a post by slug.

    Args:
        slug: Post slug
        get_post_use_case: Get post use case from DI
        viewer: Viewer context from cookies

    Returns:
        Post details
    """
    try:
        return await get_post_use_case.execute(GetPostRequest(slug=slug, viewer=viewer))
    except DomainError as e:
        logfire.warn("Post fetch failed", slug=slug, error=str(e))
        raise to_http_exception(e)
    except Exception as e:
        logfire.error("Unexpected error fetching post", slug=slug, error=str(e))
        raise internal_error("fetch post")


@router.patch("/{slug}", response_model=UpdatePostResponse)
async def update_post(
    slug: str,
    request: PostAPIRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    viewer: Viewer = Depends(get_viewer),
) -> UpdatePostResponse:
    """Edit a post.

    Only the holder of the post's ownership token can edit.

    Args:
        slug: Post slug
        request: New title, content, alias and tags
        update_post_use_case: Update post use case from DI
        viewer: Viewer context from cookies

    Returns:
        Updated post details
    """
    try:
        return await update_post_use_case.execute(
            UpdatePostRequest(
                slug=slug,
                title=request.title,
                content=request.content,
                author_alias=request.author_alias,
                tags=request.tag_list(),
                viewer=viewer,
            )
        )
    except DomainError as e:
        logfire.warn("Post update rejected", slug=slug, error=str(e))
        raise to_http_exception(e)
    except Exception as e:
        logfire.error("Unexpected error updating post", slug=slug, error=str(e))
        raise internal_error("update post")


@router.delete("/{slug}", response_model=DeletePostResponse)
async def delete_post(
    slug: str,
    response: Response,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    settings: FromDishka[Settings],
    viewer: Viewer = Depends(get_viewer),
) -> DeletePostResponse:
    """Delete a post and all its comments.

    Allowed for the post's owner or an active moderator.

    Args:
        slug: Post slug
        response: Outgoing response (for cookies)
        delete_post_use_case: Delete post use case from DI
        settings: Application settings
        viewer: Viewer context from cookies

    Returns:
        Deleted post reference
    """
    try:
        result = await delete_post_use_case.execute(
            DeletePostRequest(slug=slug, viewer=viewer)
        )
    except DomainError as e:
        logfire.warn("Post deletion rejected", slug=slug, error=str(e))
        raise to_http_exception(e)
    except Exception as e:
        logfire.error("Unexpected error deleting post", slug=slug, error=str(e))
        raise internal_error("delete post")

    CookieJar(response, settings).forget_post(result.post_id)
    return result
