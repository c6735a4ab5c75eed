"""Tag routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from board.application.usecase.tag import (
    ListTagsRequest,
    ListTagsResponse,
    ListTagsUseCase,
)

router = APIRouter(prefix="/tags", tags=["tags"], route_class=DishkaRoute)


@router.get(
    "",
    response_model=ListTagsResponse,
    summary="List tags",
    description="Every tag used on the board in alphabetical order. "
    "Pass `prefix` to get suggestions while typing.",
)
async def list_tags(
    use_case: FromDishka[ListTagsUseCase],
    prefix: str | None = Query(default=None, max_length=30),
) -> ListTagsResponse:
    return await use_case.execute(ListTagsRequest(prefix=prefix))
