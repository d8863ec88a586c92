"""Category Routes — HTTP surface for CategoryHandler."""

from typing import Annotated

from fastapi import APIRouter, Path, Query, status

from fina.api.dependencies import CategoryHandlerDep, UserIdDep, envelope_response
from fina.schemas.category import (
    CategoryPayload,
    CategoryRead,
    CreateCategoryRequest,
    DeleteCategoryRequest,
    GetAllCategoriesRequest,
    GetCategoryByIdRequest,
    UpdateCategoryRequest,
)
from fina.schemas.envelope import PagedResponse, Response
from fina.schemas.requests import PageFilter

router = APIRouter(prefix="/api/v1/categories", tags=["categories"])


@router.post(
    "", response_model=Response[CategoryRead],
    status_code=status.HTTP_201_CREATED,
)
async def create_category(
    body: CategoryPayload, user_id: UserIdDep, handler: CategoryHandlerDep,
):
    request = CreateCategoryRequest(user_id=user_id, **body.model_dump())
    return envelope_response(await handler.create(request))


@router.get("", response_model=PagedResponse[list[CategoryRead]])
async def list_categories(
    paging: Annotated[PageFilter, Query()],
    user_id: UserIdDep,
    handler: CategoryHandlerDep,
):
    """List the caller's categories ordered by title."""
    request = GetAllCategoriesRequest(user_id=user_id, **paging.model_dump())
    return envelope_response(await handler.get_all(request))


@router.get("/{category_id}", response_model=Response[CategoryRead])
async def get_category(
    category_id: Annotated[int, Path(ge=1)],
    user_id: UserIdDep,
    handler: CategoryHandlerDep,
):
    request = GetCategoryByIdRequest(id=category_id, user_id=user_id)
    return envelope_response(await handler.get_by_id(request))


@router.put("/{category_id}", response_model=Response[CategoryRead])
async def update_category(
    category_id: Annotated[int, Path(ge=1)],
    body: CategoryPayload,
    user_id: UserIdDep,
    handler: CategoryHandlerDep,
):
    request = UpdateCategoryRequest(
        id=category_id, user_id=user_id, **body.model_dump(),
    )
    return envelope_response(await handler.update(request))


@router.delete("/{category_id}", response_model=Response[CategoryRead])
async def delete_category(
    category_id: Annotated[int, Path(ge=1)],
    user_id: UserIdDep,
    handler: CategoryHandlerDep,
):
    request = DeleteCategoryRequest(id=category_id, user_id=user_id)
    return envelope_response(await handler.delete(request))
