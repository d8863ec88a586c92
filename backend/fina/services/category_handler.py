"""Category Handler — CRUD and paged listing for a user's categories.

Invariants:
    - Every lookup is scoped by (id, user_id); another user's id is a 404
    - Listing is ordered by title and paged; total_count ignores paging
    - Any persistence failure yields {data: None, code: 500} with a fixed message
"""

import logging

from fina.core.domain_types import UserId
from fina.core.pagination import page_offset
from fina.core.repository_protocols import CategoryRepository
from fina.models.category import Category
from fina.schemas.category import (
    CategoryRead,
    CreateCategoryRequest,
    DeleteCategoryRequest,
    GetAllCategoriesRequest,
    GetCategoryByIdRequest,
    UpdateCategoryRequest,
)
from fina.schemas.envelope import PagedResponse, Response
from fina.services.handler_support import recover_from_failure

logger = logging.getLogger(__name__)

MSG_CREATED = "Category created successfully."
MSG_UPDATED = "Category updated successfully."
MSG_DELETED = "Category deleted successfully."
MSG_NOT_FOUND = "Category not found."
MSG_CREATE_FAILED = "Unable to create the category."
MSG_UPDATE_FAILED = "Unable to update the category."
MSG_DELETE_FAILED = "Unable to delete the category."
MSG_GET_FAILED = "Unable to retrieve the category."
MSG_LIST_FAILED = "Unable to retrieve the categories."


class CategoryHandler:
    """Maps category requests to repository calls and envelopes."""

    def __init__(self, repository: CategoryRepository):
        self._repository = repository

    async def create(self, request: CreateCategoryRequest) -> Response[CategoryRead]:
        try:
            category = Category(
                user_id=request.user_id,
                title=request.title,
                description=request.description,
            )
            await self._repository.add(category)
            logger.info(
                "Category created",
                extra={"user_id": request.user_id, "category_id": category.id},
            )
            return Response[CategoryRead](
                data=CategoryRead.model_validate(category),
                code=201, message=MSG_CREATED,
            )
        except Exception:
            await recover_from_failure(
                self._repository, "create_category", request.user_id,
            )
            return Response[CategoryRead](code=500, message=MSG_CREATE_FAILED)

    async def update(self, request: UpdateCategoryRequest) -> Response[CategoryRead]:
        try:
            category = await self._repository.find_owned(
                request.id, UserId(request.user_id),
            )
            if category is None:
                return Response[CategoryRead](code=404, message=MSG_NOT_FOUND)

            category.title = request.title
            category.description = request.description

            await self._repository.update(category)
            return Response[CategoryRead](
                data=CategoryRead.model_validate(category), message=MSG_UPDATED,
            )
        except Exception:
            await recover_from_failure(
                self._repository, "update_category", request.user_id,
                category_id=request.id,
            )
            return Response[CategoryRead](code=500, message=MSG_UPDATE_FAILED)

    async def delete(self, request: DeleteCategoryRequest) -> Response[CategoryRead]:
        try:
            category = await self._repository.find_owned(
                request.id, UserId(request.user_id),
            )
            if category is None:
                return Response[CategoryRead](code=404, message=MSG_NOT_FOUND)

            snapshot = CategoryRead.model_validate(category)
            await self._repository.remove(category)
            return Response[CategoryRead](data=snapshot, message=MSG_DELETED)
        except Exception:
            await recover_from_failure(
                self._repository, "delete_category", request.user_id,
                category_id=request.id,
            )
            return Response[CategoryRead](code=500, message=MSG_DELETE_FAILED)

    async def get_by_id(self, request: GetCategoryByIdRequest) -> Response[CategoryRead]:
        try:
            category = await self._repository.find_owned(
                request.id, UserId(request.user_id), detached=True,
            )
            if category is None:
                return Response[CategoryRead](code=404, message=MSG_NOT_FOUND)
            return Response[CategoryRead](data=CategoryRead.model_validate(category))
        except Exception:
            await recover_from_failure(
                self._repository, "get_category", request.user_id,
                category_id=request.id,
            )
            return Response[CategoryRead](code=500, message=MSG_GET_FAILED)

    async def get_all(
        self, request: GetAllCategoriesRequest,
    ) -> PagedResponse[list[CategoryRead]]:
        user_id = UserId(request.user_id)
        try:
            categories = await self._repository.find_by_user(
                user_id,
                offset=page_offset(request.page_number, request.page_size),
                limit=request.page_size,
            )
            count = await self._repository.count_by_user(user_id)
            return PagedResponse[list[CategoryRead]](
                data=[CategoryRead.model_validate(c) for c in categories],
                total_count=count,
                page_number=request.page_number,
                page_size=request.page_size,
            )
        except Exception:
            await recover_from_failure(
                self._repository, "list_categories", request.user_id,
            )
            return PagedResponse[list[CategoryRead]](
                code=500, message=MSG_LIST_FAILED,
                page_number=request.page_number, page_size=request.page_size,
            )
