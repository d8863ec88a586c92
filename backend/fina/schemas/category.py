"""Category Schemas — request models per operation, HTTP payload, read model.

Invariants:
    - title: 1-80 chars, stripped, non-empty
    - description optional
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fina.schemas.requests import PagedRequest, Request


class CategoryPayload(BaseModel):
    """Writable category fields — the HTTP body for create and update."""
    title: str = Field(min_length=1, max_length=80)
    description: str | None = None

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title cannot be empty or whitespace")
        return v


class CreateCategoryRequest(Request, CategoryPayload):
    pass


class UpdateCategoryRequest(Request, CategoryPayload):
    id: int = Field(ge=1)


class DeleteCategoryRequest(Request):
    id: int = Field(ge=1)


class GetCategoryByIdRequest(Request):
    id: int = Field(ge=1)


class GetAllCategoriesRequest(PagedRequest):
    pass


class CategoryRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: str
    title: str
    description: str | None = None
