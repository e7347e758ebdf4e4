"""schemas/shared.py — Reusable building blocks shared across schema modules."""

from pydantic import BaseModel, ConfigDict, Field


class SuccessResponse(BaseModel):
    success: bool = True


class MessageResponse(BaseModel):
    success: bool
    message: str


class InsertResult(BaseModel):
    """Shape of a single-document insert, as reported by the driver."""
    model_config = ConfigDict(populate_by_name=True)

    acknowledged: bool
    inserted_id: str = Field(alias="insertedId")


class DeleteResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    acknowledged: bool
    deleted_count: int = Field(alias="deletedCount")
