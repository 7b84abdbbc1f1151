from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Optional


# v1 binds the entity shape directly; v2 uses the request/response DTOs below.

class MemberEntitySchema(BaseModel):
    id: Optional[int] = Field(None, description="Member id, assigned by the server")
    name: Optional[str] = Field(None, description="Member name")

    model_config = ConfigDict(
        from_attributes=True,
        title="Member entity",
    )


class CreateMemberRequest(BaseModel):
    name: Optional[str] = Field(None, description="Member name, must not be empty")

    model_config = ConfigDict(
        title="Member registration request DTO",
        json_schema_extra={"example": {"name": "Alice"}},
    )


class CreateMemberResponse(BaseModel):
    id: int = Field(..., description="Member id")

    model_config = ConfigDict(title="Member registration response DTO")


class UpdateMemberRequest(BaseModel):
    name: Optional[str] = Field(None, description="New member name, must not be empty")

    model_config = ConfigDict(
        title="Member update request DTO",
        json_schema_extra={"example": {"name": "Alicia"}},
    )


class UpdateMemberResponse(BaseModel):
    id: int = Field(..., description="Member id")
    name: str = Field(..., description="Member name")

    model_config = ConfigDict(title="Member update response DTO")


class MemberDto(BaseModel):
    name: str = Field(..., description="Member name")

    model_config = ConfigDict(from_attributes=True, title="Member list item DTO")


class MemberListResponse(BaseModel):
    count: int = Field(..., description="Number of members in data")
    data: List[MemberDto]


class ErrorResponse(BaseModel):
    detail: str
    details: Dict[str, Any] = Field(default_factory=dict)
