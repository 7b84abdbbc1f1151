"""
Request/response mapping for the member API.

Wire payloads are never bound to the Member entity on the v2 paths: each
operation takes its own request DTO, validated by an explicit function before
the service is called, and returns its own response DTO built from the
persisted state.
"""

import logging
from typing import List, Optional

from ..exceptions import ValidationError
from ..models.member import MAX_NAME_LENGTH, Member
from ..schemas.member import (
    CreateMemberRequest,
    CreateMemberResponse,
    MemberDto,
    MemberEntitySchema,
    MemberListResponse,
    UpdateMemberRequest,
    UpdateMemberResponse,
)
from ..services.interfaces import IMemberService

logger = logging.getLogger(__name__)


def _require_name(name: Optional[str]) -> str:
    if name is None:
        raise ValidationError("name is required", {"name": "missing"})
    if not name.strip():
        raise ValidationError("name must not be empty", {"name": "empty"})
    if len(name) > MAX_NAME_LENGTH:
        raise ValidationError(
            f"name must be at most {MAX_NAME_LENGTH} characters", {"name": "too_long"}
        )
    return name


def validate_member_entity(payload: MemberEntitySchema) -> None:
    _require_name(payload.name)


def validate_create_member_request(request: CreateMemberRequest) -> None:
    _require_name(request.name)


def validate_update_member_request(request: UpdateMemberRequest) -> None:
    # Same rule as registration: a name can be changed but not cleared.
    _require_name(request.name)


class MemberApiMapper:
    def __init__(self, service: IMemberService):
        self.service = service

    def register_entity(self, payload: MemberEntitySchema) -> CreateMemberResponse:
        """
        v1 registration: the body mirrors the entity and is copied onto it
        field by field. A client-supplied id is ignored.
        """
        validate_member_entity(payload)
        member = Member(**payload.model_dump(exclude={"id"}))
        member_id = self.service.join(member)
        return CreateMemberResponse(id=member_id)

    def register(self, request: CreateMemberRequest) -> CreateMemberResponse:
        validate_create_member_request(request)
        member = Member(name=request.name)
        member_id = self.service.join(member)
        return CreateMemberResponse(id=member_id)

    def update(self, member_id: int, request: UpdateMemberRequest) -> UpdateMemberResponse:
        """
        Applies the new name, then reads the member back so the response
        reflects what was stored.
        """
        validate_update_member_request(request)
        self.service.update(member_id, request.name)
        member = self.service.find_one(member_id)
        logger.debug("Mapped update response for member %s", member.id)
        return UpdateMemberResponse(id=member.id, name=member.name)

    def list_entities(self) -> List[MemberEntitySchema]:
        return [MemberEntitySchema.model_validate(m) for m in self.service.find_members()]

    def list_members(self) -> MemberListResponse:
        data = [MemberDto.model_validate(m) for m in self.service.find_members()]
        return MemberListResponse(count=len(data), data=data)
