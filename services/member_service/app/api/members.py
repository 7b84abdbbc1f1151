from fastapi import APIRouter, Depends, status
from typing import List

from ..schemas.member import (
    CreateMemberRequest,
    CreateMemberResponse,
    ErrorResponse,
    MemberEntitySchema,
    MemberListResponse,
    UpdateMemberRequest,
    UpdateMemberResponse,
)
from ..mappers.member import MemberApiMapper
from .dependencies import get_member_mapper

router = APIRouter()

VALIDATION_ERROR = {422: {"model": ErrorResponse, "description": "Invalid request body"}}
NOT_FOUND = {404: {"model": ErrorResponse, "description": "Member not found"}}
DUPLICATE = {409: {"model": ErrorResponse, "description": "Member name already in use"}}


@router.post(
    "/v1/members",
    response_model=CreateMemberResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a member (entity body)",
    responses={**VALIDATION_ERROR, **DUPLICATE},
)
def save_member_v1(
    member: MemberEntitySchema,
    mapper: MemberApiMapper = Depends(get_member_mapper),
):
    """
    Register a member from a body shaped like the Member entity.

    Binding the entity shape ties the API contract to the persistence model:
    entity changes alter the API and every operation has to share one shape.
    Prefer the v2 endpoint, which takes a dedicated request DTO.
    """
    return mapper.register_entity(member)

@router.post(
    "/v2/members",
    response_model=CreateMemberResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a member",
    responses={**VALIDATION_ERROR, **DUPLICATE},
)
def save_member_v2(
    request: CreateMemberRequest,
    mapper: MemberApiMapper = Depends(get_member_mapper),
):
    """
    Register a member from a dedicated request DTO.
    """
    return mapper.register(request)

@router.post(
    "/v2/members/{id}",
    response_model=UpdateMemberResponse,
    summary="Update member information",
    responses={**VALIDATION_ERROR, **NOT_FOUND, **DUPLICATE},
)
def update_member_v2(
    id: int,
    request: UpdateMemberRequest,
    mapper: MemberApiMapper = Depends(get_member_mapper),
):
    """
    Rename a member and return its stored id and name.
    """
    return mapper.update(id, request)

@router.get("/v1/members", response_model=List[MemberEntitySchema], summary="List members (entity shape)")
def members_v1(mapper: MemberApiMapper = Depends(get_member_mapper)):
    """
    List members in the entity shape, ids included.
    """
    return mapper.list_entities()

@router.get("/v2/members", response_model=MemberListResponse, summary="List members")
def members_v2(mapper: MemberApiMapper = Depends(get_member_mapper)):
    """
    List member names wrapped in a {count, data} object.
    """
    return mapper.list_members()
