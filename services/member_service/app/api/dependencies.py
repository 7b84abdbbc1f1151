from sqlalchemy.orm import Session
from fastapi import Depends

from ..mappers.member import MemberApiMapper
from ..services.member import MemberService
from ..models.database import get_db

def get_member_service(db: Session = Depends(get_db)):
    return MemberService(db)

def get_member_mapper(service: MemberService = Depends(get_member_service)):
    return MemberApiMapper(service)
