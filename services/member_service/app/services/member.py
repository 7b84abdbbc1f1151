import logging
from typing import List, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..exceptions import DuplicateMemberError, NotFoundError
from ..models.member import Member
from .interfaces import IMemberService

logger = logging.getLogger(__name__)

# Largest id a signed 64-bit integer primary key can hold
MAX_MEMBER_ID = 2**63 - 1


class MemberService(IMemberService):
    def __init__(self, db: Session):
        self.db = db

    def join(self, member: Member) -> int:
        """
        Registers a new member.

        Args:
            member: A transient Member ORM object carrying the name.

        Returns:
            The id assigned to the newly persisted member.

        Raises:
            DuplicateMemberError: If another member already uses the name.
        """
        self._validate_duplicate_name(member.name)
        self.db.add(member)
        self._commit_name(member.name)
        self.db.refresh(member)
        logger.info("Member %s joined", member.id)
        return member.id

    def _validate_duplicate_name(self, name: str, member_id: Optional[int] = None) -> None:
        existing = self.db.query(Member).filter(Member.name == name).all()
        if any(m.id != member_id for m in existing):
            raise DuplicateMemberError(name)

    def update(self, member_id: int, name: str) -> None:
        """
        Changes the name of an existing member. Setting the current name again
        leaves the record unchanged; taking another member's name raises
        DuplicateMemberError.
        """
        member = self.find_one(member_id)
        self._validate_duplicate_name(name, member_id=member_id)
        member.name = name
        self._commit_name(name)
        logger.info("Member %s renamed", member_id)

    def _commit_name(self, name: str) -> None:
        # The unique constraint catches a concurrent request that passed the check
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise DuplicateMemberError(name)

    def find_one(self, member_id: int) -> Member:
        if not 0 < member_id <= MAX_MEMBER_ID:
            raise NotFoundError("Member", member_id)
        member = self.db.get(Member, member_id)
        if member is None:
            raise NotFoundError("Member", member_id)
        return member

    def find_members(self) -> List[Member]:
        return self.db.query(Member).order_by(Member.id).all()
