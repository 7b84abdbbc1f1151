"""
Service Interfaces

Abstract base class for the member service facade. The request mappers hold
an IMemberService reference so tests can hand them any implementation.
"""

from abc import ABC, abstractmethod
from typing import List

from ..models.member import Member


class IMemberService(ABC):
    """Domain operations on members consumed by the presentation layer."""

    @abstractmethod
    def join(self, member: Member) -> int:
        """
        Persist a new member.

        Returns:
            The id assigned to the member.

        Raises:
            DuplicateMemberError: If the name is already taken.
        """

    @abstractmethod
    def update(self, member_id: int, name: str) -> None:
        """
        Rename an existing member.

        Raises:
            NotFoundError: If no member has the given id.
        """

    @abstractmethod
    def find_one(self, member_id: int) -> Member:
        """
        Raises:
            NotFoundError: If no member has the given id.
        """

    @abstractmethod
    def find_members(self) -> List[Member]:
        pass
