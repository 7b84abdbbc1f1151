from sqlalchemy import Column, Integer, String

from .database import Base

MAX_NAME_LENGTH = 100


class Member(Base):
    """SQLAlchemy ORM model for shop members"""

    __tablename__ = 'members'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(MAX_NAME_LENGTH), nullable=False, unique=True, index=True)

    def __repr__(self):
        return f"<Member(id={self.id}, name='{self.name}')>"
