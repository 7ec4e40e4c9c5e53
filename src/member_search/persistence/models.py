from __future__ import annotations

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    """Declarative base for the member search tables."""


class TeamModel(Base):
    __tablename__ = "teams"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String, nullable=False)

    members: Mapped[list[MemberModel]] = relationship(back_populates="team")


class MemberModel(Base):
    """
    A member belongs to at most one team (many-to-one, nullable).
    """

    __tablename__ = "members"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String, nullable=False, index=True)
    age: Mapped[int | None] = mapped_column(Integer, nullable=True)
    team_id: Mapped[int | None] = mapped_column(
        ForeignKey("teams.id"), nullable=True, index=True
    )

    team: Mapped[TeamModel | None] = relationship(back_populates="members")

    def __repr__(self) -> str:
        return (
            f"MemberModel(id={self.id!r}, username={self.username!r}, "
            f"age={self.age!r}, team_id={self.team_id!r})"
        )
