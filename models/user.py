# models/user.py
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, DateTime, Text, ForeignKey
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


def _utcnow():
    return datetime.now(timezone.utc)


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(Text, nullable=False)
    # unique=True backs up the lookup done before insert
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)

    city = Column(Text, nullable=False, default="")
    experience = Column(Integer, nullable=False, default=0)
    portfolio = Column(Text, nullable=False, default="")
    profile_pic = Column(Text, nullable=False, default="")

    created_at = Column(DateTime, nullable=False, default=_utcnow)

    skill_rows = relationship(
        "UserSkill",
        order_by="UserSkill.position",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    @property
    def skills(self):
        return [row.value for row in self.skill_rows]

    def __repr__(self):
        return f"<User id={self.id} email={self.email!r}>"


class UserSkill(Base):
    __tablename__ = "user_skills"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    position = Column(Integer, nullable=False)
    value = Column(Text, nullable=False)


# stored attribute -> field name in API responses; password_hash is deliberately absent
EXTERNAL_FIELDS = (
    ("name", "name"),
    ("email", "email"),
    ("city", "city"),
    ("skills", "skills"),
    ("experience", "experience"),
    ("portfolio", "portfolio"),
    ("profile_pic", "profilePic"),
    ("created_at", "createdAt"),
)


def _iso(value):
    if value is None:
        return None
    # SQLite hands back naive datetimes; they were written as UTC
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()


def to_external(user: User) -> dict:
    """
    Shape a stored user for responses: the password hash is dropped and the
    storage id is exposed as the string field "uid".
    """
    record = {"uid": str(user.id)}
    for attr, field in EXTERNAL_FIELDS:
        value = getattr(user, attr)
        if attr == "created_at":
            value = _iso(value)
        record[field] = value
    return record
