# db/user_store.py
from sqlalchemy.exc import IntegrityError

from models.user import User, UserSkill
from utils.errors import ConflictError


class UserStore:
    """
    The only code that talks to the users tables. Returned User objects are
    detached but fully loaded (skills included), so callers can read them
    after the session is gone.
    """

    def __init__(self, database):
        self.database = database

    def find_one(self, email: str):
        with self.database.session() as session:
            return session.query(User).filter(User.email == email).first()

    def get(self, uid: int):
        with self.database.session() as session:
            return session.get(User, uid)

    def find(self, condition=None, newest_first: bool = False):
        """
        Return users matching an SQLAlchemy condition (all users when None).
        newest_first sorts by creation time, most recent first.
        """
        with self.database.session() as session:
            query = session.query(User)
            if condition is not None:
                query = query.filter(condition)
            if newest_first:
                query = query.order_by(User.created_at.desc(), User.id.desc())
            return query.all()

    def insert_one(self, fields: dict) -> int:
        """Insert one user and return the id the database assigned."""
        fields = dict(fields)
        skills = fields.pop("skills", None) or []
        user = User(**fields)
        user.skill_rows = [
            UserSkill(position=position, value=value) for position, value in enumerate(skills)
        ]
        with self.database.session() as session:
            session.add(user)
            try:
                session.commit()
            except IntegrityError as exc:
                # Lost the race against a concurrent registration for the same email
                session.rollback()
                raise ConflictError() from exc
            return user.id


def get_user_store(app) -> UserStore:
    return app.extensions["user_store"]
