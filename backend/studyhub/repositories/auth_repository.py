from typing import List, Optional

from studyhub.core.database import EntityStore
from studyhub.models.base import User


def get_user_by_id(store: EntityStore, user_id: int) -> Optional[User]:
    with store.session() as db:
        return db.get(User, user_id)


def get_user_by_username(store: EntityStore, username: str) -> Optional[User]:
    with store.session() as db:
        return db.query(User).filter(User.username == username).first()


def create_user(store: EntityStore, username: str, password_hash: str, name: str) -> Optional[User]:
    """Insert a user; returns None when the username is already taken."""
    with store.session() as db:
        if db.query(User.id).filter(User.username == username).first() is not None:
            return None
        new_user = User(username=username, password=password_hash, name=name)
        db.add(new_user)
        db.commit()
        db.refresh(new_user)
        return new_user


def get_all_users(store: EntityStore) -> List[User]:
    with store.session() as db:
        return db.query(User).order_by(User.id).all()
