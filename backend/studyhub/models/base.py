from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text

from studyhub.core.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# Cross-entity references are plain integer ids, not foreign keys: chat
# messages may name users or groups the store has never seen.
# sqlite_autoincrement keeps ids strictly increasing and never reused.


class User(Base):
    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(100), unique=True, nullable=False)
    password = Column(String(128), nullable=False)
    name = Column(String(200), nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    def to_summary_dict(self):
        return {"id": self.id, "name": self.name, "username": self.username}


class StudyGroup(Base):
    __tablename__ = "study_groups"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=False)
    created_by = Column(Integer, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)


class GroupMember(Base):
    __tablename__ = "group_members"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    group_id = Column(Integer, nullable=False, index=True)
    user_id = Column(Integer, nullable=False, index=True)
    joined_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)


class Meeting(Base):
    __tablename__ = "meetings"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(200), nullable=False)
    date = Column(String(50), nullable=False)  # kept as entered, e.g. "2024-05-01"
    time = Column(String(50), nullable=False)  # kept as entered, e.g. "14:30"
    group_id = Column(Integer, nullable=False, index=True)
    created_by = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)


class Note(Base):
    __tablename__ = "notes"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(200), nullable=False)
    file_type = Column(String(50), nullable=False)  # "pdf", "docx", ...
    group_id = Column(Integer, nullable=False, index=True)
    uploaded_by = Column(Integer, nullable=False)
    uploaded_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    file_url = Column(Text, nullable=False)


class Message(Base):
    __tablename__ = "messages"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    content = Column(Text, nullable=False)
    group_id = Column(Integer, nullable=False, index=True)
    user_id = Column(Integer, nullable=False)
    sent_at = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)
