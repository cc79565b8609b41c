# models/post.py

import datetime
import uuid

from sqlalchemy import Column, String, DateTime, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship

from base import Base


def _utcnow():
    return datetime.datetime.now(datetime.timezone.utc)


class Post(Base):
    __tablename__ = 'posts'

    # Insertion order; breaks ties between equal created_at values.
    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(36), unique=True, nullable=False, default=lambda: str(uuid.uuid4()))
    poster_name = Column(String(100), nullable=False)
    content = Column(Text, nullable=False)
    # None for a top-level post.
    reply_to_id = Column(String(36), ForeignKey('posts.id'), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)

    # Parent only; replies are looked up by reply_to_id, never held on the post.
    reply_to = relationship("Post", remote_side=[id], viewonly=True)

    @property
    def is_reply(self):
        return self.reply_to_id is not None

    def to_dict(self):
        return {
            'id': self.id,
            'poster_name': self.poster_name,
            'content': self.content,
            'reply_to_id': self.reply_to_id,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f"<Post(id='{self.id}', poster_name='{self.poster_name}', reply_to_id='{self.reply_to_id}')>"
