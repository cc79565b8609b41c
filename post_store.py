import logging

import pydantic
from sqlalchemy.exc import SQLAlchemyError

from errors import PostNotFound, PostValidationError
from models.post import Post
from pydantic_schemas.post_create import PostCreate

logger = logging.getLogger(__name__)


class PostStore:
    """
    Reads and writes Post rows through a SQLAlchemy session.

    Posts are never updated once created. Replies are found by querying on
    reply_to_id, so a post does not carry its replies.
    """

    def __init__(self, db):
        self.db = db

    def list_top_level_posts(self):
        """Posts that are not replies, newest first."""
        return (
            self.db.query(Post)
            .filter(Post.reply_to_id.is_(None))
            .order_by(Post.created_at.desc(), Post.seq.desc())
            .all()
        )

    def get_post(self, post_id):
        post = self.db.query(Post).filter(Post.id == str(post_id)).first() if post_id else None
        if post is None:
            raise PostNotFound(post_id)
        return post

    def list_replies_to(self, post_id):
        """Direct replies to post_id, oldest first. Replies to those replies are not included."""
        return (
            self.db.query(Post)
            .filter(Post.reply_to_id == str(post_id))
            .order_by(Post.created_at.asc(), Post.seq.asc())
            .all()
        )

    def create_post(self, poster_name, content, reply_to_id=None):
        """
        Validates and inserts a new post.

        Raises PostValidationError when a field is out of bounds and
        PostNotFound when reply_to_id does not name an existing post.
        """
        try:
            data = PostCreate(poster_name=poster_name, content=content, reply_to_id=reply_to_id)
        except pydantic.ValidationError as e:
            raise PostValidationError.from_pydantic(e) from e

        parent_id = None
        if data.reply_to_id is not None:
            parent_id = self.get_post(data.reply_to_id).id

        new_post = Post(
            poster_name=data.poster_name,
            content=data.content,
            reply_to_id=parent_id,
        )
        try:
            self.db.add(new_post)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

        logger.info("Created post %s (reply to %s)", new_post.id, parent_id)
        return new_post
