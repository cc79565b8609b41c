from typing import List, NamedTuple

from models.post import Post


class PostThread(NamedTuple):
    """A post paired with its direct replies, oldest reply first."""

    post: Post
    replies: List[Post]

    @property
    def reply_count(self):
        return len(self.replies)

    def to_dict(self):
        data = self.post.to_dict()
        data['replies'] = [reply.to_dict() for reply in self.replies]
        return data


class PostPresenter:
    """
    Builds the view models for the index and show pages.

    Only one level of replies is ever attached: a reply to a reply shows up
    under its own parent, never under the grandparent.
    """

    def __init__(self, store):
        self.store = store

    def render_index(self):
        return [
            PostThread(post, self.store.list_replies_to(post.id))
            for post in self.store.list_top_level_posts()
        ]

    def render_show(self, post_id):
        post = self.store.get_post(post_id)
        return PostThread(post, self.store.list_replies_to(post.id))
