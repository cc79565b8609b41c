import uuid

import pytest

from errors import PostNotFound, PostValidationError


def test_create_post_assigns_id_and_timestamp(store):
    post = store.create_post("John", "Hello there")
    assert uuid.UUID(post.id)
    assert post.created_at is not None
    assert post.reply_to_id is None


def test_create_reply_links_to_parent(store):
    parent = store.create_post("John", "main post")
    reply = store.create_post("Jane", "reply 1", reply_to_id=parent.id)
    assert reply.reply_to_id == parent.id
    assert reply.reply_to.poster_name == "John"


def test_create_post_with_unknown_parent_is_not_found(store):
    with pytest.raises(PostNotFound):
        store.create_post("X", "Y", reply_to_id=str(uuid.uuid4()))


def test_create_post_with_unresolvable_parent_id_is_not_found(store):
    with pytest.raises(PostNotFound) as exc_info:
        store.create_post("X", "Y", reply_to_id="nonexistent-id")
    assert exc_info.value.post_id == "nonexistent-id"


def test_blank_reply_to_id_makes_a_top_level_post(store):
    post = store.create_post("X", "Y", reply_to_id="")
    assert post.reply_to_id is None


def test_empty_poster_name_is_invalid(store):
    with pytest.raises(PostValidationError) as exc_info:
        store.create_post("", "content")
    assert list(exc_info.value.errors) == ["poster_name"]


@pytest.mark.parametrize(
    "poster_name, content, field",
    [
        ("a" * 101, "content", "poster_name"),
        ("name", "", "content"),
        ("name", "c" * 25001, "content"),
        (None, "content", "poster_name"),
    ],
)
def test_out_of_bounds_fields_are_invalid(store, poster_name, content, field):
    with pytest.raises(PostValidationError) as exc_info:
        store.create_post(poster_name, content)
    assert field in exc_info.value.errors


def test_limits_are_inclusive(store):
    post = store.create_post("a" * 100, "c" * 25000)
    assert len(post.poster_name) == 100
    assert len(post.content) == 25000


def test_rejected_post_is_not_stored(store):
    with pytest.raises(PostValidationError):
        store.create_post("", "content")
    assert store.list_top_level_posts() == []


def test_get_post_unknown_id(store):
    with pytest.raises(PostNotFound) as exc_info:
        store.get_post("does-not-exist")
    assert exc_info.value.post_id == "does-not-exist"


def test_list_top_level_posts_newest_first_without_replies(store, make_post):
    first = make_post("First Author", "First post", minute=0)
    second = make_post("Second Author", "Second post", minute=1)
    make_post("Replier", "Reply to first post", reply_to=first, minute=2)

    assert [p.id for p in store.list_top_level_posts()] == [second.id, first.id]


def test_list_replies_to_oldest_first_and_direct_only(store, make_post):
    parent = make_post("John", "main post", minute=0)
    late = make_post("Bob", "late reply", reply_to=parent, minute=5)
    early = make_post("Jane", "early reply", reply_to=parent, minute=1)
    make_post("Carl", "reply to early", reply_to=early, minute=6)

    assert [p.id for p in store.list_replies_to(parent.id)] == [early.id, late.id]


def test_equal_timestamps_fall_back_to_insertion_order(store, make_post):
    a = make_post("John", "main post", minute=0)
    b = make_post("Jane", "reply 1", reply_to=a, minute=0)
    c = make_post("Bob", "reply 2", reply_to=a, minute=0)
    p2 = make_post("Ann", "later post", minute=0)

    assert [p.id for p in store.list_top_level_posts()] == [p2.id, a.id]
    assert [p.id for p in store.list_replies_to(a.id)] == [b.id, c.id]


def test_is_reply(store):
    parent = store.create_post("John", "main post")
    reply = store.create_post("Jane", "reply 1", reply_to_id=parent.id)
    assert not parent.is_reply
    assert reply.is_reply
