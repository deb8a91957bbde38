"""
Tests for EntityFactory.

WHY: The factory is the only place ids and timestamps are assigned, so
injecting a clock and id generator must fully determine them.
"""

import uuid
from datetime import datetime

from blog_api.models import Comment, EntityFactory, Post, User, utc_now


class TestEntityFactory:
    """Tests for entity construction."""

    def test_new_user_has_id_and_no_timestamp(self, entity_factory):
        user = entity_factory.new_user(email="a@x.com", name="A", age=20)

        assert isinstance(user, User)
        assert user.id == uuid.UUID(int=1)
        assert (user.email, user.name, user.age) == ("a@x.com", "A", 20)
        assert not hasattr(user, "created_at")

    def test_new_user_age_defaults_to_none(self, entity_factory):
        assert entity_factory.new_user(email="a@x.com", name="A").age is None

    def test_new_post_uses_clock(self, entity_factory, fixed_clock):
        owner = uuid.UUID(int=100)
        post = entity_factory.new_post(title="T", content="C", user_id=owner)

        assert isinstance(post, Post)
        assert post.id == uuid.UUID(int=1)
        assert post.user_id == owner
        assert post.created_at == fixed_clock()

    def test_new_comment_uses_clock(self, entity_factory, fixed_clock):
        comment = entity_factory.new_comment(
            content="Nice", post_id=uuid.UUID(int=10), user_id=uuid.UUID(int=20)
        )

        assert isinstance(comment, Comment)
        assert comment.post_id == uuid.UUID(int=10)
        assert comment.user_id == uuid.UUID(int=20)
        assert comment.created_at == fixed_clock()

    def test_each_entity_gets_a_fresh_id(self, entity_factory):
        ids = [
            entity_factory.new_user(email="a@x.com", name="A").id,
            entity_factory.new_post(title="T", content="C", user_id=uuid.UUID(int=9)).id,
            entity_factory.new_comment(
                content="c", post_id=uuid.UUID(int=8), user_id=uuid.UUID(int=9)
            ).id,
        ]
        assert ids == [uuid.UUID(int=1), uuid.UUID(int=2), uuid.UUID(int=3)]

    def test_defaults_to_uuid4_and_utc_now(self):
        """
        Verify the production defaults.

        WHY: Without injection, ids must be random and timestamps current.
        """
        factory = EntityFactory()
        before = utc_now()
        post = factory.new_post(title="T", content="C", user_id=uuid.uuid4())
        after = utc_now()

        assert post.id.version == 4
        assert before <= post.created_at <= after


def test_utc_now_is_naive():
    assert utc_now().tzinfo is None
    assert isinstance(utc_now(), datetime)
