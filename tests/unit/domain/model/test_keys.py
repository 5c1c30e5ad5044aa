"""Unit tests for composite keys and expansion plans."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from forum.domain.error import ValidationError
from forum.domain.model import Comment, Entity, Post, Topic
from forum.domain.value import CommentKey, ForumIds, PostKey, TopicKey
from forum.persistence.registry import ENTITY_TABLES


class TestForumIds:
    """Tests for converting boundary identifiers into keys."""

    def test_comment_key_from_full_ids(self):
        ids = ForumIds(topic_id="t", post_id="p", comment_id="c")

        key = ids.comment_key()

        assert key == CommentKey(topic_id="t", post_id="p", comment_id="c")
        assert key.parent() == PostKey(topic_id="t", post_id="p")

    def test_missing_component_raises_validation_error(self):
        ids = ForumIds(topic_id="t")

        with pytest.raises(ValidationError, match="post_id is required"):
            ids.post_key()

    def test_empty_component_raises_validation_error(self):
        ids = ForumIds(topic_id="", post_id="p")

        with pytest.raises(ValidationError, match="topic_id is required"):
            ids.post_key()


    def test_component_with_slash_raises_validation_error(self):
        ids = ForumIds(topic_id="a/b")

        with pytest.raises(ValidationError, match="topic_id must not contain"):
            ids.topic_key()


class TestEntityKey:
    """Tests for key parts and formatting."""

    def test_parent_parts_are_prefix_of_child_parts(self):
        topic = TopicKey(topic_id="t")
        post = PostKey(topic_id="t", post_id="p")
        comment = CommentKey(topic_id="t", post_id="p", comment_id="c")

        assert post.parts()[:1] == topic.parts()
        assert comment.parts()[:2] == post.parts()
        assert str(comment) == "t/p/c"

    def test_key_rejects_empty_identity(self):
        with pytest.raises(PydanticValidationError):
            TopicKey(topic_id="")

    def test_entity_exposes_its_key(self):
        post = Post(id="p", topic_id="t")

        assert post.key == PostKey(topic_id="t", post_id="p")
        assert post.parent_key == TopicKey(topic_id="t")

    @pytest.mark.parametrize(
        "entity",
        [
            Topic(id="t"),
            Post(id="p", topic_id="t"),
            Comment(id="c", topic_id="t", post_id="p"),
        ],
    )
    def test_key_parts_line_up_with_key_columns(self, entity):
        """Each entity's key addresses its row by the table's key columns."""
        mapping = ENTITY_TABLES[type(entity)]
        row = mapping.to_row(entity)

        parts = entity.key.parts()

        assert parts == tuple(row[column] for column in mapping.key_columns)

    def test_base_envelope_has_no_key(self):
        with pytest.raises(NotImplementedError, match="Entity does not define a key"):
            Entity(id="x").key


class TestExpansionPlan:
    """Tests for parsing relation names."""

    def test_dotted_path_expands_nested_levels(self):
        plan = Topic.expansion_plan(["posts.comments"])

        assert plan == {"posts": {"comments": {}}}

    def test_duplicate_paths_merge(self):
        plan = Topic.expansion_plan(["posts", "posts.comments"])

        assert plan == {"posts": {"comments": {}}}

    def test_unknown_relation_raises_validation_error(self):
        with pytest.raises(ValidationError, match="Unknown relation 'authors'"):
            Post.expansion_plan(["authors"])

    def test_unknown_nested_relation_raises_validation_error(self):
        with pytest.raises(ValidationError, match="for comment"):
            Topic.expansion_plan(["posts.comments.replies"])
