"""Tests for chatkit.core.model.roles — ChatMessageRole enum."""

import pytest

from chatkit.core.model.roles import ChatMessageRole

KNOWN_TAGS = ["system", "user", "assistant", "function"]


class TestChatMessageRole:
    """Members and basic enum behavior."""

    def test_enum_values(self):
        assert ChatMessageRole.SYSTEM.value == "system"
        assert ChatMessageRole.USER.value == "user"
        assert ChatMessageRole.ASSISTANT.value == "assistant"
        assert ChatMessageRole.FUNCTION.value == "function"

    def test_enum_members_count(self):
        assert len(ChatMessageRole) == 4

    def test_enum_is_str_subclass(self):
        """ChatMessageRole inherits from str, so values are usable as plain strings."""
        assert isinstance(ChatMessageRole.USER, str)

    def test_tags_in_declaration_order(self):
        assert ChatMessageRole.tags() == ("system", "user", "assistant", "function")

    def test_no_member_for_unknown_value(self):
        with pytest.raises(ValueError):
            ChatMessageRole("moderator")


class TestFromTag:
    """Lookup of a role by raw tag."""

    @pytest.mark.parametrize(
        "tag,expected",
        [
            ("system", ChatMessageRole.SYSTEM),
            ("user", ChatMessageRole.USER),
            ("assistant", ChatMessageRole.ASSISTANT),
            ("function", ChatMessageRole.FUNCTION),
        ],
        ids=KNOWN_TAGS,
    )
    def test_known_tag(self, tag: str, expected: ChatMessageRole):
        assert ChatMessageRole.from_tag(tag) is expected

    @pytest.mark.parametrize("tag", KNOWN_TAGS)
    def test_lookup_returns_same_instance(self, tag: str):
        assert ChatMessageRole.from_tag(tag) is ChatMessageRole.from_tag(tag)

    def test_unknown_tag_returns_none(self):
        assert ChatMessageRole.from_tag("unknown") is None

    @pytest.mark.parametrize(
        "tag",
        ["System", "USER", "Assistant", " function", "user ", ""],
        ids=["capitalized", "upper", "title", "leading-space", "trailing-space", "empty"],
    )
    def test_match_is_exact(self, tag: str):
        assert ChatMessageRole.from_tag(tag) is None

    @pytest.mark.parametrize("value", [None, 1, b"user", ["user"]], ids=["none", "int", "bytes", "list"])
    def test_non_string_returns_none(self, value):
        assert ChatMessageRole.from_tag(value) is None

    def test_accepts_member(self):
        assert ChatMessageRole.from_tag(ChatMessageRole.ASSISTANT) is ChatMessageRole.ASSISTANT


class TestToTag:
    """Conversion back to the wire string."""

    @pytest.mark.parametrize("tag", KNOWN_TAGS)
    def test_round_trip(self, tag: str):
        assert ChatMessageRole.from_tag(tag).to_tag() == tag

    def test_str_matches_tag(self):
        assert str(ChatMessageRole.SYSTEM) == "system"
        assert str(ChatMessageRole.SYSTEM) != "System"
        assert str(ChatMessageRole.SYSTEM) != "SYSTEM"

    def test_format_matches_tag(self):
        assert f"{ChatMessageRole.FUNCTION}" == "function"

    def test_literals_round_trip_in_order(self):
        converted = [ChatMessageRole.from_tag(tag).to_tag() for tag in KNOWN_TAGS]
        assert converted == KNOWN_TAGS
        assert len(set(converted)) == len(KNOWN_TAGS)


class TestEqualityAndHashing:
    """Value equality consistent with hashing."""

    def test_distinct_roles_are_not_equal(self):
        roles = [ChatMessageRole.from_tag(tag) for tag in KNOWN_TAGS]
        for i, a in enumerate(roles):
            for b in roles[i + 1:]:
                assert a != b

    def test_equal_roles_have_equal_hash(self):
        assert hash(ChatMessageRole.from_tag("user")) == hash(ChatMessageRole.USER)

    def test_usable_as_dict_key(self):
        counts = {ChatMessageRole.USER: 2, ChatMessageRole.ASSISTANT: 1}
        assert counts[ChatMessageRole.from_tag("user")] == 2

    def test_set_membership(self):
        roles = {ChatMessageRole.from_tag(tag) for tag in KNOWN_TAGS + KNOWN_TAGS}
        assert roles == set(ChatMessageRole)

    def test_string_comparison(self):
        """Members compare equal to their plain tag strings."""
        assert ChatMessageRole.USER == "user"
        assert "assistant" == ChatMessageRole.ASSISTANT

    def test_plain_tag_finds_member_key(self):
        counts = {ChatMessageRole.SYSTEM: 1}
        assert counts["system"] == 1
