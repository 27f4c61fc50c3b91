"""Tests for MetadataMatcher."""

import pytest
from loguru import logger

from metamatch import ALWAYS_MATCH, MetaData, MetadataMatcher, Where, matches
from metamatch.match import MetadataDescriptor, parse_expression
from tests.fakes import (
    Account,
    Button,
    Cyclic,
    Plain,
    UserRepository,
    UserService,
    handle_event,
)


@MetaData(kind="K", properties=["x=1"])
class SingleProperty:
    pass


@MetaData(kind="K", properties=["x=1", "x=2"])
class DuplicateProperty:
    pass


@MetaData(kind="K", properties=["x=1", "y", "z="])
class SeveralProperties:
    pass


@MetaData(kind="Foo")
class NoProperties:
    pass


class TestAlwaysMatch:
    """The always-match sentinel skips discovery entirely."""

    @pytest.mark.parametrize("entity", [Plain, Cyclic, UserService, object()])
    def test_sentinel_matches_everything(self, matcher, entity):
        assert matcher.matches(entity, ALWAYS_MATCH) is True

    def test_sentinel_is_where_default(self):
        assert Where().metadata == ALWAYS_MATCH


class TestKindMatching:
    """Tests for the kind selector."""

    def test_no_metadata_never_matches(self, matcher):
        assert matcher.matches(Plain, "*") is False
        assert matcher.matches(Plain, "") is False

    def test_wildcard(self, matcher):
        assert matcher.matches(NoProperties, "*") is True

    def test_exact_kind(self, matcher):
        assert matcher.matches(NoProperties, "Foo") is True
        assert matcher.matches(NoProperties, "Bar") is False

    def test_kind_is_case_sensitive(self, matcher):
        assert matcher.matches(NoProperties, "foo") is False

    def test_meta_annotated_kind(self, matcher):
        assert matcher.matches(UserService, "Service") is True
        assert matcher.matches(UserRepository, "Service") is True
        assert matcher.matches(Button, "Component") is True

    def test_cycle_does_not_match(self, matcher):
        assert matcher.matches(Cyclic, "*") is False


class TestPropertyMatching:
    """Tests for property predicates."""

    def test_presence_only(self, matcher):
        assert matcher.matches(SingleProperty, "K[x]") is True
        assert matcher.matches(SingleProperty, "K[y]") is False

    def test_value_equality(self, matcher):
        assert matcher.matches(SingleProperty, "K[x=1]") is True
        assert matcher.matches(SingleProperty, "K[x=2]") is False

    def test_duplicate_last_wins(self, matcher):
        assert matcher.matches(DuplicateProperty, "K[x=2]") is True
        assert matcher.matches(DuplicateProperty, "K[x=1]") is False

    def test_predicates_are_conjunctive(self, matcher):
        assert matcher.matches(SeveralProperties, "K[x=1][y]") is True
        assert matcher.matches(SeveralProperties, "K[x=2][y]") is False
        assert matcher.matches(SeveralProperties, "K[x=1][w]") is False

    def test_predicate_order_is_irrelevant(self, matcher):
        assert matcher.matches(SeveralProperties, "K[y][x=1]") is True

    def test_bare_property_never_equals_value(self, matcher):
        """A property declared without a value fails any value predicate."""
        assert matcher.matches(SeveralProperties, "K[y=]") is False
        assert matcher.matches(SeveralProperties, "K[y]") is True

    def test_empty_value(self, matcher):
        assert matcher.matches(SeveralProperties, "K[z=]") is True
        assert matcher.matches(SeveralProperties, "K[z=0]") is False

    @pytest.mark.parametrize("query", ["K[]", "K[=1]", "*[=]", "K[x][]"])
    def test_malformed_predicate_never_matches(self, matcher, query):
        assert matcher.matches(SeveralProperties, query) is False

    def test_malformed_predicate_is_logged_as_malformed(self, matcher):
        """The debug trace names the predicate as malformed, not as missing."""
        messages: list[str] = []
        handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
        try:
            assert matcher.matches(SeveralProperties, "K[=1]") is False
        finally:
            logger.remove(handler_id)

        assert any("Malformed predicate" in m for m in messages)
        assert not any("missing from" in m for m in messages)

    def test_wildcard_with_properties(self, matcher):
        assert matcher.matches(Account, "*[table=accounts][audited]") is True
        assert matcher.matches(Account, "*[table=users]") is False

    def test_meta_annotated_properties(self, matcher):
        assert matcher.matches(UserService, "Service[scope=singleton][layer]") is True
        assert matcher.matches(UserService, "Service[scope=prototype]") is False

    def test_function_entity(self, matcher):
        assert matcher.matches(handle_event, "Handler") is True

    def test_idempotent(self, matcher):
        results = {matcher.matches(Account, "Entity[audited]") for _ in range(5)}
        assert results == {True}


class TestMatchesDescriptor:
    """Tests for evaluating parsed expressions directly."""

    def test_matches_descriptor(self, matcher):
        descriptor = MetadataDescriptor.from_strings("K", ["a=1"])
        assert matcher.matches_descriptor(descriptor, parse_expression("K[a=1]")) is True
        assert matcher.matches_descriptor(descriptor, parse_expression("K[a=2]")) is False


class TestStaticModelMatching:
    """Matching over a declared annotation graph."""

    def test_matches(self, static_model, config):
        matcher = MetadataMatcher(static_model, config)
        entity = static_model.entity("app.UserService")

        assert matcher.matches(entity, "Service[scope=singleton]") is True
        assert matcher.matches(entity, "Service[scope]") is True
        assert matcher.matches(entity, "Other") is False

    def test_cycle(self, static_model, config):
        matcher = MetadataMatcher(static_model, config)
        assert matcher.matches(static_model.entity("app.Cyclic"), "*") is False
        assert matcher.matches(static_model.entity("app.Cyclic"), ALWAYS_MATCH) is True


class TestSelect:
    """Tests for MetadataMatcher.select."""

    def test_select_with_query(self, matcher):
        entities = [Plain, UserService, Account, UserRepository]
        assert matcher.select(entities, "Service") == [UserService, UserRepository]

    def test_select_with_where(self, matcher):
        entities = [Plain, UserService, Account]
        assert matcher.select(entities, Where(metadata="Entity[audited]")) == [Account]

    def test_select_default_where_keeps_everything(self, matcher):
        entities = [Plain, UserService, Account]
        assert matcher.select(entities, Where()) == entities


class TestModuleLevelMatches:
    """Tests for the module-level matches helper."""

    def test_matches(self):
        assert matches(UserService, "Service") is True
        assert matches(Plain, "*") is False
