"""Tests for MetadataDescriptor."""

from metamatch.match import MetadataDescriptor, MetadataProperty


class TestMetadataDescriptor:
    """Tests for descriptor construction and the property map."""

    def test_from_strings(self):
        descriptor = MetadataDescriptor.from_strings("Entity", ["table=users", "audited"])
        assert descriptor.kind == "Entity"
        assert descriptor.properties == (
            MetadataProperty("table", "users"),
            MetadataProperty("audited", None),
        )

    def test_none_kind_becomes_empty(self):
        """A descriptor always has a kind string."""
        descriptor = MetadataDescriptor.from_strings(None, None)
        assert descriptor.kind == ""
        assert descriptor.properties == ()

    def test_property_map_last_duplicate_wins(self):
        descriptor = MetadataDescriptor.from_strings("K", ["x=1", "x=2"])
        assert descriptor.property_map == {"x": "2"}

    def test_property_map_keeps_absent_values(self):
        descriptor = MetadataDescriptor.from_strings("K", ["flag"])
        assert "flag" in descriptor.property_map
        assert descriptor.property_map["flag"] is None

    def test_from_attributes(self):
        descriptor = MetadataDescriptor.from_attributes(
            {"kind": "Service", "properties": ("scope=singleton",)}
        )
        assert descriptor.kind == "Service"
        assert descriptor.property_map == {"scope": "singleton"}

    def test_from_attributes_single_string_property(self):
        descriptor = MetadataDescriptor.from_attributes({"kind": "K", "properties": "x=1"})
        assert descriptor.property_map == {"x": "1"}

    def test_property_str(self):
        assert str(MetadataProperty("x", "1")) == "x=1"
        assert str(MetadataProperty("flag")) == "flag"
