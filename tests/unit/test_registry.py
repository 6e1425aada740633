"""Field registry tests."""

import pytest
from hypothesis import given, strategies as st

from canvas_assist.fields import (
    FieldDescriptor,
    FieldRegistry,
    FieldType,
    RegistryError,
    SETTING_GROUPS,
    field,
    group_by_group,
    group_info,
    resolve_settings_subset,
    resolve_style_subset,
)


@pytest.mark.unit
def test_smart_object_id_wins_over_type(registry):
    """Registered smart object id takes precedence."""
    fields = registry.resolve("div", "smart-hero-section")
    assert fields[0].name == "mainTitle"


@pytest.mark.unit
def test_unregistered_smart_object_falls_back_to_type(registry):
    fields = registry.resolve("button", "smart-unknown")
    assert [f.name for f in fields] == ["text", "href", "size", "variant", "disabled"]


@pytest.mark.unit
def test_unknown_type_uses_default(registry):
    fields = registry.resolve("marquee")
    assert [f.name for f in fields] == ["id", "classes", "tagName", "width", "height"]


@pytest.mark.unit
def test_missing_type_uses_default(registry):
    assert registry.resolve(None) == registry.resolve("default")


@pytest.mark.unit
def test_resolve_is_stable(registry):
    """Same inputs always give the same ordered sequence."""
    assert registry.resolve("div") == registry.resolve("div")
    assert registry.resolve("div") is registry.resolve("div")


@pytest.mark.unit
def test_button_style_subset_is_empty(registry):
    """Button only has content and configuration fields."""
    assert resolve_style_subset(registry.resolve("button")) == ()


@pytest.mark.unit
def test_div_style_subset_preserves_order(registry):
    subset = resolve_style_subset(registry.resolve("div"))
    assert [f.name for f in subset] == [
        "width", "height", "padding", "margin",
        "backgroundColor", "borderColor", "borderWidth", "borderRadius",
    ]


@pytest.mark.unit
def test_style_subset_custom_groups(registry):
    subset = resolve_style_subset(registry.resolve("div"), ["style"])
    assert [f.name for f in subset] == ["backgroundColor", "borderColor", "borderWidth", "borderRadius"]


@pytest.mark.unit
def test_settings_subset_is_complement(registry):
    fields = registry.resolve("smart-hero-section")
    style = resolve_style_subset(fields)
    settings = resolve_settings_subset(fields)

    assert len(style) + len(settings) == len(fields)
    assert not set(style) & set(settings)


@pytest.mark.unit
def test_group_by_group_first_seen_order(registry):
    grouped = group_by_group(registry.resolve("smart-hero-section"))
    assert list(grouped) == ["content", "media", "cta", "layout", "dimensions"]
    assert [f.name for f in grouped["media"]] == ["backgroundImage", "heroImage"]


@pytest.mark.unit
def test_group_by_group_general_bucket():
    fields = [field("text", "a", "A"), field("text", "b", "B", "content")]
    assert list(group_by_group(fields)) == ["general", "content"]


@pytest.mark.unit
def test_image_asset_alias():
    descriptor = field("image-asset", "src", "Source", "media")
    assert descriptor.type == FieldType.IMAGE


@pytest.mark.unit
def test_descriptor_is_frozen():
    descriptor = field("text", "title", "Title")
    with pytest.raises(Exception):
        descriptor.name = "other"


@pytest.mark.unit
def test_duplicate_names_rejected():
    with pytest.raises(RegistryError, match="title"):
        FieldRegistry({"card": [field("text", "title", "A"), field("text", "title", "B")]})


@pytest.mark.unit
def test_registry_copies_tables():
    table = {"card": [field("text", "title", "Title")]}
    registry = FieldRegistry(table)
    table["card"].append(field("text", "extra", "Extra"))

    assert [f.name for f in registry.resolve("card")] == ["title"]
    assert "card" in registry


@pytest.mark.unit
def test_group_info():
    assert group_info("cta").name == "Call to Action"
    unknown = group_info("mystery")
    assert unknown.name == "mystery"
    assert unknown.icon == "config"
    assert "dimensions" in SETTING_GROUPS


field_strategy = st.builds(
    FieldDescriptor,
    type=st.sampled_from(list(FieldType)),
    name=st.text(alphabet="abcdefgh", min_size=1, max_size=6),
    label=st.just("Label"),
    group=st.one_of(st.none(), st.sampled_from(["content", "style", "layout", "media"])),
)


@pytest.mark.unit
@given(st.lists(field_strategy, max_size=20))
def test_grouping_preserves_fields(fields):
    """Property: grouping loses nothing and keeps relative order."""
    grouped = group_by_group(fields)
    flattened = [f for group in grouped.values() for f in group]

    assert sorted(map(id, flattened)) == sorted(map(id, fields))
    for key, members in grouped.items():
        expected = [f for f in fields if (f.group or "general") == key]
        assert members == expected

    assert group_by_group(flattened) == grouped


@pytest.mark.unit
@given(st.lists(field_strategy, max_size=20))
def test_style_subset_idempotent(fields):
    """Property: filtering twice equals filtering once."""
    once = resolve_style_subset(fields)
    assert resolve_style_subset(once) == once
