"""State synchronizer tests."""

import pytest
from hypothesis import given, strategies as st

from canvas_assist.fields import FieldRegistry, field
from canvas_assist.sync import (
    Component,
    ComponentSnapshot,
    Trait,
    attribute_keys,
    coerce_value,
    kebab_case,
)


NUMBER = field("number", "width", "Width")
CHECKBOX = field("checkbox", "enabled", "Enabled")
TEXT = field("text", "title", "Title")


@pytest.mark.unit
def test_kebab_case():
    assert kebab_case("backgroundColor") == "background-color"
    assert kebab_case("showSecondaryButton") == "show-secondary-button"
    assert kebab_case("width") == "width"


@pytest.mark.unit
def test_attribute_key_order():
    assert attribute_keys("backgroundColor") == (
        "data-background-color",
        "data-backgroundColor",
        "backgroundColor",
    )


@pytest.mark.unit
@pytest.mark.parametrize(
    "raw,expected",
    [("true", True), ("1", True), ("false", False), ("0", False), ("yes", False), ("", False)],
)
def test_checkbox_coercion(raw, expected):
    assert coerce_value(CHECKBOX, raw) is expected


@pytest.mark.unit
@pytest.mark.parametrize(
    "raw,expected",
    [("12.5", 12.5), ("640", 640.0), ("20px", 20.0), ("abc", 0), ("", 0)],
)
def test_number_coercion(raw, expected):
    assert coerce_value(NUMBER, raw) == expected


@pytest.mark.unit
def test_non_strings_pass_through():
    assert coerce_value(NUMBER, 7) == 7
    assert coerce_value(CHECKBOX, True) is True
    assert coerce_value(TEXT, None) is None


@pytest.mark.unit
def test_extract_values_precedence(synchronizer, hero, registry):
    snapshot = synchronizer.snapshot(hero)
    values = synchronizer.extract_values(snapshot, registry.resolve("section", snapshot.smart_object_id))

    assert values["mainTitle"] == "Welcome"  # trait
    assert values["subtitle"] == "From attributes"  # bare attribute key
    assert values["showSecondaryButton"] is True  # data-kebab attribute, coerced
    assert values["width"] == 640.0  # trait, coerced
    assert values["description"] is None


@pytest.mark.unit
def test_trait_wins_even_when_coercion_fails(synchronizer):
    component = Component(
        attributes={"data-width": "300"},
        traits=[Trait("width", "wide")],
    )
    values = synchronizer.extract_values(synchronizer.snapshot(component), [NUMBER])
    assert values == {"width": 0}


@pytest.mark.unit
def test_trait_with_none_value_is_authoritative(synchronizer):
    component = Component(attributes={"data-title": "attr"}, traits=[Trait("title", None)])
    values = synchronizer.extract_values(synchronizer.snapshot(component), [TEXT])
    assert values == {"title": None}


@pytest.mark.unit
def test_attribute_key_order_first_present_wins(synchronizer):
    component = Component(attributes={"backgroundColor": "bare", "data-backgroundColor": "camel"})
    descriptor = field("color", "backgroundColor", "Background")
    values = synchronizer.extract_values(synchronizer.snapshot(component), [descriptor])
    assert values == {"backgroundColor": "camel"}


@pytest.mark.unit
def test_present_none_attribute_stops_lookup(synchronizer):
    """A present key wins even when its value is None."""
    component = Component(attributes={"data-title": None, "title": "bare"})
    values = synchronizer.extract_values(synchronizer.snapshot(component), [TEXT])
    assert values == {"title": None}


@pytest.mark.unit
def test_apply_change_writes_both_representations(synchronizer, observed):
    component = Component(traits=[Trait("backgroundColor", "#fff")], attributes={"id": "x"})
    original_attributes = component.get("attributes")

    synchronizer.apply_change(component, "backgroundColor", "#000")

    assert component.get_trait("backgroundColor").value == "#000"
    assert component.get("attributes")["data-background-color"] == "#000"
    assert component.get("attributes")["id"] == "x"
    # The previous map is replaced, not mutated
    assert "data-background-color" not in original_attributes
    assert "change:traits" in component.events
    assert component.render_count == 1
    assert observed == [{"backgroundColor": "#000"}]


@pytest.mark.unit
def test_apply_change_without_trait_writes_attribute(synchronizer):
    component = Component()
    synchronizer.apply_change(component, "title", "Hi")
    assert component.get("attributes") == {"data-title": "Hi"}
    assert component.get_trait("title") is None


@pytest.mark.unit
def test_apply_then_extract_reads_new_value(synchronizer):
    component = Component(traits=[Trait("width", "100")])
    synchronizer.apply_change(component, "width", "250")

    values = synchronizer.extract_values(synchronizer.snapshot(component), [NUMBER])
    assert values == {"width": 250.0}


@pytest.mark.unit
def test_host_notification_failure_is_isolated(synchronizer, observed, metrics):
    component = Component(traits=[Trait("title", "old")])

    def boom(_component):
        raise RuntimeError("render failed")

    component.on("change:traits", boom)

    synchronizer.apply_change(component, "title", "new")

    assert component.get_trait("title").value == "new"
    assert component.get("attributes")["data-title"] == "new"
    assert observed == [{"title": "new"}]
    assert metrics.notify_errors_total.labels(target="host")._value.get() == 1


@pytest.mark.unit
def test_observer_failure_is_isolated(metrics):
    from canvas_assist.sync import StateSynchronizer

    def broken_observer(payload):
        raise ValueError("observer down")

    synchronizer = StateSynchronizer(observer=broken_observer, metrics=metrics)
    component = Component()
    synchronizer.apply_change(component, "title", "x")

    assert component.get("attributes") == {"data-title": "x"}
    assert metrics.notify_errors_total.labels(target="observer")._value.get() == 1


@pytest.mark.unit
def test_apply_changes_adds_and_removes_styles(synchronizer):
    component = Component(style={"margin": "4px", "color": "black"})
    applied = synchronizer.apply_changes(component, {"color": "#3b82f6", "margin": None})

    assert applied == {"color": "#3b82f6", "margin": None}
    assert component.get_style() == {"color": "#3b82f6"}


@pytest.mark.unit
def test_snapshot_captures_component(synchronizer):
    parent = Component(type="section", tag_name="section", style={"display": "flex"})
    child = Component(
        type="text",
        tag_name="p",
        component_id="p-1",
        attributes={"data-smart-object": "smart-cta-banner"},
        traits=[Trait("title", "A"), Trait("title", "B")],
        style={"color": "red"},
        content="Hello",
        parent=parent,
    )
    snapshot = synchronizer.snapshot(child)

    assert isinstance(snapshot, ComponentSnapshot)
    assert snapshot.component_id == "p-1"
    assert snapshot.component_type == "text"
    assert snapshot.tag_name == "p"
    assert snapshot.smart_object_id == "smart-cta-banner"
    assert snapshot.traits == {"title": "A"}
    assert snapshot.computed_style == {"color": "red"}
    assert snapshot.parent.type == "section"
    assert snapshot.parent.style == {"display": "flex"}
    assert snapshot.markup.startswith('<p id="p-1"')


@pytest.mark.unit
def test_snapshot_is_detached(synchronizer):
    component = Component(style={"color": "red"})
    snapshot = synchronizer.snapshot(component)
    component.add_style({"color": "blue"})
    assert snapshot.computed_style == {"color": "red"}


@pytest.mark.unit
@given(st.text(alphabet="0123456789.-abc px", max_size=8))
def test_number_coercion_always_numeric(raw):
    """Property: number fields never yield a non-number from a string."""
    value = coerce_value(NUMBER, raw)
    assert isinstance(value, (int, float)) and not isinstance(value, bool)


@pytest.mark.unit
@given(st.sampled_from(FieldRegistry().keys()))
def test_extract_values_covers_every_field(key):
    """Property: one value per resolved field."""
    from canvas_assist.sync import StateSynchronizer
    from canvas_assist.monitoring import MetricsCollector
    from prometheus_client import CollectorRegistry

    synchronizer = StateSynchronizer(metrics=MetricsCollector(CollectorRegistry()))
    fields = FieldRegistry().resolve(key)
    values = synchronizer.extract_values(synchronizer.snapshot(Component()), fields)
    assert list(values) == [f.name for f in fields]
    assert all(v is None for v in values.values())
