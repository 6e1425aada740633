"""Context builder tests."""

import pytest

from canvas_assist.interpreter import NO_STYLES, CommandRequest, ContextBuilder, PageContext
from canvas_assist.sync import Component, ComponentSnapshot, ParentContext


@pytest.fixture
def builder():
    return ContextBuilder(max_markup_length=200)


@pytest.mark.unit
def test_css_context_sorted(builder):
    snapshot = ComponentSnapshot(
        component_id="a", component_type="div", computed_style={"margin": "0", "color": "red"}
    )
    assert builder.css_context(snapshot) == "Current: {color: red; margin: 0}"


@pytest.mark.unit
def test_css_context_empty(builder):
    snapshot = ComponentSnapshot(component_id="a", component_type="div")
    assert builder.css_context(snapshot) == NO_STYLES


@pytest.mark.unit
def test_markup_is_sanitised(builder):
    snapshot = ComponentSnapshot(
        component_id="a",
        component_type="div",
        markup='<div id="a"\n   data-gjs-type="text" data-gjs-highlightable="true">Hi</div>',
    )
    assert builder.html_context(snapshot) == 'HTML: <div id="a" >Hi</div>'


@pytest.mark.unit
def test_markup_is_truncated(builder):
    snapshot = ComponentSnapshot(component_id="a", component_type="div", markup="<div>" + "x" * 500 + "</div>")
    assert len(builder.html_context(snapshot)) == len("HTML: ") + 200


@pytest.mark.unit
def test_synthesized_markup(builder):
    snapshot = ComponentSnapshot(component_id="hero", component_type="section", tag_name="section", content="Hi")
    assert builder.html_context(snapshot) == 'HTML: <section id="hero" class="gjs-selected">Hi</section>'


@pytest.mark.unit
def test_synthesized_void_tag(builder):
    snapshot = ComponentSnapshot(component_id="undefined", component_type="image", tag_name="img")
    assert builder.synthesize_markup(snapshot) == '<img class="gjs-selected">'


@pytest.mark.unit
def test_synthesized_placeholder_content(builder):
    snapshot = ComponentSnapshot(component_id="p1", component_type="text", tag_name="p")
    assert builder.synthesize_markup(snapshot) == '<p id="p1" class="gjs-selected">Element content</p>'


@pytest.mark.unit
def test_parent_line(builder):
    snapshot = ComponentSnapshot(
        component_id="a",
        component_type="div",
        parent=ParentContext(type="section", style={"display": "flex"}),
    )
    assert builder.html_context(snapshot).endswith('\nParent: <section> {"display":"flex"}')


@pytest.mark.unit
def test_build_full_prompt(builder):
    parent = Component(tag_name="main")
    component = Component(type="text", tag_name="h1", component_id="title", content="Welcome", parent=parent)
    request = CommandRequest(
        command="make it larger",
        snapshot=ComponentSnapshot.from_component(component),
        page=PageContext(theme="dark", total_components=12),
    )

    prompt = builder.build(request)

    assert "Device: desktop | Theme: dark | Components: 12" in prompt
    assert "TARGET: h1 (ID: title)" in prompt
    assert 'CONTENT: "Welcome"' in prompt
    assert "STYLES:\nNo styles (browser defaults)" in prompt
    assert "Parent: <main> {}" in prompt
    assert "FORBIDDEN:" in prompt
    assert '"confidence": 0.0-1.0' in prompt


@pytest.mark.unit
def test_request_strips_command():
    snapshot = ComponentSnapshot(component_id="a", component_type="div")
    assert CommandRequest(command="  blue ", snapshot=snapshot).command == "blue"


@pytest.mark.unit
def test_request_rejects_blank_command():
    snapshot = ComponentSnapshot(component_id="a", component_type="div")
    with pytest.raises(Exception):
        CommandRequest(command="   ", snapshot=snapshot)
