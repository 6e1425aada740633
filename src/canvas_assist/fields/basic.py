"""Basic component field tables."""

from .types import FieldDescriptor, field

SIZE_OPTIONS = [("sm", "Small"), ("md", "Medium"), ("lg", "Large"), ("xl", "Extra Large")]
ALIGN_OPTIONS = [("left", "Left"), ("center", "Center"), ("right", "Right"), ("justify", "Justify")]


BASIC_FIELDS: dict[str, list[FieldDescriptor]] = {
    # Text components
    "text": [
        field("textarea", "content", "Text Content", "content", placeholder="Enter your text", icon="text"),
        field(
            "select", "fontSize", "Font Size", "typography", icon="text",
            options=[
                ("xs", "Extra Small"), ("sm", "Small"), ("base", "Normal"),
                ("lg", "Large"), ("xl", "Extra Large"), ("2xl", "2X Large"),
            ],
        ),
        field(
            "select", "fontWeight", "Font Weight", "typography", icon="text",
            options=[("normal", "Normal"), ("medium", "Medium"), ("semibold", "Semi Bold"), ("bold", "Bold")],
        ),
        field("select", "textAlign", "Text Alignment", "typography", options=ALIGN_OPTIONS, icon="align"),
        field("color", "textColor", "Text Color", "typography", icon="color"),
    ],
    "image": [
        field("image-asset", "src", "Image Source", "media", icon="image"),
        field("text", "alt", "Alt Text", "media", placeholder="Describe the image", icon="text"),
        field("text", "title", "Image Title", "media", placeholder="Image title for tooltip", icon="text"),
        field(
            "select", "objectFit", "Object Fit", "configuration", icon="fit",
            options=[("contain", "Contain"), ("cover", "Cover"), ("fill", "Fill"), ("scale-down", "Scale Down")],
        ),
        field("checkbox", "lazyLoad", "Lazy Loading", "configuration", icon="lazy"),
    ],
    "button": [
        field("text", "text", "Button Text", "content", placeholder="Click me", icon="button"),
        field("text", "href", "Link URL", "content", placeholder="https://example.com", icon="link"),
        field("select", "size", "Button Size", "configuration", options=SIZE_OPTIONS, icon="size"),
        field(
            "select", "variant", "Button Style", "configuration", icon="style",
            options=[("primary", "Primary"), ("secondary", "Secondary"), ("outline", "Outline"), ("ghost", "Ghost")],
        ),
        field("checkbox", "disabled", "Disabled", "configuration", icon="disabled"),
    ],
    "container": [
        field(
            "select", "display", "Display", "layout", icon="layout",
            options=[("block", "Block"), ("flex", "Flex"), ("grid", "Grid"), ("inline-block", "Inline Block")],
        ),
        field(
            "select", "flexDirection", "Flex Direction", "layout", icon="direction",
            options=[
                ("row", "Row"), ("column", "Column"),
                ("row-reverse", "Row Reverse"), ("column-reverse", "Column Reverse"),
            ],
        ),
        field(
            "select", "justifyContent", "Justify Content", "layout", icon="align",
            options=[
                ("flex-start", "Start"), ("center", "Center"), ("flex-end", "End"),
                ("space-between", "Space Between"), ("space-around", "Space Around"),
            ],
        ),
    ],
    "input": [
        field("text", "placeholder", "Placeholder", "content", placeholder="Enter placeholder text"),
        field("text", "name", "Field Name", "content", placeholder="field_name"),
        field(
            "select", "type", "Input Type", "configuration",
            options=[
                ("text", "Text"), ("email", "Email"), ("password", "Password"),
                ("number", "Number"), ("tel", "Phone"), ("url", "URL"),
            ],
        ),
        field("checkbox", "required", "Required", "configuration"),
    ],
    "form": [
        field("text", "action", "Form Action", "configuration", placeholder="/submit"),
        field("select", "method", "Method", "configuration", options=[("POST", "POST"), ("GET", "GET")]),
        field("text", "name", "Form Name", "configuration"),
    ],
    "section": [
        field("text", "sectionTitle", "Section Title", "content"),
        field(
            "select", "maxWidth", "Max Width", "layout",
            options=[
                ("none", "None"), ("sm", "Small (640px)"), ("md", "Medium (768px)"),
                ("lg", "Large (1024px)"), ("xl", "Extra Large (1280px)"), ("full", "Full Width"),
            ],
        ),
        field("select", "padding", "Padding", "layout", options=[("none", "None")] + SIZE_OPTIONS),
    ],
    "nav": [
        field("text", "brand", "Brand Name", "content"),
        field(
            "select", "layout", "Navigation Layout", "configuration",
            options=[("horizontal", "Horizontal"), ("vertical", "Vertical"), ("sidebar", "Sidebar")],
        ),
        field("checkbox", "sticky", "Sticky Navigation", "configuration"),
        field("checkbox", "collapsed", "Collapsed on Mobile", "configuration"),
    ],
    "list": [
        field("select", "listType", "List Type", "configuration", options=[("ul", "Unordered List"), ("ol", "Ordered List")]),
        field(
            "select", "listStyle", "List Style", "configuration",
            options=[("disc", "Disc"), ("circle", "Circle"), ("square", "Square"), ("decimal", "Numbers"), ("none", "None")],
        ),
    ],
    "video": [
        field("text", "src", "Video URL", "media"),
        field("image-asset", "poster", "Poster Image", "media"),
        field("checkbox", "autoplay", "Autoplay", "playback"),
        field("checkbox", "loop", "Loop", "playback"),
        field("checkbox", "muted", "Muted", "playback"),
        field("checkbox", "controls", "Show Controls", "playback"),
    ],
    "link": [
        field("text", "href", "Link URL", "content", placeholder="https://example.com", icon="link"),
        field("text", "text", "Link Text", "content"),
        field(
            "select", "target", "Link Target", "configuration",
            options=[("_self", "Same Window"), ("_blank", "New Window"), ("_parent", "Parent Frame"), ("_top", "Top Frame")],
        ),
        field("text", "title", "Link Title", "configuration"),
    ],
    "table": [
        field("number", "rows", "Number of Rows", "configuration", min=1, max=20),
        field("number", "columns", "Number of Columns", "configuration", min=1, max=10),
        field("checkbox", "showHeader", "Show Header", "configuration"),
        field("checkbox", "striped", "Striped Rows", "configuration"),
    ],
    # Generic fallback
    "default": [
        field("text", "id", "Element ID", "attributes", icon="id"),
        field("text", "classes", "CSS Classes", "attributes", icon="class"),
        field("text", "tagName", "HTML Tag", "attributes", icon="tag"),
        field("number", "width", "Width (px)", "dimensions", min=0, icon="width"),
        field("number", "height", "Height (px)", "dimensions", min=0, icon="height"),
    ],
}
