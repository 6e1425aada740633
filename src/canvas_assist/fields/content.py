"""Content smart-object field tables."""

from .types import FieldDescriptor, field

_DIMENSIONS = [
    field("number", "width", "Width (px)", "dimensions", min=0, icon="width"),
    field("number", "height", "Height (px)", "dimensions", min=0, icon="height"),
]


CONTENT_FIELDS: dict[str, list[FieldDescriptor]] = {
    "smart-hero-section": [
        field("text", "mainTitle", "Main Title", "content", placeholder="Enter hero title", icon="message"),
        field("text", "subtitle", "Subtitle", "content", placeholder="Enter subtitle"),
        field("textarea", "description", "Description", "content", placeholder="Enter description"),
        field("image-asset", "backgroundImage", "Background Image", "media"),
        field("image-asset", "heroImage", "Hero Image", "media"),
        field("text", "ctaText", "CTA Button Text", "cta"),
        field("text", "ctaLink", "CTA Link", "cta"),
        field("checkbox", "showSecondaryButton", "Show Secondary Button", "cta"),
        field(
            "select", "layout", "Layout Style", "layout",
            options=[
                ("centered", "Centered"), ("left-aligned", "Left Aligned"),
                ("right-aligned", "Right Aligned"), ("split", "Split Layout"),
            ],
        ),
        field(
            "select", "height", "Section Height", "layout",
            options=[
                ("small", "Small (400px)"), ("medium", "Medium (600px)"),
                ("large", "Large (800px)"), ("fullscreen", "Full Screen"),
            ],
        ),
        field("number", "width", "Width (px)", "dimensions", min=0),
    ],
    "smart-cta-banner": [
        field("text", "title", "Banner Title", "content"),
        field("textarea", "description", "Description", "content"),
        field("text", "buttonText", "Button Text", "content"),
        field("text", "buttonLink", "Button Link", "content"),
        field(
            "select", "bannerStyle", "Banner Style", "style",
            options=[("modern", "Modern"), ("classic", "Classic"), ("minimal", "Minimal"), ("gradient", "Gradient")],
        ),
        field("color", "backgroundColor", "Background Color", "style"),
        *_DIMENSIONS,
    ],
    "smart-testimonials": [
        field("number", "itemsToShow", "Items to Show", "configuration", min=1, max=5),
        field("checkbox", "autoPlay", "Auto Play", "configuration"),
        field("number", "autoPlaySpeed", "Auto Play Speed (ms)", "configuration", min=1000, max=10000),
        field("checkbox", "showRatings", "Show Ratings", "display"),
        field("checkbox", "showAvatars", "Show Avatars", "display"),
        field("checkbox", "showCompany", "Show Company", "display"),
        field("checkbox", "showArrows", "Show Arrows", "navigation"),
        field("checkbox", "showDots", "Show Dots", "navigation"),
        *_DIMENSIONS,
    ],
    "smart-faq-accordion": [
        field("checkbox", "allowMultipleOpen", "Allow Multiple Open", "configuration"),
        field("checkbox", "enableSearch", "Enable Search", "configuration"),
        field("text", "searchPlaceholder", "Search Placeholder", "configuration"),
        field(
            "select", "animationSpeed", "Animation Speed", "animation",
            options=[("slow", "Slow"), ("normal", "Normal"), ("fast", "Fast")],
        ),
        field(
            "select", "animationType", "Animation Type", "animation",
            options=[("slide", "Slide"), ("fade", "Fade"), ("scale", "Scale")],
        ),
        field(
            "select", "iconStyle", "Icon Style", "style",
            options=[("plus", "Plus/Minus"), ("arrow", "Arrow"), ("chevron", "Chevron")],
        ),
        *_DIMENSIONS,
    ],
    "div": [
        *_DIMENSIONS,
        field("number", "padding", "Padding (px)", "dimensions", min=0, icon="ruler"),
        field("number", "margin", "Margin (px)", "dimensions", min=0, icon="ruler"),
        field("color", "backgroundColor", "Background Color", "style"),
        field("color", "borderColor", "Border Color", "style"),
        field("number", "borderWidth", "Border Width (px)", "style", min=0, icon="ruler"),
        field("number", "borderRadius", "Border Radius (px)", "style", min=0),
    ],
}
