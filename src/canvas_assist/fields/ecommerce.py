"""E-commerce smart-object field tables."""

from .types import FieldDescriptor, field

COLOR_SCHEMES = [("modern", "Modern"), ("elegant", "Elegant"), ("bold", "Bold")]


ECOMMERCE_FIELDS: dict[str, list[FieldDescriptor]] = {
    "smart-product-showcase": [
        field("text", "productTitle", "Product Title", "content", placeholder="Premium Wireless Headphones"),
        field("number", "productPrice", "Price ($)", "content", min=0, step=0.01, placeholder="299.99", icon="price"),
        field("textarea", "productDescription", "Description", "content"),
        field("image-asset", "mainImage", "Main Product Image", "media", icon="image"),
        field(
            "select", "layout", "Layout", "configuration",
            options=[
                ("horizontal", "Horizontal (Image + Content)"),
                ("vertical", "Vertical (Image Top)"),
                ("centered", "Centered Layout"),
            ],
        ),
        field("checkbox", "enableZoom", "Enable Image Zoom", "configuration", icon="zoom"),
        field("checkbox", "enableGallery", "Enable Image Gallery", "configuration", icon="gallery"),
        field("checkbox", "showBadges", "Show Product Badges", "display", icon="badge"),
    ],
    "smart-product-card": [
        field("text", "productTitle", "Product Title", "content"),
        field("number", "productPrice", "Price ($)", "content", min=0, step=0.01),
        field("textarea", "productDescription", "Description", "content"),
        field("image-asset", "productImage", "Product Image", "media"),
        field("select", "colorScheme", "Color Scheme", "configuration", options=COLOR_SCHEMES + [("minimalist", "Minimalist")]),
        field(
            "select", "layout", "Layout", "configuration",
            options=[("vertical-center", "Vertical Center"), ("horizontal", "Horizontal"), ("compact", "Compact")],
        ),
        field("select", "size", "Card Size", "configuration", options=[("small", "Small"), ("medium", "Medium"), ("large", "Large")]),
    ],
    "smart-product-grid": [
        field("number", "columns", "Columns", "configuration", min=1, max=6),
        field("number", "productsCount", "Products to Show", "configuration", min=1, max=20),
        field("select", "spacing", "Spacing", "configuration", options=[("tight", "Tight"), ("normal", "Normal"), ("loose", "Loose")]),
        field("select", "colorScheme", "Color Scheme", "configuration", options=COLOR_SCHEMES),
        field("checkbox", "showFilters", "Show Filters", "display"),
        field("checkbox", "showPagination", "Show Pagination", "display"),
    ],
    "smart-shopping-cart": [
        field(
            "select", "cartType", "Cart Type", "configuration",
            options=[("mini", "Mini Cart"), ("full", "Full Cart"), ("sidebar", "Sidebar Cart")],
        ),
        field("text", "checkoutButton", "Checkout Button Text", "configuration"),
        field("text", "emptyCartMessage", "Empty Cart Message", "configuration"),
        field("checkbox", "showCounter", "Show Item Counter", "display"),
        field("checkbox", "showImages", "Show Product Images", "display"),
        field("checkbox", "enableCoupons", "Enable Coupons", "features"),
    ],
    "smart-testimonial-carousel": [
        field("text", "sectionTitle", "Section Title", "content"),
        field("checkbox", "autoPlay", "Auto Play", "playback"),
        field("number", "autoPlayDelay", "Delay (seconds)", "playback", min=1, max=10),
        field("checkbox", "showDots", "Show Dots", "navigation"),
        field("checkbox", "showArrows", "Show Arrows", "navigation"),
        field(
            "select", "transition", "Transition", "animation",
            options=[("slide", "Slide"), ("fade", "Fade"), ("scale", "Scale")],
        ),
    ],
}
