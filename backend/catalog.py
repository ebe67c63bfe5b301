"""Display metadata for content types and categories."""
from schemas import Category, ContentType

# type -> (file extension, icon key, badge color)
TYPE_DISPLAY = {
    ContentType.VIDEO.value: {"extension": "mp4", "icon": "play", "badge": "red-600"},
    ContentType.GRAPHIC.value: {"extension": "jpg", "icon": "image", "badge": "blue-600"},
    ContentType.TEMPLATE.value: {"extension": "zip", "icon": "file-text", "badge": "green-600"},
    ContentType.BUNDLE.value: {"extension": "zip", "icon": "package", "badge": "purple-600"},
    ContentType.MOCKUP.value: {"extension": "zip", "icon": "image", "badge": "orange-600"},
}

DEFAULT_EXTENSION = "zip"

CATEGORY_DISPLAY = {
    Category.SOCIAL_MEDIA.value: {
        "label": "Social Media Assets",
        "description": "Reels, graphics, and content designed to engage your audience",
    },
    Category.FIELD_TOOLS.value: {
        "label": "Field Tools",
        "description": "Professional tools and resources for field operations",
    },
    Category.EVENTS.value: {
        "label": "Events",
        "description": "Graphics and videos for events and special occasions",
    },
    Category.STORE.value: {
        "label": "Store",
        "description": "Branded merchandise and promotional materials",
    },
    Category.GENERAL.value: {
        "label": "General",
        "description": "Everyday business templates and designs",
    },
}


def file_extension(content_type) -> str:
    entry = TYPE_DISPLAY.get(content_type)
    return entry["extension"] if entry else DEFAULT_EXTENSION


def suggested_file_name(item) -> str:
    return f"{item.title}.{file_extension(item.type)}"


def list_categories():
    return [{"id": key, **value} for key, value in CATEGORY_DISPLAY.items()]


def list_content_types():
    return [{"id": key, **value} for key, value in TYPE_DISPLAY.items()]
