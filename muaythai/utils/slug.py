import re


def slugify(text, fallback="tag"):
    """Lowercase ASCII slug; non-alphanumeric runs collapse to single hyphens."""
    slug = re.sub(r"[^a-z0-9]+", "-", (text or "").lower()).strip("-")
    return slug or fallback
