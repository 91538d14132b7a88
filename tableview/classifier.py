# Columns whose label contains one of these are short identifiers or links
# that get a one-click copy widget per cell.
COPYABLE_KEYWORDS = ("id", "name", "url", "email", "cluster")


def is_copyable_column(key: str) -> bool:
    """Case-insensitive substring match against COPYABLE_KEYWORDS."""
    lowered = key.lower()
    return any(keyword in lowered for keyword in COPYABLE_KEYWORDS)
