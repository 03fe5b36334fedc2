"""Substring filter for listing script files."""


def matches_path_filter(relative_path: str, pattern: str) -> bool:
    """Return True if ``pattern`` (minus any ``*``) occurs in the path.

    Matching is case-insensitive; glob stars are simply ignored.
    """
    needle = pattern.lower().replace("*", "")
    return needle in relative_path.lower()
