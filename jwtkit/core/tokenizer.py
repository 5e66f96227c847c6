"""Delimiter splitting for compact token strings."""


def split(token: str, delimiter: str = ".", max_parts: int = 3) -> list[str]:
    """
    Split ``token`` left to right into at most ``max_parts`` segments.

    The final segment keeps any remaining delimiters verbatim, so
    ``split("a.b.c.d")`` yields ``["a", "b", "c.d"]``. Fewer segments are
    returned when the token has fewer delimiters; callers check the count.

    Args:
        token: String to split
        delimiter: Non-empty separator
        max_parts: Maximum number of segments, at least 1

    Returns:
        List of segments

    Example:
        >>> split("header.claims.signature")
        ['header', 'claims', 'signature']
        >>> split("only-one")
        ['only-one']
    """
    if not delimiter:
        raise ValueError("delimiter must be a non-empty string")
    if max_parts < 1:
        raise ValueError("max_parts must be at least 1")

    segments: list[str] = []
    pos = 0
    while len(segments) < max_parts - 1:
        found = token.find(delimiter, pos)
        if found == -1:
            break
        segments.append(token[pos:found])
        pos = found + len(delimiter)

    segments.append(token[pos:])
    return segments
