"""Joining of slash-separated metric paths"""

SEPARATOR = "/"


def join_path(*segments: str) -> str:
    """Join metric path segments with a single ``/``.

    Empty segments and repeated separators are dropped. ``.`` and ``..`` are
    ordinary names. A leading ``/`` on the first segment is kept.
    """
    parts = []
    for segment in segments:
        parts.extend(part for part in segment.split(SEPARATOR) if part)
    joined = SEPARATOR.join(parts)
    if segments and segments[0].startswith(SEPARATOR):
        return SEPARATOR + joined
    return joined
