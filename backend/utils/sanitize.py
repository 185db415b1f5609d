"""
HTML escaping for user-supplied text embedded in notification emails.

Only the five HTML-significant characters are replaced; everything else
(including accents and emoji) passes through untouched. Call it once per
field: escaping an already escaped value turns "&amp;" into "&amp;amp;".
"""

import re
from typing import Dict

HTML_ENTITIES: Dict[str, str] = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
}

_HTML_SPECIAL_CHARS = re.compile(r"[&<>\"']")


def escape_html(text: str) -> str:
    """
    Escape `& < > " '` to their HTML entities.

    Args:
        text: Arbitrary user-supplied text

    Returns:
        Text safe to interpolate into an HTML document

    Example:
        >>> escape_html('<b>"Tom" & Jerry</b>')
        '&lt;b&gt;&quot;Tom&quot; &amp; Jerry&lt;/b&gt;'
    """
    return _HTML_SPECIAL_CHARS.sub(lambda match: HTML_ENTITIES[match.group(0)], text)
