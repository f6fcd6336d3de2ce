import sys
from typing import Any, Tuple

import yaml

FRONTMATTER_DELIMITER = "---"


def split_frontmatter(text: str) -> Tuple[Any, str]:
    """
    Split ``---``-delimited YAML front matter from a Markdown document.
    Returns (metadata, body). Metadata is {} when there is no front matter or
    it does not parse; otherwise it is whatever YAML value the header holds.
    """
    if not text.startswith(FRONTMATTER_DELIMITER):
        return {}, text

    header, closing, rest = text[len(FRONTMATTER_DELIMITER):].partition(
        "\n" + FRONTMATTER_DELIMITER
    )
    if not closing:
        return {}, text

    try:
        metadata = yaml.safe_load(header)
    except yaml.YAMLError as e:
        print(f"Ignoring malformed front matter: {e}", file=sys.stderr)
        return {}, text

    # Drop the remainder of the closing delimiter line.
    body = rest.split("\n", 1)[1] if "\n" in rest else ""
    return ({} if metadata is None else metadata), body.lstrip()


def normalize_whitespace(value: str) -> str:
    """Trim + compress whitespace."""
    return " ".join(str(value).strip().split())


__all__ = ["split_frontmatter", "normalize_whitespace"]
