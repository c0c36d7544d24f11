"""Prune a pandoc JSON document according to the conversion feature toggles.

The pandoc RTF reader always produces footnotes, links, images, tables and
bookmark spans. When a toggle is off, the matching elements are removed (or
unwrapped, for links) before the HTML writer runs.
"""

from typing import Any

from .config import ConversionConfig


def prune_document(doc: dict[str, Any], config: ConversionConfig) -> dict[str, Any]:
    """Return a copy of `doc` with disabled features stripped from its blocks."""
    pruned = dict(doc)
    pruned["blocks"] = _walk(doc.get("blocks", []), config)
    return pruned


def _walk(node: Any, config: ConversionConfig) -> Any:
    if isinstance(node, list):
        out: list[Any] = []
        for item in node:
            out.extend(_transform(item, config))
        return out
    if isinstance(node, dict):
        return {k: _walk(v, config) for k, v in node.items()}
    return node


def _transform(item: Any, config: ConversionConfig) -> list[Any]:
    """Map one list item to zero or more replacement items."""
    if not (isinstance(item, dict) and "t" in item):
        return [_walk(item, config)]

    tag = item["t"]
    content = item.get("c")
    if tag == "Note" and not config.convert_footnotes:
        return []
    if tag == "Image" and not config.convert_pictures:
        return []
    if tag == "Table" and not config.convert_tables:
        return []
    if tag == "Link" and not config.convert_hyperlinks:
        # Link is [attr, inlines, target]; keep the text only
        return _walk(content[1], config)
    if tag == "Span" and not config.convert_bookmarks and content[0][0]:
        ident, classes, attrs = content[0]
        if not classes and not attrs:
            return _walk(content[1], config)
        item = {"t": "Span", "c": [["", classes, attrs], content[1]]}
    if tag in ("Para", "Plain") and not config.convert_empty_paragraphs and not content:
        return []
    return [_walk(item, config)]
