"""Tests for feature pruning on pandoc document trees."""

from dataclasses import replace

from rtf_preview.conversion import build_conversion_config
from rtf_preview.conversion.ast_filter import prune_document

FULL = build_conversion_config()


def _doc(*blocks):
    return {"pandoc-api-version": [1, 23, 1], "meta": {"title": {"t": "MetaInlines", "c": []}}, "blocks": list(blocks)}


def _para(*inlines):
    return {"t": "Para", "c": list(inlines)}


def _str(text):
    return {"t": "Str", "c": text}


NOTE = {"t": "Note", "c": [_para(_str("footnote"))]}
LINK = {"t": "Link", "c": [["", [], []], [_str("click")], ["https://example.com", ""]]}
IMAGE = {"t": "Image", "c": [["", [], []], [], ["media/image1.png", ""]]}
BOOKMARK = {"t": "Span", "c": [["chapter1", [], []], [_str("Chapter")]]}
STYLED_BOOKMARK = {"t": "Span", "c": [["intro", ["smallcaps"], []], [_str("Intro")]]}
TABLE = {"t": "Table", "c": [["", [], []], [None, []], [], ["", [], []], [], ["", [], []]]}


class TestPruneDocument:
    """Tests for prune_document."""

    def test_everything_enabled_keeps_tree(self):
        doc = _doc(_para(_str("a"), NOTE, LINK, IMAGE, BOOKMARK), TABLE, _para())

        assert prune_document(doc, FULL) == doc

    def test_input_not_mutated(self):
        doc = _doc(_para(NOTE))
        before = repr(doc)

        prune_document(doc, replace(FULL, convert_footnotes=False))

        assert repr(doc) == before

    def test_footnotes_removed(self):
        doc = _doc(_para(_str("a"), NOTE))

        pruned = prune_document(doc, replace(FULL, convert_footnotes=False))

        assert pruned["blocks"] == [_para(_str("a"))]

    def test_links_unwrapped_to_text(self):
        doc = _doc(_para(_str("see"), LINK, _str("here")))

        pruned = prune_document(doc, replace(FULL, convert_hyperlinks=False))

        assert pruned["blocks"] == [_para(_str("see"), _str("click"), _str("here"))]

    def test_pictures_removed(self):
        doc = _doc(_para(IMAGE, _str("caption")))

        pruned = prune_document(doc, replace(FULL, convert_pictures=False))

        assert pruned["blocks"] == [_para(_str("caption"))]

    def test_tables_removed(self):
        doc = _doc(_para(_str("before")), TABLE, _para(_str("after")))

        pruned = prune_document(doc, replace(FULL, convert_tables=False))

        assert pruned["blocks"] == [_para(_str("before")), _para(_str("after"))]

    def test_bookmarks_dropped(self):
        doc = _doc(_para(BOOKMARK, STYLED_BOOKMARK))

        pruned = prune_document(doc, replace(FULL, convert_bookmarks=False))

        assert pruned["blocks"] == [
            _para(_str("Chapter"), {"t": "Span", "c": [["", ["smallcaps"], []], [_str("Intro")]]}),
        ]

    def test_empty_paragraphs_removed(self):
        doc = _doc(_para(_str("a")), _para(), {"t": "Plain", "c": []})

        pruned = prune_document(doc, replace(FULL, convert_empty_paragraphs=False))

        assert pruned["blocks"] == [_para(_str("a"))]

    def test_nested_inside_notes_and_lists(self):
        nested = {"t": "BulletList", "c": [[_para(LINK)]]}
        doc = _doc(nested)

        pruned = prune_document(doc, replace(FULL, convert_hyperlinks=False))

        assert pruned["blocks"] == [{"t": "BulletList", "c": [[_para(_str("click"))]]}]

    def test_meta_untouched(self):
        doc = _doc()

        assert prune_document(doc, replace(FULL, convert_empty_paragraphs=False))["meta"] == doc["meta"]
