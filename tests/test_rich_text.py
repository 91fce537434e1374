"""Tests rich text — échappement, liens, ordre d'imbrication des annotations."""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from kegiatan.blocks import RichText
from kegiatan.renderer.rich_text import CODE_CLASS, LINK_CLASS, format_rich_text, plain_text


def span(text, href=None, **annotations):
    return RichText(plain_text=text, href=href, annotations=annotations)


# ── Cas vides ────────────────────────────────────────────────────────────────

class TestEmpty:
    def test_none(self):
        assert format_rich_text(None) == ""

    def test_empty_list(self):
        assert format_rich_text([]) == ""

    def test_plain_text_none(self):
        assert plain_text(None) == ""


# ── Échappement ──────────────────────────────────────────────────────────────

class TestEscaping:
    def test_plain(self):
        assert format_rich_text([span("Halo")]) == "Halo"

    def test_reserved_chars_escaped(self):
        out = format_rich_text([span("<b>a & \"b\" 'c'</b>")])
        assert out == "&lt;b&gt;a &amp; &quot;b&quot; &#x27;c&#x27;&lt;/b&gt;"

    def test_output_never_shorter_than_text(self):
        spans = [span("x < y", bold=True), span(" & z")]
        assert len(format_rich_text(spans)) >= len(plain_text(spans))

    def test_href_escaped(self):
        out = format_rich_text([span("l", href='https://x/?a=1&b="2"')])
        assert 'href="https://x/?a=1&amp;b=&quot;2&quot;"' in out


# ── Liens ────────────────────────────────────────────────────────────────────

class TestLink:
    def test_link_new_tab(self):
        out = format_rich_text([span("site", href="https://example.com")])
        assert out == (f'<a href="https://example.com" target="_blank" rel="noopener noreferrer" '
                       f'class="{LINK_CLASS}">site</a>')

    def test_link_inside_bold(self):
        out = format_rich_text([span("site", href="https://e.com", bold=True)])
        assert out.startswith("<strong><a ")
        assert out.endswith("</a></strong>")


# ── Annotations ──────────────────────────────────────────────────────────────

class TestAnnotations:
    @pytest.mark.parametrize("flag,expected", [
        ("bold",          "<strong>t</strong>"),
        ("italic",        "<em>t</em>"),
        ("strikethrough", "<del>t</del>"),
        ("underline",     "<u>t</u>"),
        ("code",          f'<code class="{CODE_CLASS}">t</code>'),
    ])
    def test_single_flag(self, flag, expected):
        assert format_rich_text([span("t", **{flag: True})]) == expected

    def test_bold_italic_order(self):
        assert format_rich_text([span("t", bold=True, italic=True)]) == "<em><strong>t</strong></em>"

    def test_all_five_nesting(self):
        out = format_rich_text([span("t", bold=True, italic=True, strikethrough=True,
                                     underline=True, code=True)])
        assert out == f'<code class="{CODE_CLASS}"><u><del><em><strong>t</strong></em></del></u></code>'

    def test_unknown_annotation_keys_ignored(self):
        s = RichText.model_validate({
            "type": "text", "plain_text": "x",
            "annotations": {"bold": True, "color": "red"},
        })
        assert format_rich_text([s]) == "<strong>x</strong>"


# ── Concaténation ────────────────────────────────────────────────────────────

class TestConcat:
    def test_order_kept_no_separator(self):
        out = format_rich_text([span("a"), span("b", italic=True), span("c")])
        assert out == "a<em>b</em>c"

    def test_span_immutable(self):
        s = span("x")
        with pytest.raises(Exception):
            s.plain_text = "y"
