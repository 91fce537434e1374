"""Tests résumé de page — projection des propriétés Notion du listing."""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import logging

from kegiatan.summary import DEFAULT_NAME, summarize_page


def make_page(**props):
    return {"object": "page", "id": "p-1", "properties": props}


class TestSummarize:
    def test_full_page(self):
        page = make_page(
            Name={"title": [{"plain_text": "Kerja Bakti"}]},
            Hari={"rich_text": [{"plain_text": "Minggu"}]},
            Tanggal={"date": {"start": "2026-03-01", "end": None}},
            Embed={"url": "https://drive.google.com/file/d/abc/view"},
            Image={"files": [{"name": "a.png", "type": "file", "file": {"url": "https://s3/a.png?x=1"}}]},
        )
        assert summarize_page(page).to_json() == {
            "id": "p-1",
            "name": "Kerja Bakti",
            "hari": "Minggu",
            "tanggal": "2026-03-01",
            "embed": "https://drive.google.com/file/d/abc/view",
            "image": "/api/image-proxy?url=https%3A%2F%2Fs3%2Fa.png%3Fx%3D1",
        }

    def test_defaults(self):
        data = summarize_page(make_page()).to_json()
        assert data == {"id": "p-1", "name": DEFAULT_NAME, "hari": "", "tanggal": "", "embed": None}
        assert "image" not in data

    def test_external_image_unchanged(self):
        page = make_page(Image={"files": [{"type": "external", "external": {"url": "https://cdn/x.jpg"}}]})
        assert summarize_page(page).image == "https://cdn/x.jpg"

    def test_embed_from_rich_text(self):
        page = make_page(Embed={"rich_text": [{"plain_text": "https://youtu.be/x"}]})
        assert summarize_page(page).embed_url == "https://youtu.be/x"

    def test_null_date(self):
        page = make_page(Tanggal={"date": None})
        assert summarize_page(page).date == ""

    def test_empty_files(self):
        assert summarize_page(make_page(Image={"files": []})).image is None


# ── Propriétés mal formées ─────────────────────────────────────────────────

class TestMalformed:
    def test_title_item_not_a_dict(self):
        assert summarize_page(make_page(Name={"title": ["Kerja Bakti"]})).name == DEFAULT_NAME

    def test_image_file_not_a_dict(self):
        page = make_page(Image={"files": [{"type": "file", "file": "oops"}]})
        assert summarize_page(page).image is None

    def test_other_fields_kept(self, caplog):
        page = make_page(
            Name={"title": [{"plain_text": "Rapat"}]},
            Hari="Senin",
            Tanggal={"date": ["2026-03-01"]},
            Embed={"url": 42},
        )
        with caplog.at_level(logging.WARNING, logger="kegiatan.summary"):
            s = summarize_page(page)
        assert s.name == "Rapat"
        assert (s.day, s.date, s.embed_url) == ("", "", None)
        assert "Hari" in caplog.text and "Tanggal" in caplog.text

    def test_properties_not_a_dict(self):
        page = {"id": "p-1", "properties": ["x"]}
        assert summarize_page(page).to_json()["name"] == DEFAULT_NAME

    def test_non_string_text(self):
        page = make_page(Hari={"rich_text": [{"plain_text": 7}]})
        assert summarize_page(page).day == ""
