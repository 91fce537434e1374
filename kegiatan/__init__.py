"""KEGIATAN — API Notion (listing, contenu HTML, proxy image)."""

__version__ = "1.0.0"
