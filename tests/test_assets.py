"""Tests résolution d'assets — externe inchangé, hébergé → proxy."""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from kegiatan.blocks import ExternalAsset, HostedAsset, MediaPayload
from kegiatan.renderer.assets import proxy_url, resolve_asset


class TestResolveAsset:
    def test_external_unchanged(self):
        assert resolve_asset(ExternalAsset(url="https://x/y.png")) == "https://x/y.png"

    def test_hosted_proxied_exact_encoding(self):
        ref = HostedAsset(url="https://internal/secret?x=1")
        assert resolve_asset(ref) == "/api/image-proxy?url=https%3A%2F%2Finternal%2Fsecret%3Fx%3D1"

    def test_hosted_reserved_chars(self):
        out = resolve_asset(HostedAsset(url="https://s3/a b&c#d"))
        assert out == "/api/image-proxy?url=https%3A%2F%2Fs3%2Fa%20b%26c%23d"

    def test_hosted_empty_url_still_proxy_path(self):
        assert resolve_asset(HostedAsset(url="")) == "/api/image-proxy?url="

    def test_none(self):
        assert resolve_asset(None) == ""

    def test_uri_component_safe_chars_kept(self):
        assert proxy_url("a!*'()b") == "/api/image-proxy?url=a!*'()b"


class TestMediaSource:
    def test_file_is_hosted(self):
        p = MediaPayload.model_validate({"type": "file", "file": {"url": "https://s3/x", "expiry_time": "t"}})
        assert isinstance(p.source, HostedAsset)

    def test_external(self):
        p = MediaPayload.model_validate({"type": "external", "external": {"url": "https://e/x"}})
        assert p.source == ExternalAsset(url="https://e/x")

    def test_file_takes_precedence(self):
        p = MediaPayload.model_validate({"file": {"url": "https://s3/x"}, "external": {"url": "https://e/x"}})
        assert isinstance(p.source, HostedAsset)

    def test_no_source(self):
        assert MediaPayload().source is None
