"""
Unit tests for the preview server endpoints.
"""
from unittest.mock import Mock
from urllib.parse import urljoin

import pytest
from fastapi.testclient import TestClient

from revealsync.core import Configuration, ExportPathError
from revealsync.services.server import PresentationSource, create_app


@pytest.fixture
def source(tmp_path):
    """Presentation source backed by mocks."""
    (tmp_path / "logo.png").write_bytes(b"\x89PNG")
    return PresentationSource(
        root_dir=lambda: str(tmp_path),
        slide_content=lambda: "# Hello\n---\n# World",
        configuration=lambda: Configuration(title="Demo deck", theme="league"),
        is_in_export=Mock(return_value=False),
        save=Mock(return_value=tmp_path / "export" / "index.html"),
        slide_count=lambda: 2,
        export_pending=Mock(return_value=False),
    )


@pytest.fixture
def client(source):
    """Create a test client."""
    return TestClient(create_app(source))


class TestPresentationAPI:
    """Tests for the presentation page."""
    
    def test_page_renders_document(self, client):
        response = client.get("/")
        
        assert response.status_code == 200
        assert "<title>Demo deck</title>" in response.text
        assert "theme/league.css" in response.text
        assert "# Hello" in response.text
        assert "/api/state" in response.text
    
    def test_page_escapes_content(self, client, source):
        source.slide_content = lambda: "<script>alert(1)</script>"
        
        response = client.get("/")
        
        assert "<script>alert(1)</script>" not in response.text
        assert "&lt;script&gt;" in response.text
    
    def test_page_saved_during_export(self, client, source):
        source.is_in_export.return_value = True
        
        response = client.get("/")
        
        assert response.status_code == 200
        assert "/api/export/rendered.html" in response.text
        request_id, data = source.save.call_args[0]
        assert request_id == "index.html"
        assert data == response.text
    
    def test_page_not_saved_outside_export(self, client, source):
        client.get("/")
        
        source.save.assert_not_called()
    
    def test_state(self, client, source):
        source.revision = 3
        source.export_pending.return_value = True
        
        response = client.get("/api/state")
        
        assert response.json() == {"revision": 3, "slide_count": 2, "exporting": True}
        source.is_in_export.assert_not_called()


class TestFilesAPI:
    """Tests for document assets."""
    
    def test_serves_file(self, client):
        response = client.get("/logo.png")
        
        assert response.status_code == 200
        assert response.content == b"\x89PNG"
    
    def test_relative_link_on_page_resolves_to_asset(self, client, source, tmp_path):
        (tmp_path / "img").mkdir()
        (tmp_path / "img" / "chart.svg").write_text("<svg/>", encoding="utf-8")
        source.slide_content = lambda: "![logo](logo.png)\n---\n![chart](img/chart.svg)"
        page = client.get("/")
        
        for link in ("logo.png", "img/chart.svg"):
            assert link in page.text
            response = client.get(urljoin(str(page.url), link))
            assert response.status_code == 200
    
    def test_missing_file(self, client):
        assert client.get("/nope.png").status_code == 404
    
    def test_traversal_refused(self, client):
        assert client.get("/..%2F..%2Fetc%2Fpasswd").status_code == 404
    
    def test_no_document(self, client, source):
        source.root_dir = lambda: ""
        
        assert client.get("/logo.png").status_code == 404
    
    def test_file_saved_during_export(self, client, source):
        source.is_in_export.return_value = True
        
        client.get("/logo.png")
        
        source.save.assert_called_once_with("logo.png", b"\x89PNG")


class TestExportAPI:
    """Tests for the export endpoint."""
    
    def test_conflict_without_export(self, client, source):
        response = client.post("/api/export/rendered.html", content=b"<html></html>")
        
        assert response.status_code == 409
        source.save.assert_not_called()
    
    def test_saves_body(self, client, source):
        source.is_in_export.return_value = True
        
        response = client.post("/api/export/rendered.html", content=b"<html></html>")
        
        assert response.status_code == 200
        assert response.json()["saved"].endswith("index.html")
        source.save.assert_called_once_with("rendered.html", b"<html></html>")
    
    def test_rejected_path(self, client, source):
        source.is_in_export.return_value = True
        source.save.side_effect = ExportPathError("outside")
        
        response = client.post("/api/export/evil.html", content=b"x")
        
        assert response.status_code == 400
        assert response.json()["detail"] == "outside"
