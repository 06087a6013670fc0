import dataclasses
from pathlib import Path
from typing import Callable, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_http_client
from config.settings import End2EndSettings
from main import create_app

VERIFY_URL = "https://verifier.test/recaptcha/api/siteverify"

PROVISION_HTML = """<html>
<script>
  const siteKey;
  var other = 1;
</script>
</html>
"""


@pytest.fixture
def resource_root(tmp_path: Path) -> Path:
    """A throwaway bundle laid out like resources/end2end/files."""
    files = tmp_path / "end2end" / "files"
    files.mkdir(parents=True)
    (files / "provision.html").write_text(PROVISION_HTML, encoding="utf-8")
    (files / "app.js").write_text("console.log('hi');\n", encoding="utf-8")
    (files / "notes.txt").write_bytes(b"first\r\nsecond")
    (tmp_path / "secret.txt").write_text("do not serve", encoding="utf-8")
    return tmp_path


@pytest.fixture
def settings(resource_root: Path) -> End2EndSettings:
    return End2EndSettings(
        site_key="site-123",
        secret_key="secret-456",
        verify_url=VERIFY_URL,
        verify_timeout=5.0,
        resource_root=resource_root,
    )


@pytest.fixture
def make_client(settings: End2EndSettings) -> Callable[..., TestClient]:
    def _make(handler: Optional[Callable[[httpx.Request], httpx.Response]] = None, **overrides) -> TestClient:
        app = create_app(dataclasses.replace(settings, **overrides))
        if handler is not None:
            async def _mock_http_client():
                async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
                    yield client

            app.dependency_overrides[get_http_client] = _mock_http_client
        return TestClient(app)

    return _make


@pytest.fixture
def client(make_client) -> TestClient:
    return make_client()
