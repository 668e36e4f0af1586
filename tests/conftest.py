from unittest.mock import MagicMock

import pytest

from papernotes.settings import Settings
from papernotes.vault import Vault

ABS_HTML = """<!DOCTYPE html>
<html><body>
<div id="content">
  <div id="abs">
    <h1 class="title mathjax"><span class="descriptor">Title:</span>{title}</h1>
    <div class="authors"><span class="descriptor">Authors:</span><a href="#">Alice</a>, <a href="#">Bob</a></div>
    <blockquote class="abstract mathjax">
<span class="descriptor">Abstract:</span>{abstract}</blockquote>
  </div>
</div>
</body></html>
"""


def make_abs_html(title: str = "Foo", abstract: str = "Hello  World\t") -> str:
    return ABS_HTML.format(title=title, abstract=abstract)


def mock_response(text: str = "", content: bytes = None, status_code: int = 200):
    """Return a mock requests.Response."""
    mock = MagicMock()
    mock.text = text
    mock.content = content if content is not None else text.encode()
    mock.status_code = status_code
    return mock


@pytest.fixture
def vault(tmp_path):
    return Vault(tmp_path)


@pytest.fixture
def settings():
    return Settings(download_pdf=False)
