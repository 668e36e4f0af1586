from unittest.mock import patch

import pytest
import requests

from conftest import make_abs_html, mock_response
from papernotes import metadata
from papernotes.errors import FetchError
from papernotes.metadata import (
    abstract_url,
    extract_fields_from_abs_html,
    pdf_url,
    request_abstract_page,
    request_pdf,
)


@pytest.fixture(autouse=True)
def no_rate_limit(monkeypatch):
    # call the undecorated request helper so tests do not sleep
    monkeypatch.setattr(metadata, "_get", metadata._get.__wrapped__.__wrapped__)


def test_urls() -> None:
    assert abstract_url("2301.00001") == "https://arxiv.org/abs/2301.00001"
    assert pdf_url("2301.00001") == "https://arxiv.org/pdf/2301.00001.pdf"


def test_extract_fields_keeps_raw_labels() -> None:
    fields = extract_fields_from_abs_html(make_abs_html())
    assert fields.title == "Title:Foo"
    assert fields.authors == "Authors:Alice, Bob"
    assert fields.abstract == "\nAbstract:Hello  World\t"


def test_extract_fields_missing_section_falls_back_to_no_title() -> None:
    fields = extract_fields_from_abs_html("<html><body><p>Not found</p></body></html>")
    assert fields.title == "No title"
    assert fields.authors is None
    assert fields.abstract is None


def test_extract_fields_missing_title_element() -> None:
    html = '<div id="abs"><div class="authors">Authors:Alice</div></div>'
    fields = extract_fields_from_abs_html(html)
    assert fields.title == "No title"
    assert fields.authors == "Authors:Alice"
    assert fields.abstract is None


def test_extract_fields_empty_title_falls_back() -> None:
    fields = extract_fields_from_abs_html('<div id="abs"><h1 class="title"></h1></div>')
    assert fields.title == "No title"


def test_extract_fields_ignores_classes_outside_container() -> None:
    html = '<h1 class="title">Site</h1><div id="abs"><h1 class="title">Title:Real</h1></div>'
    assert extract_fields_from_abs_html(html).title == "Title:Real"


def test_request_abstract_page() -> None:
    html = make_abs_html()
    with patch(
        "papernotes.metadata.requests.get", return_value=mock_response(html)
    ) as get:
        assert request_abstract_page("2301.00001") == html
    get.assert_called_once_with("https://arxiv.org/abs/2301.00001")


def test_request_abstract_page_http_error_raises_fetch_error() -> None:
    response = mock_response("Not found", status_code=404)
    response.raise_for_status.side_effect = requests.HTTPError("404 Client Error")
    with patch("papernotes.metadata.requests.get", return_value=response):
        with pytest.raises(FetchError) as excinfo:
            request_abstract_page("0000.00000")
    assert excinfo.value.url == "https://arxiv.org/abs/0000.00000"
    assert isinstance(excinfo.value.__cause__, requests.HTTPError)


def test_request_abstract_page_network_error_raises_fetch_error() -> None:
    with patch(
        "papernotes.metadata.requests.get",
        side_effect=requests.ConnectionError("unreachable"),
    ):
        with pytest.raises(FetchError):
            request_abstract_page("2301.00001")


def test_request_abstract_page_empty_body_raises_fetch_error() -> None:
    with patch("papernotes.metadata.requests.get", return_value=mock_response("")):
        with pytest.raises(FetchError, match="empty response body"):
            request_abstract_page("2301.00001")


def test_request_pdf_returns_bytes() -> None:
    with patch(
        "papernotes.metadata.requests.get",
        return_value=mock_response(content=b"%PDF-1.5"),
    ) as get:
        assert request_pdf("2301.00001") == b"%PDF-1.5"
    get.assert_called_once_with("https://arxiv.org/pdf/2301.00001.pdf")


def test_request_pdf_http_error_raises_fetch_error() -> None:
    response = mock_response("Not found", status_code=404)
    response.raise_for_status.side_effect = requests.HTTPError("404 Client Error")
    with patch("papernotes.metadata.requests.get", return_value=response):
        with pytest.raises(FetchError) as excinfo:
            request_pdf("0000.00000")
    assert excinfo.value.url == "https://arxiv.org/pdf/0000.00000.pdf"


def test_request_pdf_empty_body_raises_fetch_error() -> None:
    with patch(
        "papernotes.metadata.requests.get", return_value=mock_response(content=b"")
    ):
        with pytest.raises(FetchError, match="empty response body"):
            request_pdf("2301.00001")
