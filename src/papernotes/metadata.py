import requests
from bs4 import BeautifulSoup
from loguru import logger
from ratelimit import limits, sleep_and_retry

from papernotes.errors import FetchError
from papernotes.models import PaperFields

ARXIV_BASE_URL = "https://arxiv.org/"
NO_TITLE = "No title"


def abstract_url(paper_id: str) -> str:
    return ARXIV_BASE_URL + "abs/" + paper_id


def pdf_url(paper_id: str) -> str:
    return ARXIV_BASE_URL + "pdf/" + paper_id + ".pdf"


def get_text(soup: BeautifulSoup, class_: str) -> str | None:
    """Text content of the first descendant with the given class, or None.

    Unlike a plain ``find().get_text()`` this tolerates a missing ``soup`` and
    keeps the text verbatim; empty text counts as missing.
    """
    found = soup.find(class_=class_) if soup is not None else None
    return (found.get_text() or None) if found is not None else None


def extract_fields_from_abs_html(html: str) -> PaperFields:
    """Extract title, authors and abstract from an arXiv abstract page.

    The fields are returned raw, still carrying the ``Title:``, ``Authors:``
    and ``Abstract:`` labels arXiv renders in front of them. The title is
    never missing: it falls back to ``"No title"``.
    """
    soup = BeautifulSoup(html, "html.parser")
    abs_soup = soup.find(id="abs")
    if abs_soup is None:
        logger.warning("No abstract section found in page; fields will be empty")
    return PaperFields(
        title=get_text(abs_soup, "title") or NO_TITLE,
        authors=get_text(abs_soup, "authors"),
        abstract=get_text(abs_soup, "abstract"),
    )


# arXiv asks automated clients for no more than one request every 3 seconds;
# abstract pages and PDFs share this one limiter
@sleep_and_retry
@limits(calls=1, period=3)
def _get(url: str) -> requests.Response:
    try:
        response = requests.get(url)
        response.raise_for_status()
    except requests.RequestException as e:
        raise FetchError(url, str(e)) from e
    if not response.content:
        raise FetchError(url, "empty response body")
    return response


def request_abstract_page(paper_id: str) -> str:
    """Get the HTML of the arXiv abstract page for ``paper_id``.

    Parameters
    ----------
    paper_id : str
        Bare arXiv ID, e.g. ``2301.00001``.

    Returns
    -------
    str
        The page markup.

    Raises
    ------
    FetchError
        On network failure, a non-2xx status or an empty body. Not retried.
    """
    url = abstract_url(paper_id)
    logger.debug("Requesting abstract page {}", url)
    return _get(url).text


def request_pdf(paper_id: str) -> bytes:
    url = pdf_url(paper_id)
    logger.debug("Requesting PDF {}", url)
    response = _get(url)
    logger.info("Downloaded {} bytes from {}", len(response.content), url)
    return response.content
