import os
import sys
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

ARXIV_URL_PREFIXES = ("https://arxiv.org/abs/", "https://arxiv.org/pdf/")
ARXIV_URL_SUFFIXES = (".pdf", ".html")


def normalize_paper_id(raw: str) -> str:
    """Turn a pasted arXiv ID or URL into a bare ID.

    Handles abstract and PDF URLs, with or without a trailing ``.pdf`` or
    ``.html``. The result is not validated; a bogus ID just fails later when
    the abstract page is requested.
    """
    paper_id = raw.strip()
    for prefix in ARXIV_URL_PREFIXES:
        paper_id = paper_id.removeprefix(prefix)
    for suffix in ARXIV_URL_SUFFIXES:
        paper_id = paper_id.removesuffix(suffix)
    return paper_id


def configure_logging(level: str = "INFO") -> None:
    logger.remove()
    logger.add(sys.stderr, level=level)


def load_config() -> None:
    env_file = Path.home() / ".config" / "papernotes" / ".env"
    if env_file.exists():
        load_dotenv(env_file)
        logger.info(f"Loaded environment variables from {env_file}")
    else:
        load_dotenv()
        logger.info("Loaded environment variables from CWD .env")


def default_vault_root() -> Path:
    return Path(os.environ.get("PAPERNOTES_VAULT", "."))
