class PaperNotesError(Exception):
    """Base exception for all papernotes errors."""


class FetchError(PaperNotesError):
    """Raised when arXiv cannot be reached, answers non-2xx, or sends an empty body."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Failed to fetch {url}: {reason}")
        self.url = url
        self.reason = reason


class StorageError(PaperNotesError):
    """Raised when a folder or file cannot be created in the vault."""
