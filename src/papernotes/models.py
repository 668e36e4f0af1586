from dataclasses import dataclass, field
from enum import Enum


@dataclass
class PaperFields:
    # any of these may be missing if the abstract page lacks the section
    title: str = None
    authors: str = None  # comma-separated, or [[linked]] after normalization
    abstract: str = None


@dataclass
class NoteArtifact:
    path: str  # vault-relative, e.g. papers/Some Title.md
    text: str


@dataclass
class DocumentArtifact:
    path: str  # vault-relative, e.g. papers/_pdfs/2301.00001.pdf
    url: str
    downloaded: bool = False


class NoteStatus(Enum):
    CREATED = "created"
    DUPLICATE_NOTE = "duplicate-note"


class DocumentStatus(Enum):
    DOWNLOADED = "downloaded"
    DUPLICATE_DOCUMENT = "duplicate-document"
    SKIPPED = "skipped"  # download_pdf is off


@dataclass
class NoteResult:
    paper_id: str
    note: NoteArtifact
    status: NoteStatus
    document: DocumentArtifact = None
    document_status: DocumentStatus = DocumentStatus.SKIPPED
    notices: list[str] = field(default_factory=list)

    @property
    def created(self) -> bool:
        return self.status is NoteStatus.CREATED
