from loguru import logger

from papernotes.fields import normalize_fields
from papernotes.metadata import (
    extract_fields_from_abs_html,
    pdf_url,
    request_abstract_page,
    request_pdf,
)
from papernotes.models import (
    DocumentArtifact,
    DocumentStatus,
    NoteArtifact,
    NoteResult,
    NoteStatus,
    PaperFields,
)
from papernotes.settings import FileNameFormat, Settings
from papernotes.templates import pdf_path, render_note
from papernotes.utils import normalize_paper_id
from papernotes.vault import Vault


def note_file_name(
    fields: PaperFields, paper_id: str, file_name_format: FileNameFormat
) -> str:
    if file_name_format is FileNameFormat.TITLE:
        return fields.title.replace(":", "-", 1)
    return paper_id


def save_pdf(
    vault: Vault, settings: Settings, paper_id: str
) -> tuple[DocumentArtifact, DocumentStatus, str | None]:
    pdf_folder = settings.folder + "/" + settings.pdf_folder
    document = DocumentArtifact(
        path=pdf_path(settings.folder, settings.pdf_folder, paper_id),
        url=pdf_url(paper_id),
    )
    vault.ensure_folder(pdf_folder)
    if vault.exists(document.path):
        notice = f"PDF already exists: {paper_id}"
        logger.warning(notice)
        return document, DocumentStatus.DUPLICATE_DOCUMENT, notice
    vault.create_binary(document.path, request_pdf(paper_id))
    document.downloaded = True
    return document, DocumentStatus.DOWNLOADED, None


def save_paper_note(
    vault: Vault, settings: Settings, paper_id: str, fields: PaperFields, text: str
) -> NoteResult:
    """Write the rendered note (and the PDF, if enabled) into the vault.

    Steps run in order and the first failure stops the rest; nothing already
    written is rolled back. An existing PDF is not downloaded again, and an
    existing note is left untouched: both are reported as notices on the
    returned result rather than raised.
    """
    notices = []
    document, document_status = None, DocumentStatus.SKIPPED
    if settings.download_pdf:
        document, document_status, notice = save_pdf(vault, settings, paper_id)
        if notice:
            notices.append(notice)

    file_name = note_file_name(fields, paper_id, settings.file_name_format)
    note = NoteArtifact(path=settings.folder + "/" + file_name + ".md", text=text)
    result = NoteResult(
        paper_id=paper_id,
        note=note,
        status=NoteStatus.CREATED,
        document=document,
        document_status=document_status,
        notices=notices,
    )

    if vault.exists(note.path):
        notice = "File already exists"
        logger.warning("{}: {}", notice, note.path)
        notices.append(notice)
        result.status = NoteStatus.DUPLICATE_NOTE
        return result

    vault.ensure_folder(settings.folder)
    vault.create(note.path, note.text)
    logger.info("Created note {}", note.path)
    vault.open_file(note.path)
    return result


def create_paper_note(raw_id: str, settings: Settings, vault: Vault) -> NoteResult:
    """Fetch an arXiv paper and turn it into a note in ``vault``.

    Parameters
    ----------
    raw_id : str
        arXiv ID or URL as pasted by the user.
    settings : Settings
        Template, naming and folder configuration for this run.
    vault : Vault
        Where the note and PDF are written.

    Returns
    -------
    NoteResult
        The note (created or duplicate) plus the PDF outcome and any notices.
    """
    paper_id = normalize_paper_id(raw_id)
    logger.info("Loading paper details for {}", paper_id)
    html = request_abstract_page(paper_id)
    fields = normalize_fields(
        extract_fields_from_abs_html(html), settings.authors_as_link
    )
    text = render_note(
        settings.template,
        fields,
        pdf_path(settings.folder, settings.pdf_folder, paper_id),
    )
    return save_paper_note(vault, settings, paper_id, fields, text)
