from papernotes.models import PaperFields

TITLE = "{{title}}"
AUTHORS = "{{authors}}"
ABSTRACT = "{{abstract}}"
PDF_FILE = "{{pdf_file}}"
PLACEHOLDERS = (TITLE, AUTHORS, ABSTRACT, PDF_FILE)

DEFAULT_TEMPLATE = (
    "# {{title}}\n"
    "Authors: {{authors}}\n"
    "Link: [PDF]({{pdf_file}})\n"
    "\n"
    "## Abstract\n"
    "{{abstract}}"
)


def pdf_path(folder: str, pdf_folder: str, paper_id: str) -> str:
    return folder + "/" + pdf_folder + "/" + paper_id + ".pdf"


def render_note(template: str, fields: PaperFields, pdf_file: str) -> str:
    """Fill the placeholders of ``template`` with the paper's fields.

    Each placeholder is replaced at its first occurrence only, and only when
    the field is present; a missing field leaves its placeholder in the note.
    ``{{pdf_file}}`` is always filled, whether or not the PDF gets downloaded.
    """
    note = template
    if fields.title:
        note = note.replace(TITLE, fields.title, 1)
    if fields.authors:
        note = note.replace(AUTHORS, fields.authors, 1)
    if fields.abstract:
        note = note.replace(ABSTRACT, fields.abstract, 1)
    return note.replace(PDF_FILE, pdf_file, 1)
