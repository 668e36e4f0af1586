from papernotes.models import PaperFields

TITLE_LABEL = "Title:"
AUTHORS_LABEL = "Authors:"
ABSTRACT_LABEL = "Abstract:"
AUTHOR_SEPARATOR = ", "


def clean_title(title: str) -> str:
    return title.replace(TITLE_LABEL, "", 1)


def clean_abstract(abstract: str) -> str:
    """Drop the label and flatten the abstract onto one line.

    Only the first double space is collapsed; later runs are left alone.
    """
    abstract = abstract.replace(ABSTRACT_LABEL, "", 1)
    abstract = abstract.replace("\n", " ")
    abstract = abstract.replace("  ", " ", 1)
    abstract = abstract.replace("\t", "")
    return abstract.strip()


def link_authors(authors: str) -> str:
    """Wrap every author in ``[[...]]`` so it becomes a note link."""
    names = authors.split(AUTHOR_SEPARATOR)
    names[0] = names[0].replace(AUTHORS_LABEL, "", 1)
    return AUTHOR_SEPARATOR.join(f"[[{name}]]" for name in names)


def normalize_fields(fields: PaperFields, authors_as_link: bool) -> PaperFields:
    authors = fields.authors
    if authors and authors_as_link:
        authors = link_authors(authors)
    return PaperFields(
        title=clean_title(fields.title) if fields.title else fields.title,
        authors=authors,
        abstract=clean_abstract(fields.abstract) if fields.abstract else fields.abstract,
    )
