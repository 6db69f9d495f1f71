# documents/renderer.py

import re
from collections.abc import Iterable

from .models import Author, BibEntry, Document, FigureRef, Paragraph

TITLE_HEADER = "\nTITLE\n"
AUTHORS_HEADER = "\nAUTHORS\n"
FIGURES_HEADER = "\nFIGURES AND TABLES\n\n"
REFERENCES_HEADER = "\nREFERENCES\n\n"

_DIGITS = re.compile(r"(\d+)")


def render(document: Document) -> str:
    """
    Render a Document as plain text.

    Pure and deterministic: figure and bibliography entries are emitted in
    numeric-aware key order, everything else in document order.
    """
    parts = [TITLE_HEADER, document.title, "\n", AUTHORS_HEADER]
    parts.extend(format_author(a) for a in document.authors)
    parts.append("\n")
    parts.append(format_paragraphs(document.abstract_paragraphs))
    parts.append(format_paragraphs(document.body_paragraphs))

    if document.figures:
        parts.append(FIGURES_HEADER)
        for key in sorted(document.figures, key=_natural_key):
            parts.append(format_figure(document.figures[key]))

    if document.bibliography:
        parts.append(REFERENCES_HEADER)
        for key in sorted(document.bibliography, key=_natural_key):
            parts.append(format_reference(document.bibliography[key]))

    return "".join(parts)


def format_author(author: Author) -> str:
    line = f"{author.first_name} {author.last_name}"
    if author.institution:
        line += f" - {author.institution}"
    if author.country:
        line += f" - {author.country}"
    return line + "\n"


def format_paragraphs(paragraphs: Iterable[Paragraph]) -> str:
    """
    Emit paragraphs in order, writing a section header whenever the
    section name differs from the previous paragraph's.

    The first paragraph always gets a header. A header for an empty
    section name is a single blank line.
    """
    parts = []
    current: str | None = None
    for paragraph in paragraphs:
        if paragraph.section_name != current:
            parts.append(_section_header(paragraph.section_name))
            current = paragraph.section_name
        parts.append(paragraph.text + "\n")
    return "".join(parts)


def format_figure(figure: FigureRef) -> str:
    return f"{figure.id}\n{figure.caption}\n"


def format_reference(entry: BibEntry) -> str:
    authors = " - ".join(f"{a.first_name} {a.last_name}" for a in entry.authors)
    published = " - ".join(
        value
        for value in (entry.venue, str(entry.year) if entry.year is not None else None)
        if value
    )
    return f"{entry.ref_id}. {authors}\n{entry.title}\n{published}\n\n"


def _section_header(name: str) -> str:
    if not name:
        return "\n"
    return f"\n{name}\n\n"


def _natural_key(key: str) -> tuple[list[int | str], str]:
    # "BIBREF2" sorts before "BIBREF10"
    # split() with a capturing group puts the digit runs at odd indices
    parts: list[int | str] = [
        int(token) if i % 2 else token.lower()
        for i, token in enumerate(_DIGITS.split(key))
    ]
    return parts, key
