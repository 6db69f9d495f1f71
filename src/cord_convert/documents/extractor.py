# documents/extractor.py

import logging
from typing import Any

from pydantic import ValidationError

from cord_convert.errors import ExtractionError

from .models import Author, BibEntry, Document, FigureRef, Paragraph
from .schema import RawAuthor, RawBibAuthor, RawBibEntry, RawPaper, RawParagraph

logger = logging.getLogger(__name__)


def extract(raw_document: Any) -> Document:
    """
    Build a Document from a parsed paper JSON value.

    Extraction is all-or-nothing: a missing required field, or any field
    (required or optional) of the wrong type, raises ExtractionError for
    the whole document. Optional fields that are absent or null are
    tolerated.
    """
    try:
        paper = RawPaper.model_validate(raw_document)
    except ValidationError as e:
        errors = e.errors(include_url=False)
        logger.debug("Document failed validation with %d error(s)", len(errors))
        raise ExtractionError(errors) from e

    figures = {
        ref_id: FigureRef(id=ref_id, caption=entry.text)
        for ref_id, entry in (paper.ref_entries or {}).items()
    }
    bibliography = {
        key: _bib_entry(entry) for key, entry in (paper.bib_entries or {}).items()
    }

    return Document(
        title=paper.metadata.title,
        authors=[_author(a) for a in paper.metadata.authors],
        abstract_paragraphs=_paragraphs(paper.abstract),
        body_paragraphs=_paragraphs(paper.body_text),
        figures=figures,
        bibliography=bibliography,
    )


def _paragraphs(raw: list[RawParagraph]) -> list[Paragraph]:
    return [Paragraph(section_name=p.section, text=p.text) for p in raw]


def _author(raw: RawAuthor) -> Author:
    institution = None
    country = None
    if raw.affiliation is not None:
        institution = raw.affiliation.institution or None
        if raw.affiliation.location is not None:
            country = raw.affiliation.location.country or None
    return Author(
        first_name=raw.first,
        last_name=raw.last,
        institution=institution,
        country=country,
    )


def _bib_author(raw: RawBibAuthor) -> Author:
    return Author(first_name=raw.first, last_name=raw.last)


def _bib_entry(raw: RawBibEntry) -> BibEntry:
    # Years may arrive as JSON floats; round like "%.0f" (half to even)
    year = round(raw.year) if raw.year is not None else None
    return BibEntry(
        ref_id=raw.ref_id,
        title=raw.title,
        authors=[_bib_author(a) for a in raw.authors],
        venue=raw.venue or None,
        year=year,
    )
