# documents/models.py

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Author:
    first_name: str
    last_name: str
    institution: str | None = None
    country: str | None = None


@dataclass(frozen=True)
class Paragraph:
    section_name: str
    text: str


@dataclass(frozen=True)
class FigureRef:
    id: str
    caption: str


@dataclass(frozen=True)
class BibEntry:
    ref_id: str
    title: str
    authors: list[Author] = field(default_factory=list)
    venue: str | None = None
    year: int | None = None


@dataclass(frozen=True)
class Document:
    title: str
    authors: list[Author]
    abstract_paragraphs: list[Paragraph]
    body_paragraphs: list[Paragraph]
    figures: dict[str, FigureRef] = field(default_factory=dict)
    bibliography: dict[str, BibEntry] = field(default_factory=dict)
