from .extractor import extract
from .models import Author, BibEntry, Document, FigureRef, Paragraph
from .renderer import format_author, format_reference, render

__all__ = [
    "Author",
    "BibEntry",
    "Document",
    "FigureRef",
    "Paragraph",
    "extract",
    "format_author",
    "format_reference",
    "render",
]
