"""Pydantic models describing the raw paper JSON.

Only the fields the renderer needs are declared; anything else in the
document is ignored. Scalar fields use strict types, so a number where a
string is expected (or a string year) fails validation instead of being
silently converted.
"""

from typing import Annotated

from pydantic import AllowInfNan, BaseModel, ConfigDict, Strict, StrictInt, StrictStr

FiniteFloat = Annotated[float, Strict(), AllowInfNan(False)]


class _RawModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class RawLocation(_RawModel):
    country: StrictStr | None = None


class RawAffiliation(_RawModel):
    institution: StrictStr | None = None
    location: RawLocation | None = None


class RawAuthor(_RawModel):
    first: StrictStr
    last: StrictStr
    affiliation: RawAffiliation | None = None


class RawMetadata(_RawModel):
    title: StrictStr
    authors: list[RawAuthor]


class RawParagraph(_RawModel):
    section: StrictStr
    text: StrictStr


class RawRefEntry(_RawModel):
    text: StrictStr


class RawBibAuthor(_RawModel):
    first: StrictStr
    last: StrictStr


class RawBibEntry(_RawModel):
    ref_id: StrictStr
    title: StrictStr
    authors: list[RawBibAuthor]
    venue: StrictStr | None = None
    year: StrictInt | FiniteFloat | None = None


class RawPaper(_RawModel):
    metadata: RawMetadata
    abstract: list[RawParagraph]
    body_text: list[RawParagraph]
    ref_entries: dict[str, RawRefEntry] | None = None
    bib_entries: dict[str, RawBibEntry] | None = None
