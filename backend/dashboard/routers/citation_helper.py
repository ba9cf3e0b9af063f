from __future__ import annotations

from datetime import date, datetime
from typing import List, Literal, Optional

from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict, Field

from ..errors import ToolError


router = APIRouter(prefix="/english/citation-helper", tags=["citations"])


class SourceInfo(BaseModel):
    """Citation form fields. A fresh instance is the reset state."""

    model_config = ConfigDict(populate_by_name=True)

    source_type: Literal["website", "book", "journal"] = Field(default="website", alias="sourceType")
    title: str = ""
    authors: str = ""
    publisher: str = ""
    publication_date: str = Field(default="", alias="publicationDate")
    access_date: str = Field(default_factory=lambda: date.today().isoformat(), alias="accessDate")
    url: str = ""
    volume: str = ""
    issue: str = ""
    pages: str = ""
    doi: str = ""
    city: str = ""


class CitationResult(BaseModel):
    mla: str
    apa: str
    chicago: str


def _parse_date(value: str) -> Optional[date]:
    try:
        return datetime.fromisoformat(value.strip()).date()
    except ValueError:
        return None


def mla_date(value: str) -> str:
    parsed = _parse_date(value)
    if parsed is None:
        return value
    return f"{parsed.strftime('%B')} {parsed.day}, {parsed.year}"


def year_of(value: str) -> str:
    parsed = _parse_date(value)
    return str(parsed.year) if parsed else value


def _split_authors(authors: str) -> List[str]:
    return [a.strip() for a in authors.split(",") if a.strip()]


def mla_authors(authors: str) -> str:
    names = _split_authors(authors)
    if not names:
        return ""
    if len(names) == 1:
        return names[0]
    if len(names) == 2:
        return f"{names[0]} and {names[1]}"
    return f"{names[0]} et al."


def _apa_name(author: str) -> str:
    parts = author.split()
    if len(parts) < 2:
        return author
    last = parts.pop()
    initials = " ".join(f"{name[0]}." for name in parts)
    return f"{last}, {initials}"


def apa_authors(authors: str) -> str:
    names = [_apa_name(a) for a in _split_authors(authors)]
    if len(names) <= 2:
        return " & ".join(names)
    return f"{', '.join(names[:-1])}, & {names[-1]}"


def chicago_authors(authors: str) -> str:
    names = _split_authors(authors)
    if not names:
        return ""
    parts = names[0].split()
    formatted = f"{parts[-1]}, {' '.join(parts[:-1])}" if len(parts) >= 2 else names[0]
    if len(names) > 1:
        formatted += " et al."
    return formatted


def mla_citation(info: SourceInfo) -> str:
    authors = mla_authors(info.authors)
    if info.source_type == "website":
        published = mla_date(info.publication_date) if info.publication_date else "n.d."
        citation = f'{authors}. "{info.title}." '
        if info.publisher:
            citation += f"{info.publisher}, "
        citation += f"{published}, {info.url}."
        if info.access_date:
            citation += f" Accessed {mla_date(info.access_date)}."
        return citation
    if info.source_type == "book":
        citation = f"{authors}. {info.title}. "
        if info.city:
            citation += f"{info.city}: "
        if info.publisher:
            citation += f"{info.publisher}, "
        citation += f"{year_of(info.publication_date) if info.publication_date else 'n.d.'}."
        return citation
    citation = f'{authors}. "{info.title}." {info.publisher}'
    if info.volume:
        citation += f", vol. {info.volume}"
    if info.issue:
        citation += f", no. {info.issue}"
    if info.publication_date:
        citation += f", {mla_date(info.publication_date)}"
    if info.pages:
        citation += f", pp. {info.pages}"
    if info.doi:
        citation += f", {info.doi}"
    return citation + "."


def apa_citation(info: SourceInfo) -> str:
    authors = apa_authors(info.authors)
    year = year_of(info.publication_date) if info.publication_date else "n.d."
    head = f"{authors} ({year}). {info.title}."
    if info.source_type == "website":
        return f"{head} {info.publisher}. {info.url}".rstrip()
    if info.source_type == "book":
        return f"{head} {info.publisher}."
    citation = f"{head} {info.publisher}"
    if info.volume:
        citation += f", {info.volume}"
    if info.issue:
        citation += f"({info.issue})"
    if info.pages:
        citation += f", {info.pages}"
    citation += "."
    if info.doi:
        citation += f" {info.doi}"
    return citation


def chicago_citation(info: SourceInfo) -> str:
    authors = chicago_authors(info.authors)
    year = year_of(info.publication_date) if info.publication_date else "n.d."
    if info.source_type == "website":
        return f'{authors}. "{info.title}." {info.publisher}. {year}. {info.url}.'
    if info.source_type == "book":
        citation = f"{authors}. {info.title}. "
        if info.city:
            citation += f"{info.city}: "
        if info.publisher:
            citation += f"{info.publisher}, "
        return citation + f"{year}."
    citation = f'{authors}. "{info.title}." {info.publisher} {info.volume}'
    if info.issue:
        citation += f", no. {info.issue}"
    citation += f" ({year})"
    if info.pages:
        citation += f": {info.pages}"
    return citation + "."


def generate_citations(info: SourceInfo) -> CitationResult:
    if not info.title.strip() or not info.authors.strip():
        raise ToolError(400, "Please provide at least the title and authors of your source.")
    return CitationResult(
        mla=mla_citation(info),
        apa=apa_citation(info),
        chicago=chicago_citation(info),
    )


@router.get("/form")
def initial_form():
    return SourceInfo().model_dump(by_alias=True)


@router.post("", response_model=CitationResult)
def create_citations(info: SourceInfo):
    return generate_citations(info)
