"""Citation helper formatting."""

from datetime import date

from backend.dashboard.routers.citation_helper import (
    SourceInfo,
    apa_authors,
    chicago_authors,
    generate_citations,
    mla_authors,
    mla_date,
)


def test_author_formats():
    assert mla_authors("Jane Smith") == "Jane Smith"
    assert mla_authors("Jane Smith, John Doe") == "Jane Smith and John Doe"
    assert mla_authors("Jane Smith, John Doe, Ann Lee") == "Jane Smith et al."
    assert apa_authors("Jane Ann Smith") == "Smith, J. A."
    assert apa_authors("Jane Smith, John Doe") == "Smith, J. & Doe, J."
    assert apa_authors("Jane Smith, John Doe, Ann Lee") == "Smith, J., Doe, J., & Lee, A."
    assert chicago_authors("Jane Smith") == "Smith, Jane"
    assert chicago_authors("Jane Smith, John Doe") == "Smith, Jane et al."


def test_mla_date_falls_back_to_raw_value():
    assert mla_date("2023-05-10") == "May 10, 2023"
    assert mla_date("spring 2020") == "spring 2020"


def test_website_citations():
    info = SourceInfo(
        title="Why Bees Matter",
        authors="Jane Smith",
        publisher="Nature Today",
        publicationDate="2023-05-10",
        accessDate="2024-01-02",
        url="https://example.org/bees",
    )
    result = generate_citations(info)
    assert result.mla == (
        'Jane Smith. "Why Bees Matter." Nature Today, May 10, 2023, https://example.org/bees. '
        "Accessed January 2, 2024."
    )
    assert result.apa == "Smith, J. (2023). Why Bees Matter. Nature Today. https://example.org/bees"
    assert result.chicago == 'Smith, Jane. "Why Bees Matter." Nature Today. 2023. https://example.org/bees.'


def test_book_citations_without_date():
    info = SourceInfo(sourceType="book", title="River Stories", authors="Ann Lee", publisher="Oak Press", city="Boston")
    result = generate_citations(info)
    assert result.mla == "Ann Lee. River Stories. Boston: Oak Press, n.d.."
    assert result.apa == "Lee, A. (n.d.). River Stories. Oak Press."
    assert result.chicago == "Lee, Ann. River Stories. Boston: Oak Press, n.d.."


def test_journal_citations():
    info = SourceInfo(
        sourceType="journal",
        title="Tidal Patterns",
        authors="Jane Smith, John Doe",
        publisher="Ocean Review",
        publicationDate="2021-03-01",
        volume="12",
        issue="3",
        pages="45-60",
        doi="https://doi.org/10.1000/xyz",
    )
    result = generate_citations(info)
    assert result.mla == (
        'Jane Smith and John Doe. "Tidal Patterns." Ocean Review, vol. 12, no. 3, March 1, 2021, '
        "pp. 45-60, https://doi.org/10.1000/xyz."
    )
    assert result.apa == "Smith, J. & Doe, J. (2021). Tidal Patterns. Ocean Review, 12(3), 45-60. https://doi.org/10.1000/xyz"
    assert result.chicago == 'Smith, Jane et al. "Tidal Patterns." Ocean Review 12, no. 3 (2021): 45-60.'


def test_title_and_authors_required(client):
    resp = client.post("/english/citation-helper", json={"title": "Only a title"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Please provide at least the title and authors of your source."}


def test_citations_endpoint(client):
    resp = client.post(
        "/english/citation-helper",
        json={"sourceType": "book", "title": "River Stories", "authors": "Ann Lee", "publisher": "Oak Press"},
    )
    assert resp.status_code == 200
    assert set(resp.json()) == {"mla", "apa", "chicago"}


def test_reset_form_has_initial_values(client):
    form = client.get("/english/citation-helper/form").json()
    assert form == {
        "sourceType": "website",
        "title": "",
        "authors": "",
        "publisher": "",
        "publicationDate": "",
        "accessDate": date.today().isoformat(),
        "url": "",
        "volume": "",
        "issue": "",
        "pages": "",
        "doi": "",
        "city": "",
    }
