from typing import Any

import pytest


@pytest.fixture
def raw_paper() -> dict[str, Any]:
    """A well-formed paper document as it appears in the dataset JSON."""
    return {
        "paper_id": "paper1",
        "metadata": {
            "title": "Coronavirus spike proteins",
            "authors": [
                {
                    "first": "Jane",
                    "middle": [],
                    "last": "Doe",
                    "affiliation": {
                        "laboratory": "",
                        "institution": "MIT",
                        "location": {"settlement": "Cambridge", "country": "USA"},
                    },
                    "email": "",
                },
                {"first": "John", "middle": ["Q"], "last": "Smith", "affiliation": {}},
            ],
        },
        "abstract": [
            {"section": "Abstract", "text": "We study spikes.", "cite_spans": []},
        ],
        "body_text": [
            {"section": "Introduction", "text": "Spikes matter.", "cite_spans": []},
            {"section": "Introduction", "text": "A lot.", "cite_spans": []},
            {"section": "Methods", "text": "We measured.", "cite_spans": []},
        ],
        "ref_entries": {
            "FIGREF0": {"text": "Spike structure.", "type": "figure"},
            "TABREF0": {"text": "Binding results.", "type": "table"},
        },
        "bib_entries": {
            "BIBREF0": {
                "ref_id": "b0",
                "title": "Prior spikes",
                "authors": [
                    {"first": "A", "middle": [], "last": "Lee", "suffix": ""},
                    {"first": "B", "middle": [], "last": "Kim", "suffix": ""},
                ],
                "year": 2019,
                "venue": "Nature",
                "volume": "",
                "issn": "",
                "pages": "",
                "other_ids": {},
            },
        },
    }
