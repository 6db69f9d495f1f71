import json
from pathlib import Path

import pytest


def _paper(title: str, section: str) -> dict:
    return {
        "paper_id": title,
        "metadata": {"title": title, "authors": [{"first": "A", "last": "B"}]},
        "abstract": [{"section": "", "text": "Hello"}],
        "body_text": [{"section": section, "text": "World"}],
    }


@pytest.fixture
def dataset_dir(tmp_path: Path) -> Path:
    """A small CORD-19 style dataset: metadata CSV plus nested JSON subsets."""
    root = tmp_path / "dataset"
    (root / "comm_use_subset").mkdir(parents=True)
    (root / "biorxiv_medrxiv").mkdir()

    (root / "all_sources_metadata_2020-03-13.csv").write_text(
        "sha,source_x,title,doi,has_full_text\n"
        "paper1,CZI,Test,10.1/x,True\n"
        "paper2,PMC,No body,10.1/y,False\n"
        "missing,PMC,Lost,10.1/z,True\n"
        "paper3,biorxiv,Later,10.1/w,True\n",
        encoding="utf-8",
    )
    (root / "comm_use_subset" / "paper1.json").write_text(
        json.dumps(_paper("Test", "Intro")), encoding="utf-8"
    )
    (root / "biorxiv_medrxiv" / "paper3.json").write_text(
        json.dumps(_paper("Later", "Results")), encoding="utf-8"
    )
    return root


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    path = tmp_path / "output"
    path.mkdir()
    return path
