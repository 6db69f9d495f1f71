from pathlib import Path

import pytest

from cord_convert.errors import MetadataOpenError
from cord_convert.metadata.models import MetadataRecord
from cord_convert.metadata.reader import read_metadata


@pytest.fixture
def metadata_file(tmp_path: Path) -> Path:
    path = tmp_path / "metadata.csv"
    path.write_text(
        "sha,source_x,title,has_full_text\n"
        'paper1,CZI,"Spikes, and more",True\n'
        "paper2,PMC,Other,False\n"
        "\n"
        "paper3,PMC,Third,true\n"
        "paper4,PMC,Fourth,True\n",
        encoding="utf-8",
    )
    return path


class TestReadMetadata:
    def test_skips_header_and_blank_rows(self, metadata_file: Path) -> None:
        records = list(read_metadata(metadata_file))

        assert [r.file_id for r in records] == ["paper1", "paper2", "paper3", "paper4"]

    def test_flag_must_equal_true_exactly(self, metadata_file: Path) -> None:
        records = list(read_metadata(metadata_file))

        assert records == [
            MetadataRecord(file_id="paper1", has_full_text=True),
            MetadataRecord(file_id="paper2", has_full_text=False),
            MetadataRecord(file_id="paper3", has_full_text=False),
            MetadataRecord(file_id="paper4", has_full_text=True),
        ]

    def test_custom_flag(self, metadata_file: Path) -> None:
        records = list(read_metadata(metadata_file, full_text_flag="true"))

        assert [r.file_id for r in records if r.has_full_text] == ["paper3"]

    def test_single_column_row_uses_same_column_as_flag(self, tmp_path: Path) -> None:
        path = tmp_path / "metadata.csv"
        path.write_text("id\nTrue\nabc\n", encoding="utf-8")

        records = list(read_metadata(path))

        assert records == [
            MetadataRecord(file_id="True", has_full_text=True),
            MetadataRecord(file_id="abc", has_full_text=False),
        ]

    def test_empty_file_yields_nothing(self, tmp_path: Path) -> None:
        path = tmp_path / "metadata.csv"
        path.write_text("", encoding="utf-8")

        assert list(read_metadata(path)) == []

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(MetadataOpenError, match="missing.csv"):
            list(read_metadata(tmp_path / "missing.csv"))

    def test_malformed_line_stops_reading(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        path = tmp_path / "metadata.csv"
        path.write_text(
            'id,title,flag\npaper1,ok,True\npaper2,"Broken"title,True\npaper3,ok,True\n',
            encoding="utf-8",
        )

        records = list(read_metadata(path))

        assert [r.file_id for r in records] == ["paper1"]
        assert "Stopped reading metadata file" in caplog.text

    def test_reads_fields_longer_than_csv_default_limit(self, tmp_path: Path) -> None:
        path = tmp_path / "metadata.csv"
        abstract = "x" * 200_000
        path.write_text(
            f'id,abstract,flag\npaper1,"{abstract}",True\npaper2,short,True\n',
            encoding="utf-8",
        )

        records = list(read_metadata(path))

        assert records == [
            MetadataRecord(file_id="paper1", has_full_text=True),
            MetadataRecord(file_id="paper2", has_full_text=True),
        ]
