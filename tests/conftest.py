"""Shared test fixtures for wordshk-parser."""

import csv

import pytest

from wordshk_parser import CsvRecord

TWO_SENSE_BODY = "\n".join([
    "(pos:名詞)(label:書面語)",
    "<explanation>",
    "yue:一種飲品",
    "eng:a drink",
    "<eg>",
    "yue:飲茶 (jam2 caa4)",
    "eng:to drink tea",
    "----",
    "<explanation>",
    "yue:去茶樓食點心",
    "eng:to have dim sum",
    "at a Chinese restaurant",
    "<eg>",
    "yue:今朝去飲茶",
    "eng:going for dim sum this morning",
    "<eg>",
    "yue:飲咗茶未呀？",
])


@pytest.fixture
def two_sense_body():
    return TWO_SENSE_BODY


@pytest.fixture
def record():
    """A well-formed row with two senses."""
    return CsvRecord(
        id="42",
        headword="飲茶:jam2 caa4",
        entry=TWO_SENSE_BODY,
        variants="飲茶",
        warning="",
        public="已公開",
    )


@pytest.fixture
def write_export(tmp_path):
    """Write rows to a CSV file laid out like the words.hk export."""

    def _write(rows, name="all-1700000000.csv"):
        path = tmp_path / name
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write("# words.hk export\n")
            f.write("# licence notice\n")
            writer = csv.writer(f)
            for row in rows:
                writer.writerow(row)
        return path

    return _write
