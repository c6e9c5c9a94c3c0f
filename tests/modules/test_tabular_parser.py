"""Tests for the quote-aware catalog table reader."""

from __future__ import annotations

import pytest

from catalog_app.modules.schema import RECORD_FIELDS
from catalog_app.modules.tabular_parser import parse_catalog, parse_table, split_row

HEADER = "ID,Name,Type,Affiliation,Desc,MediaKey"


def test_header_only_input_yields_no_records() -> None:
    assert parse_table(HEADER) == ()
    assert parse_table(HEADER + "\n\n   \n") == ()


@pytest.mark.parametrize("raw", ["", "   ", "\n\n", "\r\n \t\r\n"])
def test_blank_input_yields_no_records(raw: str) -> None:
    assert parse_table(raw) == ()


def test_quoted_commas_are_literal() -> None:
    raw = HEADER + '\n1,"A, B",T1,Aff1,"desc, with comma",abc'

    records = parse_table(raw)

    assert len(records) == 1
    assert records[0]["Name"] == "A, B"
    assert records[0]["Desc"] == "desc, with comma"
    assert records[0]["MediaKey"] == "abc"


def test_doubled_quotes_inside_quoted_field() -> None:
    assert split_row('1,"Frigate ""Hetman""",x') == ["1", 'Frigate "Hetman"', "x"]


def test_short_rows_are_padded_with_empty_strings() -> None:
    records = parse_table(HEADER + "\n7,Only name")

    assert records == (
        {"ID": "7", "Name": "Only name", "Type": "", "Affiliation": "", "Desc": "", "MediaKey": ""},
    )


def test_extra_cells_are_dropped() -> None:
    records = parse_table("ID,Name\n1,Alpha,surplus,more")

    assert records == ({"ID": "1", "Name": "Alpha"},)


def test_blank_lines_in_the_middle_are_ignored() -> None:
    raw = "ID,Name\n1,Alpha\n\n   \n2,Beta\n"

    assert [record["ID"] for record in parse_table(raw)] == ["1", "2"]


def test_windows_and_old_mac_line_breaks() -> None:
    raw = "ID,Name\r\n1,Alpha\r2,Beta"

    assert [record["Name"] for record in parse_table(raw)] == ["Alpha", "Beta"]


def test_cells_and_headers_are_trimmed() -> None:
    records = parse_table(" ID , Name \n  1 ,  \"  padded  \"  ")

    assert records == ({"ID": "1", "Name": "padded"},)


def test_unterminated_quote_runs_to_end_of_line() -> None:
    records = parse_table('ID,Name,Type\n1,"broken, still name,T1\n2,Beta,T2')

    assert records[0] == {"ID": "1", "Name": "broken, still name,T1", "Type": ""}
    assert records[1] == {"ID": "2", "Name": "Beta", "Type": "T2"}


def test_rows_without_content_are_skipped() -> None:
    records = parse_table("ID,Name\n,\n1,Alpha")

    assert records == ({"ID": "1", "Name": "Alpha"},)


def test_leading_byte_order_mark_is_ignored() -> None:
    records = parse_table("\ufeffID,Name\n1,Alpha")

    assert records[0]["ID"] == "1"


def test_none_input_is_rejected() -> None:
    with pytest.raises(TypeError):
        parse_table(None)  # type: ignore[arg-type]


def test_parse_catalog_maps_header_aliases_onto_canonical_fields() -> None:
    raw = "id,Name,Type,Affiliation,Description,imgId\n1,Alpha,T1,X,Text,a1"

    (record,) = parse_catalog(raw)

    assert tuple(record) == RECORD_FIELDS
    assert record["Desc"] == "Text"
    assert record["MediaKey"] == "a1"


def test_parse_catalog_fills_missing_columns() -> None:
    (record,) = parse_catalog("ID,Name\n1,Alpha")

    assert record == {
        "ID": "1",
        "Name": "Alpha",
        "Type": "",
        "Affiliation": "",
        "Desc": "",
        "MediaKey": "",
    }
