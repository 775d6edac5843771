import json
import sys

import pytest

from shamir_recover import (
    InsufficientShares,
    InvalidDigit,
    MalformedShareRecord,
    SharePoint,
    load_share_records,
    parse_share_records,
    recover_from_records,
)

SAMPLE = {
    "keys": {"n": 4, "k": 3},
    "1": {"base": "10", "value": "4"},
    "2": {"base": "2", "value": "111"},
    "3": {"base": "10", "value": "12"},
    "6": {"base": "4", "value": "213"},
}


def test_parse_sample():
    records = parse_share_records(SAMPLE)
    assert records.n == 4
    assert records.k == 3
    assert records.degree == 2
    # index 6 is beyond n and index 4 is missing
    assert records.points == (SharePoint(1, 4), SharePoint(2, 7), SharePoint(3, 12))
    assert records.bases == (10, 2, 10)
    assert recover_from_records(records) == 3


def test_numeric_fields_may_be_ints():
    data = {"keys": {"n": 2, "k": 2}, "1": {"base": 10, "value": "3"}, "2": {"base": 16, "value": "5"}}
    assert recover_from_records(parse_share_records(data)) == 1


def test_hex_share_decodes():
    data = {"keys": {"n": "5", "k": "1"}, "5": {"base": "16", "value": "1a"}}
    records = parse_share_records(data)
    assert records.points == (SharePoint(5, 26),)


def test_missing_indices_may_leave_too_few_points():
    data = {"keys": {"n": 3, "k": 3}, "1": {"base": "10", "value": "1"}, "3": {"base": "10", "value": "2"}}
    records = parse_share_records(data)
    assert len(records.points) == 2
    with pytest.raises(InsufficientShares):
        recover_from_records(records)


@pytest.mark.parametrize(
    "data",
    [
        [],
        {},
        {"keys": {"n": 2}},
        {"keys": {"n": "two", "k": 1}},
        {"keys": {"n": 2, "k": 0}},
        {"keys": {"n": 1, "k": 1}, "1": {"value": "1"}},
        {"keys": {"n": 1, "k": 1}, "1": {"base": "x", "value": "1"}},
        {"keys": {"n": 1, "k": 1}, "1": {"base": 10, "value": 1}},
    ],
)
def test_malformed(data):
    with pytest.raises(MalformedShareRecord):
        parse_share_records(data)


def test_invalid_digit_propagates():
    data = {"keys": {"n": 1, "k": 1}, "1": {"base": "10", "value": "g"}}
    with pytest.raises(InvalidDigit):
        parse_share_records(data)


def test_load_from_file(tmp_path):
    path = tmp_path / "input1.json"
    path.write_text(json.dumps(SAMPLE), encoding="utf-8")
    records = load_share_records(path)
    assert records.source == str(path)
    assert recover_from_records(records) == 3


def test_load_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(MalformedShareRecord):
        load_share_records(path)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_share_records(tmp_path / "missing.json")


@pytest.mark.skipif(not hasattr(sys, "get_int_max_str_digits"), reason="no int string limit")
def test_load_oversized_number_literal(tmp_path):
    path = tmp_path / "huge_n.json"
    path.write_text('{"keys": {"n": ' + "9" * 5000 + ', "k": 1}}', encoding="utf-8")
    with pytest.raises(MalformedShareRecord):
        load_share_records(path)
