import pytest
import pandas as pd

from nasr_sct.parsers.fixed_width import DataFile, Record

SPANS = [(0, 4), (4, 4), (8, 10)]


@pytest.fixture
def datafile(line):
    text = "\n".join([
        line({0: "TWR1", 4: "IAH", 8: "HOUSTON"}),
        line({0: "TWR3", 4: "IAH", 8: "118.1"}),
        line({0: "TWR3", 4: "HOU", 8: "118.7"}),
        "",
        line({0: "TWR3", 4: "SGR"}),
    ])
    return DataFile.from_text(text)


def test_records_match_discriminant(datafile):
    records = list(datafile.records("TWR3", SPANS))
    assert records == [
        Record(["TWR3", "IAH", "118.1"]),
        Record(["TWR3", "HOU", "118.7"]),
        Record(["TWR3", "SGR", ""]),
    ]


def test_fields_are_positional_and_trimmed(datafile):
    record = next(datafile.records("TWR1", SPANS))
    assert record[0] == "TWR1"
    assert record[1] == "IAH"
    assert record[2] == "HOUSTON"
    assert len(record) == 3
    assert list(record) == ["TWR1", "IAH", "HOUSTON"]


def test_out_of_range_field_raises(datafile):
    record = next(datafile.records("TWR1", SPANS))
    with pytest.raises(IndexError):
        record[3]


def test_records_are_restartable(datafile):
    first = datafile.records("TWR3", SPANS)
    second = datafile.records("TWR3", SPANS)
    assert next(first)[1] == "IAH"
    assert [r[1] for r in second] == ["IAH", "HOU", "SGR"]
    assert [r[1] for r in first] == ["HOU", "SGR"]
    assert list(datafile.records("TWR3", SPANS)) == list(datafile.records("TWR3", SPANS))


def test_unknown_discriminant_yields_nothing(datafile):
    assert list(datafile.records("TWR9", SPANS)) == []


def test_records_are_lazy(datafile):
    records = datafile.records("TWR3", SPANS)
    assert not isinstance(records, list)
    assert next(records)[1] == "IAH"


def test_crlf_line_endings():
    datafile = DataFile.from_text("TWR3IAH 118.1\r\nTWR3HOU 118.7\r\n")
    assert [r[2] for r in datafile.records("TWR3", SPANS)] == ["118.1", "118.7"]


def test_invalid_bytes_are_replaced():
    datafile = DataFile.from_bytes(b"TWR3IAH \xff\xfe 118.1\n")
    record = next(datafile.records("TWR3", [(0, 4), (4, 4), (8, 20)]))
    assert "\ufffd" in record[2]
    assert record[2].endswith("118.1")


def test_columns_are_byte_offsets():
    datafile = DataFile.from_bytes("TWR3\u00c9AH118.1\n".encode("utf-8"))
    assert next(datafile.records("TWR3", SPANS)) == Record(["TWR3", "\u00c9AH", "118.1"])


def test_character_split_by_column_is_replaced():
    datafile = DataFile.from_bytes("TWR3ABC\u00c9118\n".encode("utf-8"))
    record = next(datafile.records("TWR3", SPANS))
    assert record[1] == "ABC\ufffd"
    assert record[2] == "\ufffd118"


def test_from_file(tmp_path, line):
    path = tmp_path / "TWR.txt"
    path.write_bytes((line({0: "TWR3", 4: "IAH", 8: "118.1"}) + "\n").encode("ascii"))
    assert next(DataFile.from_file(path).records("TWR3", SPANS))[2] == "118.1"


def test_records_dataframe(datafile):
    df = datafile.records_dataframe("TWR3", SPANS, ["type", "ident", "frequency"])
    assert isinstance(df, pd.DataFrame)
    assert list(df.columns) == ["type", "ident", "frequency"]
    assert df["ident"].tolist() == ["IAH", "HOU", "SGR"]


def test_records_dataframe_empty(datafile):
    df = datafile.records_dataframe("TWR9", SPANS, ["type", "ident", "frequency"])
    assert df.empty
    assert list(df.columns) == ["type", "ident", "frequency"]


def test_records_dataframe_column_mismatch(datafile):
    with pytest.raises(ValueError):
        datafile.records_dataframe("TWR3", SPANS, ["type"])
