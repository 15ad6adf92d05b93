"""
Reader for the fixed-width text files of the NASR subscription.

Each line of a NASR text file starts with a record type (e.g. ``TWR3``)
followed by fields at fixed column positions. Columns are described as
``(start, length)`` byte offsets into the raw line; the first pair is
conventionally the record type column and is compared with the requested
record type.
"""

import io
import logging
from pathlib import Path
from typing import BinaryIO, Iterator, List, Sequence, Tuple, Union

import pandas as pd

logger = logging.getLogger(__name__)

Span = Tuple[int, int]


class Record:
    """
    One matching line, split into trimmed fields.

    Fields are indexed in the order of the spans passed to
    ``DataFile.records``; indexing past the configured spans raises
    IndexError.
    """

    __slots__ = ('fields',)

    def __init__(self, fields: Sequence[str]):
        self.fields = tuple(fields)

    def __getitem__(self, index: int) -> str:
        return self.fields[index]

    def __len__(self) -> int:
        return len(self.fields)

    def __iter__(self) -> Iterator[str]:
        return iter(self.fields)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Record):
            return NotImplemented
        return self.fields == other.fields

    def __repr__(self) -> str:
        return f"Record({list(self.fields)!r})"


class DataFile:
    """
    A NASR text file held in memory as raw bytes.

    Columns are sliced from the raw line, then each field is decoded as
    UTF-8 with invalid sequences replaced, so reading never fails on
    encoding. A multi-byte character cut by a column boundary decodes to
    replacement characters.
    """

    def __init__(self, data: bytes):
        self.data = data

    @classmethod
    def from_bytes(cls, data: bytes) -> 'DataFile':
        return cls(data)

    @classmethod
    def from_text(cls, text: str) -> 'DataFile':
        return cls(text.encode('utf-8'))

    @classmethod
    def from_reader(cls, reader: BinaryIO) -> 'DataFile':
        return cls.from_bytes(reader.read())

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> 'DataFile':
        with open(path, 'rb') as f:
            return cls.from_reader(f)

    def _lines(self) -> Iterator[bytes]:
        for line in io.BytesIO(self.data):
            yield line.rstrip(b'\r\n')

    def records(self, record_type: str, spans: Sequence[Span]) -> Iterator[Record]:
        """
        Iterate the records of one type.

        Each call returns a new, independent iterator over the buffer; lines
        of other types are skipped.

        Args:
            record_type: Value expected in the first span, e.g. ``"TWR3"``
            spans: ``(start, length)`` column spans, first one being the type

        Yields:
            A Record per matching line, in file order
        """
        bounds = [(start, start + length) for start, length in spans]
        type_start, type_end = bounds[0]
        expected = record_type.encode('utf-8')
        for line in self._lines():
            if line[type_start:type_end] != expected:
                continue
            yield Record(
                line[start:end].decode('utf-8', errors='replace').strip()
                for start, end in bounds
            )

    def records_dataframe(self, record_type: str, spans: Sequence[Span], columns: List[str]) -> pd.DataFrame:
        """
        Collect the records of one type into a DataFrame.

        Args:
            record_type: Record type, e.g. ``"FIX1"``
            spans: Column spans, as for ``records``
            columns: Column names, one per span

        Returns:
            DataFrame with one row per record
        """
        if len(columns) != len(spans):
            raise ValueError(f"Expected {len(spans)} column names, got {len(columns)}")
        rows = [record.fields for record in self.records(record_type, spans)]
        logger.debug(f"Collected {len(rows)} {record_type} records")
        return pd.DataFrame(rows, columns=columns)
