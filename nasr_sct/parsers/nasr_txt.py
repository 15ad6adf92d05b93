"""
Record layouts of the legacy NASR text files used for sct2 generation.

TWR.txt provides tower frequencies (TWR3) and the class of airspace around
each towered airport (TWR8). FIX.txt provides named fixes (FIX1).
"""

import logging
import re
from typing import Dict, Iterable, Iterator

import pandas as pd

from ..models.airspace import AirspaceClass
from ..models.fix import Fix
from ..models.latlon import LatLon
from .fixed_width import DataFile

logger = logging.getLogger(__name__)

TWR3_SPANS = [
    (0, 4),   # Record type
    (4, 4),   # Facility ident
    (8, 44),  # Primary frequencies
]

TWR8_SPANS = [
    (0, 4),   # Record type
    (4, 4),   # Facility ident
    (8, 1),   # Class B
    (9, 1),   # Class C
    (10, 1),  # Class D
    (11, 1),  # Class E
]

FIX1_SPANS = [
    (0, 4),    # Record type
    (66, 14),  # Latitude
    (80, 14),  # Longitude
    (228, 5),  # NAS ident
    (237, 4),  # ARTCC ident
]

FIX1_COLUMNS = ["record_type", "latitude", "longitude", "ident", "artcc_id"]

FREQUENCY_PATTERN = re.compile(r"\d{1,3}\.\d{1,3}")


def tower_frequencies(twr: DataFile) -> Dict[str, str]:
    """
    Primary tower frequency per facility ident.

    The first frequency found for an ident is kept.
    """
    frequencies: Dict[str, str] = {}
    for record in twr.records("TWR3", TWR3_SPANS):
        tokens = record[2].split()
        if not tokens:
            continue
        match = FREQUENCY_PATTERN.search(tokens[0])
        if match:
            frequencies.setdefault(record[1], match.group())
    return frequencies


def tower_airspace(twr: DataFile) -> Dict[str, AirspaceClass]:
    """Airspace class per facility ident; B, then C, then D, otherwise E."""
    airspace: Dict[str, AirspaceClass] = {}
    for record in twr.records("TWR8", TWR8_SPANS):
        if record[2] == "Y":
            airspace_class = AirspaceClass.CLASS_B
        elif record[3] == "Y":
            airspace_class = AirspaceClass.CLASS_C
        elif record[4] == "Y":
            airspace_class = AirspaceClass.CLASS_D
        else:
            airspace_class = AirspaceClass.CLASS_E
        airspace[record[1]] = airspace_class
    return airspace


def fix_table(fix: DataFile) -> pd.DataFrame:
    """FIX1 records of FIX.txt, one row per fix with FIX1_COLUMNS."""
    return fix.records_dataframe("FIX1", FIX1_SPANS, FIX1_COLUMNS)


def fixes_for_artccs(table: pd.DataFrame, artcc_ids: Iterable[str]) -> Iterator[Fix]:
    """
    Fixes belonging to the given ARTCCs.

    A fix whose coordinate cannot be decoded is logged and skipped.

    Args:
        table: Fix table as returned by ``fix_table``
        artcc_ids: ARTCC identifiers to keep
    """
    selected = table[table['artcc_id'].isin(list(artcc_ids))]
    for row in selected.itertuples(index=False):
        coordinate = LatLon.from_fix_txt(row.latitude, row.longitude)
        if coordinate is None:
            logger.warning(f"Bad Lat/Lon pair on FIX {row.ident}, ignoring")
            continue
        yield Fix(ident=row.ident, coordinate=coordinate, artcc_id=row.artcc_id)
