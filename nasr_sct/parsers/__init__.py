"""
Parsers for NASR subscription data.

- xml_events: forward-only XML event cursor
- aixm: streaming extraction of AIXM units, airports and navaids
- fixed_width: fixed-width record reader for legacy text files
- nasr_txt: TWR and FIX record layouts
"""

from .xml_events import XmlEventCursor, XmlEvent, EventKind
from .aixm import (
    extract_gml_id,
    extract_unit,
    extract_airport,
    extract_navaid,
    artcc_airport_ids,
    resolve_airports,
    get_airport_info,
    get_navaid_info,
)
from .fixed_width import DataFile, Record
from .nasr_txt import tower_frequencies, tower_airspace, fix_table, fixes_for_artccs

__all__ = [
    'XmlEventCursor',
    'XmlEvent',
    'EventKind',
    'extract_gml_id',
    'extract_unit',
    'extract_airport',
    'extract_navaid',
    'artcc_airport_ids',
    'resolve_airports',
    'get_airport_info',
    'get_navaid_info',
    'DataFile',
    'Record',
    'tower_frequencies',
    'tower_airspace',
    'fix_table',
    'fixes_for_artccs',
]
