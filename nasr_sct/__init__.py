"""
FAA NASR to VRC sector file conversion.

This package extracts airports, VOR navaids and fixes for a set of ARTCCs
from the FAA NASR 28-day subscription (AIXM 5.1 XML and fixed-width text
files) and writes them as sct2 sections.

The main public API includes:
- LatLon: Coordinate codec between AIXM, NASR text and VRC notations
- get_airport_info / get_navaid_info: Streaming AIXM extraction
- DataFile: Fixed-width record reader
- NasrSubscriptionSource: Access to the subscription archive
- Sct2Document: sct2 output
"""

from .models import LatLon, Unit, Airport, Navaid, NavaidType, Fix, AirspaceClass
from .parsers import XmlEventCursor, DataFile, Record, get_airport_info, get_navaid_info
from .sources import NasrSubscriptionSource
from .render import Sct2Document

__version__ = '0.1.0'
__all__ = [
    'LatLon',
    'Unit',
    'Airport',
    'Navaid',
    'NavaidType',
    'Fix',
    'AirspaceClass',
    'XmlEventCursor',
    'DataFile',
    'Record',
    'get_airport_info',
    'get_navaid_info',
    'NasrSubscriptionSource',
    'Sct2Document',
]
