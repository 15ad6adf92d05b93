"""
Streaming extraction of AIXM 5.1 features.

Each ``extract_*`` function is called right after the START event of a
feature element has been read. It consumes events up to the matching END,
collecting recognised children into a builder; anything else is ignored.
An incomplete feature yields None and the caller moves on to the next
sibling. Reaching the end of the document inside a feature raises
TruncatedDocumentError and tokenizer errors propagate unchanged; both abort
the whole run.
"""

import logging
from typing import Iterable, Iterator, List, Optional, Set

from ..exceptions import CoordinateError, TruncatedDocumentError
from ..models.latlon import LatLon
from ..models.unit import Unit
from ..models.airport import Airport
from ..models.navaid import Navaid, NavaidType
from ..models.builders import UnitBuilder, AirportBuilder, NavaidBuilder
from .xml_events import EventKind, XmlEvent, XmlEventCursor

logger = logging.getLogger(__name__)

NS = {
    'aixm': 'http://www.aixm.aero/schema/5.1',
    'gml': 'http://www.opengis.net/gml/3.2',
    'xlink': 'http://www.w3.org/1999/xlink',
}


def qname(prefix: str, local: str) -> str:
    """Qualified name in ElementTree form, e.g. ``{http://...}designator``."""
    return f"{{{NS[prefix]}}}{local}"


UNIT = qname('aixm', 'Unit')
AIRPORT_HELIPORT = qname('aixm', 'AirportHeliport')
NAVAID = qname('aixm', 'Navaid')
DESIGNATOR = qname('aixm', 'designator')
TYPE = qname('aixm', 'type')
AIRPORT_LOCATION = qname('aixm', 'airportLocation')
POS = qname('gml', 'pos')
GML_ID = qname('gml', 'id')
XLINK_HREF = qname('xlink', 'href')

# FAA extension element; its namespace differs between releases
LOW_ALTITUDE_REGION = 'artccIdForLowAltitude'

GML_ID_MARKER = "@gml:id"


def extract_gml_id(href: str) -> Optional[str]:
    """
    Extract the identifier from an xlink reference.

    Example:
        >>> extract_gml_id("urn:uuid:#xpointer(//aixm:AirportHeliport[@gml:id='AH_0000001'])")
        'AH_0000001'

    Returns:
        The identifier, or None if the reference has no ``@gml:id`` marker
    """
    index = href.find(GML_ID_MARKER)
    if index < 0:
        return None
    fields = href[index:].split("'")
    if len(fields) < 2:
        return None
    return fields[1].strip() or None


class _ElementScope:
    """
    Iterates the START events nested inside an open element.

    Iteration stops after the element's END event. ``text`` reads the text of
    the element just yielded, consuming its END as well.
    """

    def __init__(self, cursor: XmlEventCursor, tag: str):
        self._cursor = cursor
        self._tag = tag
        self._consumed = False

    def __iter__(self) -> Iterator[XmlEvent]:
        depth = 0
        while True:
            event = self._cursor.read_event()
            if event.kind is EventKind.EOF:
                raise TruncatedDocumentError(self._tag)
            if event.kind is EventKind.END:
                if depth == 0:
                    return
                depth -= 1
                continue
            depth += 1
            yield event
            if self._consumed:
                depth -= 1
                self._consumed = False

    def text(self, event: XmlEvent) -> str:
        self._consumed = True
        return self._cursor.read_text(event.tag)


def _decode_position(text: str, owner: str) -> Optional[LatLon]:
    try:
        return LatLon.from_aixm(text)
    except CoordinateError as e:
        logger.warning(f"Bad position on {owner}, ignoring: {e}")
        return None


def extract_unit(cursor: XmlEventCursor) -> Optional[Unit]:
    """Extract an ``aixm:Unit``; all three fields are required."""
    builder = UnitBuilder()
    scope = _ElementScope(cursor, UNIT)
    for event in scope:
        if event.tag == DESIGNATOR:
            builder.with_designator(scope.text(event))
        elif event.tag == TYPE:
            builder.with_type(scope.text(event))
        elif event.tag == AIRPORT_LOCATION:
            href = event.attrib.get(XLINK_HREF)
            gml_id = extract_gml_id(href) if href is not None else None
            if gml_id is None:
                logger.debug(f"Unresolved airportLocation reference {href!r}")
            else:
                builder.with_airport_location(gml_id)
    return builder.build()


def extract_airport(cursor: XmlEventCursor, start: XmlEvent) -> Optional[Airport]:
    """
    Extract an ``aixm:AirportHeliport``.

    Args:
        cursor: Cursor positioned just after the feature's START event
        start: That START event, which carries the gml:id
    """
    builder = AirportBuilder()
    gml_id = start.attrib.get(GML_ID)
    if gml_id is not None:
        builder.with_id(gml_id)

    scope = _ElementScope(cursor, AIRPORT_HELIPORT)
    for event in scope:
        if event.tag == DESIGNATOR:
            builder.with_designator(scope.text(event))
        elif event.tag == POS:
            coordinate = _decode_position(scope.text(event), f"AirportHeliport {gml_id}")
            if coordinate is not None:
                builder.with_coordinate(coordinate)
    return builder.build()


def extract_navaid(cursor: XmlEventCursor) -> Optional[Navaid]:
    """
    Extract an ``aixm:Navaid``.

    Only VORTAC and VOR_DME navaids are extracted; any other type literal
    leaves the type unset and the navaid is skipped.
    """
    builder = NavaidBuilder()
    scope = _ElementScope(cursor, NAVAID)
    for event in scope:
        if event.tag == DESIGNATOR:
            builder.with_designator(scope.text(event))
        elif event.tag == TYPE:
            raw = scope.text(event)
            kind = NavaidType.from_aixm(raw)
            if kind is None:
                logger.debug(f"Navaid {builder.designator} has unsupported type {raw!r}")
            else:
                builder.with_kind(kind)
        elif event.tag == POS:
            coordinate = _decode_position(scope.text(event), f"Navaid {builder.designator}")
            if coordinate is not None:
                builder.with_coordinate(coordinate)
        elif event.local_name == LOW_ALTITUDE_REGION:
            builder.with_low_altitude_region_id(scope.text(event))
    return builder.build()


def artcc_airport_ids(units: Iterable[Unit], artcc_ids: Iterable[str]) -> Set[str]:
    """Airport ids referenced by the ARTCC units named in ``artcc_ids``."""
    artcc_ids = set(artcc_ids)
    return {
        unit.airport_location
        for unit in units
        if unit.is_artcc and unit.designator in artcc_ids
    }


def resolve_airports(airports: Iterable[Airport], airport_ids: Set[str]) -> List[Airport]:
    """Keep the airports whose id is in ``airport_ids``, in their original order."""
    return [airport for airport in airports if airport.id in airport_ids]


def get_airport_info(cursor: XmlEventCursor, artcc_ids: Iterable[str]) -> List[Airport]:
    """
    Extract the airports of the given ARTCCs from an AIXM airport document.

    ARTCC units reference their airport by gml:id, and a unit may appear
    before or after the airport it references, so every airport is buffered
    and the filter is applied once the whole document has been read.

    Args:
        cursor: Cursor at the start of the document
        artcc_ids: ARTCC identifiers, e.g. ``["ZHU"]``

    Returns:
        Matching airports in document order
    """
    artcc_ids = set(artcc_ids)
    airport_ids: Set[str] = set()
    airports: List[Airport] = []
    unit_count = 0

    while True:
        event = cursor.read_event()
        if event.kind is EventKind.EOF:
            break
        if event.is_start(UNIT):
            unit = extract_unit(cursor)
            if unit is not None:
                unit_count += 1
                airport_ids |= artcc_airport_ids([unit], artcc_ids)
        elif event.is_start(AIRPORT_HELIPORT):
            airport = extract_airport(cursor, event)
            if airport is not None:
                airports.append(airport)
    cursor.close()

    result = resolve_airports(airports, airport_ids)
    logger.info(f"Read {unit_count} units and {len(airports)} airports, kept {len(result)} airports")
    return result


def get_navaid_info(cursor: XmlEventCursor, artcc_ids: Iterable[str]) -> List[Navaid]:
    """
    Extract the VORTAC and VOR/DME navaids of the given ARTCCs.

    Navaids carry their low altitude ARTCC directly, so they are filtered as
    they are read.

    Returns:
        Matching navaids in document order
    """
    artcc_ids = set(artcc_ids)
    navaids: List[Navaid] = []

    while True:
        event = cursor.read_event()
        if event.kind is EventKind.EOF:
            break
        if event.is_start(NAVAID):
            navaid = extract_navaid(cursor)
            if navaid is not None and navaid.low_altitude_region_id in artcc_ids:
                navaids.append(navaid)
    cursor.close()

    logger.info(f"Kept {len(navaids)} navaids")
    return navaids
