import io
import zipfile
import pytest
from pathlib import Path
from typing import Dict, Optional

from nasr_sct import config

AIXM_HEADER = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<message:AIXMBasicMessage'
    ' xmlns:message="http://www.aixm.aero/schema/5.1/message"'
    ' xmlns:aixm="http://www.aixm.aero/schema/5.1"'
    ' xmlns:gml="http://www.opengis.net/gml/3.2"'
    ' xmlns:xlink="http://www.w3.org/1999/xlink"'
    ' xmlns:nav="http://www.faa.gov/aixm5.1/nav"'
    ' gml:id="MSG_1">\n'
)
AIXM_FOOTER = '</message:AIXMBasicMessage>\n'


def airport_href(gml_id: str) -> str:
    return f"APT_AIXM.xml#xpointer(//aixm:AirportHeliport[@gml:id='{gml_id}'])"


def _element(tag: str, value: Optional[str]) -> str:
    return f'<{tag}>{value}</{tag}>' if value is not None else ''


def build_unit(designator: Optional[str] = 'ZHU', unit_type: Optional[str] = 'ARTCC',
               airport_id: Optional[str] = 'AH_0000001', href: Optional[str] = None) -> str:
    if href is None and airport_id is not None:
        href = airport_href(airport_id)
    location = f'<aixm:airportLocation xlink:href="{href}"/>' if href is not None else ''
    return (
        '<message:hasMember><aixm:Unit gml:id="UNIT">'
        '<aixm:timeSlice><aixm:UnitTimeSlice gml:id="UNIT_TS">'
        f'{_element("aixm:designator", designator)}'
        f'{_element("aixm:type", unit_type)}'
        f'{location}'
        '</aixm:UnitTimeSlice></aixm:timeSlice>'
        '</aixm:Unit></message:hasMember>\n'
    )


def build_airport(gml_id: Optional[str] = 'AH_0000001', designator: Optional[str] = 'IAH',
                  pos: Optional[str] = '-95.341442 29.984433') -> str:
    id_attr = f' gml:id="{gml_id}"' if gml_id is not None else ''
    position = (
        '<aixm:ARP><aixm:ElevatedPoint gml:id="ARP" srsName="urn:ogc:def:crs:EPSG::4326">'
        f'{_element("gml:pos", pos)}'
        '</aixm:ElevatedPoint></aixm:ARP>'
    ) if pos is not None else ''
    return (
        f'<message:hasMember><aixm:AirportHeliport{id_attr}>'
        '<aixm:timeSlice><aixm:AirportHeliportTimeSlice gml:id="AH_TS">'
        f'{_element("aixm:designator", designator)}'
        f'{position}'
        '</aixm:AirportHeliportTimeSlice></aixm:timeSlice>'
        '</aixm:AirportHeliport></message:hasMember>\n'
    )


def build_navaid(designator: Optional[str] = 'IAH', navaid_type: Optional[str] = 'VORTAC',
                 pos: Optional[str] = '-95.345 29.957', low_id: Optional[str] = 'ZHU') -> str:
    position = (
        '<aixm:location><aixm:ElevatedPoint gml:id="NAV_PT">'
        f'{_element("gml:pos", pos)}'
        '</aixm:ElevatedPoint></aixm:location>'
    ) if pos is not None else ''
    extension = (
        '<aixm:extension><nav:NavaidExtension gml:id="NAV_EXT">'
        f'{_element("nav:artccIdForLowAltitude", low_id)}'
        '</nav:NavaidExtension></aixm:extension>'
    ) if low_id is not None else ''
    return (
        '<message:hasMember><aixm:Navaid gml:id="NAV">'
        '<aixm:timeSlice><aixm:NavaidTimeSlice gml:id="NAV_TS">'
        f'{_element("aixm:type", navaid_type)}'
        f'{_element("aixm:designator", designator)}'
        f'{position}'
        f'{extension}'
        '</aixm:NavaidTimeSlice></aixm:timeSlice>'
        '</aixm:Navaid></message:hasMember>\n'
    )


def build_document(*members: str) -> bytes:
    return (AIXM_HEADER + ''.join(members) + AIXM_FOOTER).encode('utf-8')


def fixed_width_line(fields: Dict[int, str], width: int = 0) -> str:
    """Place each value at its column offset, padding with spaces."""
    line = [' '] * max([width] + [start + len(value) for start, value in fields.items()])
    for start, value in fields.items():
        line[start:start + len(value)] = list(value)
    return ''.join(line)


@pytest.fixture
def test_cache_dir(tmp_path) -> Path:
    """Return a temporary directory for cache testing."""
    return tmp_path / 'cache'


@pytest.fixture
def aixm():
    """Builders for small AIXM documents."""
    class Builders:
        unit = staticmethod(build_unit)
        airport = staticmethod(build_airport)
        navaid = staticmethod(build_navaid)
        document = staticmethod(build_document)
        href = staticmethod(airport_href)
    return Builders


@pytest.fixture
def line():
    return fixed_width_line


@pytest.fixture
def twr_text() -> str:
    lines = [
        fixed_width_line({0: 'TWR1', 4: 'IAH'}),
        fixed_width_line({0: 'TWR3', 4: 'IAH', 8: '118.1 ;LCL/P'}),
        fixed_width_line({0: 'TWR3', 4: 'IAH', 8: '125.35;LCL/P'}),
        fixed_width_line({0: 'TWR3', 4: 'HOU', 8: '118.7'}),
        fixed_width_line({0: 'TWR8', 4: 'IAH', 8: 'YNNN'}),
        fixed_width_line({0: 'TWR8', 4: 'HOU', 8: 'NYNN'}),
        fixed_width_line({0: 'TWR8', 4: 'SGR', 8: 'NNYN'}),
        fixed_width_line({0: 'TWR8', 4: 'CXO', 8: 'NNNY'}),
    ]
    return '\r\n'.join(lines) + '\r\n'


def fix_line(ident: str, lat: str, lon: str, artcc: str) -> str:
    return fixed_width_line({0: 'FIX1', 4: ident, 66: lat, 80: lon, 228: ident, 237: artcc}, width=466)


@pytest.fixture
def fix_text() -> str:
    lines = [
        fix_line('AAMYY', '31-53-00.510N', '081-23-18.000W', 'ZJX'),
        fix_line('BAYYY', '29-30-00.000N', '095-00-00.000W', 'ZHU'),
        fix_line('BADLL', '29-30-00.000', '095-00-00.000W', 'ZHU'),
        fix_line('CEDAR', '30-15-30.500N', '094-10-10.250W', 'ZHU'),
        fixed_width_line({0: 'FIX2', 4: 'BAYYY'}),
    ]
    return '\n'.join(lines) + '\n'


@pytest.fixture
def apt_document(aixm) -> bytes:
    return aixm.document(
        aixm.airport('AH_0000001', 'IAH', '-95.341442 29.984433'),
        aixm.unit('ZHU', 'ARTCC', 'AH_0000001'),
        aixm.airport('AH_0000002', 'JAX', '-81.687861 30.494056'),
        aixm.unit('ZJX', 'ARTCC', 'AH_0000002'),
    )


@pytest.fixture
def nav_document(aixm) -> bytes:
    return aixm.document(
        aixm.navaid('IAH', 'VORTAC', '-95.345 29.957', 'ZHU'),
        aixm.navaid('CRG', 'VOR_DME', '-81.51 30.336', 'ZJX'),
        aixm.navaid('HUB', 'VOR_DME', '-95.4 29.6', 'ZHU'),
    )


def _nested_zip(name: str, data: bytes) -> bytes:
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, 'w') as inner:
        inner.writestr(name, data)
    return buf.getvalue()


@pytest.fixture
def subscription_bytes(apt_document, nav_document, twr_text, fix_text) -> bytes:
    """An in-memory NASR subscription archive with nested AIXM zips."""
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, 'w') as archive:
        archive.writestr(config.APT_AIXM_MEMBER, _nested_zip('APT_AIXM.xml', apt_document))
        archive.writestr(config.NAV_AIXM_MEMBER, _nested_zip('NAV_AIXM.xml', nav_document))
        archive.writestr(config.TWR_MEMBER, twr_text)
        archive.writestr(config.FIX_MEMBER, fix_text)
    return buf.getvalue()


@pytest.fixture
def subscription_zip(tmp_path, subscription_bytes) -> Path:
    path = tmp_path / '28DaySubscription_Effective_2025-10-02.zip'
    path.write_bytes(subscription_bytes)
    return path
