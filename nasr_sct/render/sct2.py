"""
VRC sector file (sct2) output.

Only the sections produced from NASR data are written: [AIRPORT], [VOR]
and [FIXES]. Each section is preceded by a separator comment line.
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from ..config import DEFAULT_TOWER_FREQUENCY
from ..models.airport import Airport
from ..models.airspace import AirspaceClass
from ..models.fix import Fix
from ..models.navaid import Navaid

logger = logging.getLogger(__name__)

SECTION_SEPARATOR = "\n\n;" + "=" * 79 + "\n\n"

# VOR frequencies are not part of the extracted data
VOR_FREQUENCY_PLACEHOLDER = "000.000"


def airport_line(airport: Airport, frequency: str = DEFAULT_TOWER_FREQUENCY,
                 airspace: AirspaceClass = AirspaceClass.CLASS_E) -> str:
    return f"{airport.designator:<4} {frequency:<7} {airport.coordinate.to_vrc()} {airspace.value}"


def vor_line(navaid: Navaid) -> str:
    return f"{navaid.designator} {VOR_FREQUENCY_PLACEHOLDER} {navaid.coordinate.to_vrc()}"


def fix_line(fix: Fix) -> str:
    return f"{fix.ident} {fix.coordinate.to_vrc()}"


class Sct2Document:
    """
    Collects sct2 sections and renders them in AIRPORT, VOR, FIXES order.

    Example:
        ```python
        document = Sct2Document()
        document.add_airports(airports, frequencies, airspace)
        document.add_vors(navaids)
        document.add_fixes(fixes)
        document.write("output.sct2")
        ```
    """

    SECTIONS = ("AIRPORT", "VOR", "FIXES")

    def __init__(self):
        self.sections: Dict[str, List[str]] = {name: [] for name in self.SECTIONS}

    def add_airports(self, airports: Iterable[Airport],
                     frequencies: Optional[Dict[str, str]] = None,
                     airspace: Optional[Dict[str, AirspaceClass]] = None) -> 'Sct2Document':
        """
        Add airports; missing frequencies default to 122.800 and missing
        airspace classes to E.
        """
        frequencies = frequencies or {}
        airspace = airspace or {}
        for airport in airports:
            self.sections["AIRPORT"].append(airport_line(
                airport,
                frequencies.get(airport.designator, DEFAULT_TOWER_FREQUENCY),
                airspace.get(airport.designator, AirspaceClass.CLASS_E),
            ))
        return self

    def add_vors(self, navaids: Iterable[Navaid]) -> 'Sct2Document':
        self.sections["VOR"].extend(vor_line(navaid) for navaid in navaids)
        return self

    def add_fixes(self, fixes: Iterable[Fix]) -> 'Sct2Document':
        self.sections["FIXES"].extend(fix_line(fix) for fix in fixes)
        return self

    def render(self) -> str:
        parts = []
        for name in self.SECTIONS:
            parts.append(SECTION_SEPARATOR)
            parts.append(f"[{name}]\n")
            parts.extend(f"{line}\n" for line in self.sections[name])
        return "".join(parts)

    def write(self, path: Union[str, Path]) -> None:
        text = self.render()
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
        logger.info(f"Wrote {sum(len(lines) for lines in self.sections.values())} entries to {path}")
