from enum import Enum


class AirspaceClass(Enum):
    """Airspace class surrounding a towered airport, as written to sct2."""

    CLASS_B = "B"
    CLASS_C = "C"
    CLASS_D = "D"
    CLASS_E = "E"
    MOA = "MOA"
