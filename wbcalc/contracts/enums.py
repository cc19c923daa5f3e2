"""Enumerations shared across all wbcalc contracts."""

from enum import Enum


class StationKind(str, Enum):
    """Nature of a loading station."""
    STANDARD = "standard"
    FUEL = "fuel"  # Entered in gallons or pounds, burned off by phase
    AD_HOC = "ad_hoc"  # User-added item with no catalog counterpart


class RecordType(str, Enum):
    """Origin of an aircraft record."""
    TEMPLATE = "template"
    SAVED = "saved"


class Category(str, Enum):
    """Certification category selecting the active CG envelope."""
    NORMAL = "normal"
    UTILITY = "utility"


class FlightPhase(str, Enum):
    RAMP = "ramp"
    TAKEOFF = "takeoff"
    LANDING = "landing"


class LimitKind(str, Enum):
    """Which envelope limit a point violates."""
    OVER_MAX_GROSS = "over_max_gross"
    FORWARD = "forward"
    AFT = "aft"
    OUTSIDE = "outside"


class Verdict(str, Enum):
    GO = "GO"
    NO_GO = "NO-GO"
