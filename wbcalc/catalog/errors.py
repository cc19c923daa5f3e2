"""Catalog- and fleet-specific exceptions."""


class CatalogError(Exception):
    """Base exception for all aircraft data errors."""


class AircraftNotFoundError(CatalogError):
    """Raised when an aircraft id is not in the catalog."""

    def __init__(self, aircraft_id: str):
        self.aircraft_id = aircraft_id
        super().__init__(f"aircraft {aircraft_id!r} not found")


class EnvelopeValidationError(CatalogError):
    """Raised when an envelope polygon is unusable for containment tests."""

    def __init__(self, aircraft_id: str, category: str, problems: list[str]):
        self.aircraft_id = aircraft_id
        self.category = category
        self.problems = problems
        super().__init__(f"{aircraft_id} {category} envelope: {'; '.join(problems)}")


class FleetDataError(CatalogError):
    """Raised when saved fleet data cannot be read at all."""
