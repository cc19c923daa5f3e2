"""Read-only aircraft catalog.

Envelopes are validated once, when the catalog is loaded, so that a
malformed polygon surfaces as a data error instead of silently producing
wrong containment results at query time.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from wbcalc.catalog.aircraft_data import BUILTIN_AIRCRAFT
from wbcalc.catalog.errors import AircraftNotFoundError, CatalogError, EnvelopeValidationError
from wbcalc.contracts.aircraft import AircraftTemplate
from wbcalc.contracts.enums import Category
from wbcalc.services.envelope_analyzer import validate_envelope

logger = logging.getLogger(__name__)


class AircraftCatalog:
    """In-memory catalog of aircraft templates keyed by id."""

    def __init__(self, templates: Iterable[AircraftTemplate]):
        self._templates: dict[str, AircraftTemplate] = {}
        for template in templates:
            if template.id in self._templates:
                raise CatalogError(f"duplicate aircraft id {template.id!r}")
            _check_envelopes(template)
            self._templates[template.id] = template

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def load(cls, records: Iterable[dict[str, Any]]) -> AircraftCatalog:
        """Build a catalog from plain dicts (validates contracts and envelopes)."""
        catalog = cls(AircraftTemplate.model_validate(r) for r in records)
        logger.info("Aircraft catalog loaded: %d types", len(catalog))
        return catalog

    @classmethod
    def builtin(cls) -> AircraftCatalog:
        return cls.load(BUILTIN_AIRCRAFT)

    @classmethod
    def from_json_file(cls, path: Path) -> AircraftCatalog:
        """Load a catalog from a JSON file holding a list of aircraft."""
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, list):
            raise CatalogError(f"{path}: expected a list of aircraft")
        logger.info("Loading aircraft catalog from %s", path)
        return cls.load(data)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get(self, aircraft_id: str) -> AircraftTemplate:
        try:
            return self._templates[aircraft_id]
        except KeyError:
            raise AircraftNotFoundError(aircraft_id) from None

    def list_all(self) -> list[AircraftTemplate]:
        return list(self._templates.values())

    def __contains__(self, aircraft_id: object) -> bool:
        return aircraft_id in self._templates

    def __len__(self) -> int:
        return len(self._templates)


def _check_envelopes(template: AircraftTemplate) -> None:
    problems = validate_envelope(template.envelope)
    if problems:
        raise EnvelopeValidationError(template.id, Category.NORMAL.value, problems)

    if template.utility_envelope is not None:
        problems = validate_envelope(template.utility_envelope)
        if problems:
            raise EnvelopeValidationError(template.id, Category.UTILITY.value, problems)
