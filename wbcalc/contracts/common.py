"""Base classes and shared types for wbcalc contracts.

Unit conventions (all contracts and API responses):
- **Weights**: pounds (lbs), suffix ``_lbs``
- **Arms / CG positions**: inches aft of the datum, suffix ``_in``
- **Moments**: pound-inches, suffix ``_lb_in``
- **Fuel volumes**: US gallons, suffix ``_gal``
- **Fuel flow**: gallons per hour, suffix ``_gph``

Fuel is converted between gallons and pounds with a fixed density
(see ``wbcalc.services.fuel``); no other unit conversion is performed.
"""

import json
from typing import Any

from pydantic import BaseModel, ConfigDict


class ContractModel(BaseModel):
    """Base model with JSON-friendly serialization.

    - Enums serialize as string values.
    - NaN and infinity are rejected, so calculations never receive them.
    - ``to_dict()`` produces a JSON-safe dict.
    - ``from_dict()`` hydrates from a plain dict (API body, JSON file).
    """

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
        allow_inf_nan=False,
    )

    def to_dict(self) -> dict[str, Any]:
        """Dump to a JSON-compatible dict."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ContractModel":
        """Create model instance from a plain dict."""
        return cls.model_validate(data)


class ResultModel(ContractModel):
    """Base model for calculated results.

    Arithmetic on very large finite inputs can overflow to infinity (and
    then NaN). Results carry such values instead of failing; ``to_dict()``
    renders them as null.
    """

    model_config = ConfigDict(allow_inf_nan=True)

    def to_dict(self) -> dict[str, Any]:
        """Dump to a JSON-compatible dict, non-finite floats as None."""
        return json.loads(self.model_dump_json(by_alias=True, exclude_none=True))
