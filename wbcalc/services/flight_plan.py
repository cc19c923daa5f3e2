"""GO / NO-GO assessment of a loading against the active envelope."""

from __future__ import annotations

import logging

from wbcalc.contracts.aircraft import AircraftTemplate, EnvelopePoint, SavedAircraft
from wbcalc.contracts.balance import FlightPlanResult, PhaseCheck, PhaseResult
from wbcalc.contracts.enums import Category, Verdict
from wbcalc.contracts.loading import LoadingState
from wbcalc.services.envelope_analyzer import analyze_envelope, max_gross_weight
from wbcalc.services.moment_accumulator import compute_flight_phases

logger = logging.getLogger(__name__)


def select_envelope(
    aircraft: AircraftTemplate | SavedAircraft,
    category: Category | str,
) -> tuple[Category, list[EnvelopePoint]]:
    """Return the category actually applied and its envelope.

    Aircraft without a Utility envelope are checked against Normal even
    when Utility is requested.
    """
    category = Category(category)
    if category == Category.UTILITY:
        if aircraft.utility_envelope:
            return Category.UTILITY, aircraft.utility_envelope
        logger.warning("%s has no utility envelope, using normal category", aircraft.id)
    return Category.NORMAL, aircraft.envelope


def evaluate_flight_plan(
    aircraft: AircraftTemplate | SavedAircraft,
    loading: LoadingState,
    category: Category | str = Category.NORMAL,
    *,
    evaluate_landing: bool = True,
) -> FlightPlanResult:
    """Compute all phases and decide GO / NO-GO.

    GO requires the takeoff point inside the active envelope and, when
    ``evaluate_landing`` is set, the landing point too. Ramp is reported but
    not judged.
    """
    applied, envelope = select_envelope(aircraft, category)
    phases = compute_flight_phases(aircraft, loading, applied)

    takeoff = _check(phases.takeoff, envelope)
    landing = _check(phases.landing, envelope) if evaluate_landing else None

    is_go = takeoff.is_safe and (landing is None or landing.is_safe)
    verdict = Verdict.GO if is_go else Verdict.NO_GO

    max_gross = max_gross_weight(envelope)
    load_percent = None
    if max_gross:
        load_percent = min(phases.takeoff.weight_lbs / max_gross * 100, 100.0)

    logger.info(
        "%s %s: takeoff %.0f lbs @ %.2f in -> %s",
        aircraft.id, applied.value, phases.takeoff.weight_lbs, phases.takeoff.cg_in, verdict.value,
    )

    return FlightPlanResult(
        phases=phases,
        category=applied,
        envelope=envelope,
        max_gross_lbs=max_gross,
        takeoff=takeoff,
        landing=landing,
        verdict=verdict,
        load_percent=load_percent,
    )


def _check(result: PhaseResult, envelope: list[EnvelopePoint]) -> PhaseCheck:
    # Not re-validated: an overflowed phase may hold inf or NaN
    point = EnvelopePoint.model_construct(cg_in=result.cg_in, weight_lbs=result.weight_lbs)
    return PhaseCheck(result=result, analysis=analyze_envelope(point, envelope))
