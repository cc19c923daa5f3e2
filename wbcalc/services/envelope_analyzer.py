"""CG envelope geometry: containment, limits at a weight, diagnostics.

The envelope is a simple polygon in the (CG, weight) plane given as an
ordered vertex list, implicitly closed. Two independent algorithms run on
it:

- ``is_point_in_envelope``: even-odd ray casting. This is the only source
  of the safe / unsafe verdict.
- ``cg_limits_at_weight``: forward/aft CG at a horizontal slice of the
  polygon. Used only to explain *why* a point is outside.

On pathological non-convex envelopes the two can disagree; the slice then
falls back to a generic "outside envelope" message.
"""

from __future__ import annotations

from collections.abc import Sequence

from shapely.geometry import LinearRing, Polygon
from shapely.validation import explain_validity

from wbcalc.contracts.aircraft import EnvelopePoint
from wbcalc.contracts.balance import CGLimits, EnvelopeAnalysis, LimitDiagnostic
from wbcalc.contracts.enums import LimitKind

MSG_OUTSIDE = "outside envelope"


def is_point_in_envelope(cg: float, weight: float, envelope: Sequence[EnvelopePoint]) -> bool:
    """Even-odd ray casting towards +CG.

    An edge counts when exactly one endpoint lies strictly above ``weight``
    and its intersection with the horizontal line is strictly aft of ``cg``.
    The one-sided comparison keeps shared vertices from toggling twice.
    """
    inside = False
    n = len(envelope)
    for i in range(n):
        p1 = envelope[i]
        p2 = envelope[(i + 1) % n]
        if (p1.weight_lbs > weight) != (p2.weight_lbs > weight):
            cross_cg = p1.cg_in + (weight - p1.weight_lbs) * (p2.cg_in - p1.cg_in) / (
                p2.weight_lbs - p1.weight_lbs
            )
            if cg < cross_cg:
                inside = not inside
    return inside


def max_gross_weight(envelope: Sequence[EnvelopePoint]) -> float | None:
    """Highest weight on the envelope, or None if it has no vertices."""
    if not envelope:
        return None
    return max(p.weight_lbs for p in envelope)


def cg_limits_at_weight(weight: float, envelope: Sequence[EnvelopePoint]) -> CGLimits | None:
    """Forward and aft CG limits where the envelope crosses ``weight``.

    Returns None when fewer than two boundary crossings exist, i.e. the
    envelope has no horizontal extent at that weight.
    """
    intersections: list[float] = []
    n = len(envelope)
    for i in range(n):
        p1 = envelope[i]
        p2 = envelope[(i + 1) % n]
        straddles = (p1.weight_lbs <= weight < p2.weight_lbs) or (
            p2.weight_lbs <= weight < p1.weight_lbs
        )
        if straddles:
            intersections.append(
                p1.cg_in
                + (weight - p1.weight_lbs) * (p2.cg_in - p1.cg_in) / (p2.weight_lbs - p1.weight_lbs)
            )

    if len(intersections) < 2:
        return None
    return CGLimits(
        weight_lbs=weight,
        min_cg_in=min(intersections),
        max_cg_in=max(intersections),
    )


def analyze_envelope(point: EnvelopePoint, envelope: Sequence[EnvelopePoint]) -> EnvelopeAnalysis:
    """Check a (CG, weight) point against an envelope.

    ``inside`` comes from the ray casting test alone. When outside, the most
    specific limit is derived in this order: max gross weight, forward CG
    limit, aft CG limit, generic "outside envelope".
    """
    if is_point_in_envelope(point.cg_in, point.weight_lbs, envelope):
        return EnvelopeAnalysis(inside=True)

    limit = _diagnose(point, envelope)
    return EnvelopeAnalysis(inside=False, limit_diagnostic=limit.message, limit=limit)


def _diagnose(point: EnvelopePoint, envelope: Sequence[EnvelopePoint]) -> LimitDiagnostic:
    max_gross = max_gross_weight(envelope)
    if max_gross is None:
        return LimitDiagnostic(kind=LimitKind.OUTSIDE, message=MSG_OUTSIDE)

    if point.weight_lbs > max_gross:
        excess = point.weight_lbs - max_gross
        return LimitDiagnostic(
            kind=LimitKind.OVER_MAX_GROSS,
            exceeded_by=excess,
            message=f"over max gross by {_fmt(excess)}",
        )

    limits = cg_limits_at_weight(point.weight_lbs, envelope)
    if limits is None:
        return LimitDiagnostic(kind=LimitKind.OUTSIDE, message=MSG_OUTSIDE)

    if point.cg_in < limits.min_cg_in:
        excess = limits.min_cg_in - point.cg_in
        return LimitDiagnostic(
            kind=LimitKind.FORWARD,
            exceeded_by=excess,
            message=f"forward limit exceeded by {_fmt(excess)}",
        )
    if point.cg_in > limits.max_cg_in:
        excess = point.cg_in - limits.max_cg_in
        return LimitDiagnostic(
            kind=LimitKind.AFT,
            exceeded_by=excess,
            message=f"aft limit exceeded by {_fmt(excess)}",
        )

    # Slice says inside, polygon test says outside
    return LimitDiagnostic(kind=LimitKind.OUTSIDE, message=MSG_OUTSIDE)


def _fmt(value: float) -> str:
    """Up to two decimals, trailing zeros dropped: 5.0 -> '5', 2.345 -> '2.35'."""
    return f"{round(value, 2):g}"


# ------------------------------------------------------------------
# Validation (catalog load time)
# ------------------------------------------------------------------


def validate_envelope(envelope: Sequence[EnvelopePoint]) -> list[str]:
    """Return the problems that make an envelope unusable; empty if valid.

    Consecutive duplicate vertices and a closing vertex repeating the first
    are ignored. The remaining vertices must form a simple polygon: at
    least three of them, with a boundary that neither crosses nor touches
    itself and does not double back along an edge.
    """
    vertices = _distinct_vertices(envelope)
    if len(vertices) < 3:
        return [f"needs at least 3 distinct vertices, got {len(vertices)}"]

    ring = LinearRing(vertices)
    if not ring.is_simple:
        return [f"boundary self-intersects: {explain_validity(Polygon(vertices))}"]

    polygon = Polygon(ring)
    if not polygon.is_valid:
        return [f"invalid polygon: {explain_validity(polygon)}"]
    return []


def _distinct_vertices(envelope: Sequence[EnvelopePoint]) -> list[tuple[float, float]]:
    vertices: list[tuple[float, float]] = []
    for p in envelope:
        v = (p.cg_in, p.weight_lbs)
        if not vertices or vertices[-1] != v:
            vertices.append(v)
    if len(vertices) > 1 and vertices[0] == vertices[-1]:
        vertices.pop()
    return vertices
