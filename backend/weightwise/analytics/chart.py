"""Data series for the weight-over-time chart."""

from typing import Optional, Sequence

from weightwise.analytics.base import ChartSeries
from weightwise.analytics.progress import sort_for_chart
from weightwise.utils.metrics import format_short_date

DEFAULT_PADDING_LBS = 10.0


def chart_series(
    entries: Sequence,
    target_weight: Optional[float] = None,
    padding: float = DEFAULT_PADDING_LBS,
) -> ChartSeries:
    """
    Oldest-first labels and weights, plus a flat target line and axis bounds.

    The y-axis spans the plotted weights and the target, padded on both ends
    and never below zero.
    """
    if not entries:
        return ChartSeries()

    ordered = sort_for_chart(entries)
    weights = [e.weight for e in ordered]

    target = None
    bounds = list(weights)
    if target_weight:
        target = [target_weight] * len(weights)
        bounds.append(target_weight)

    return ChartSeries(
        labels=[format_short_date(e.date) for e in ordered],
        weights=weights,
        target=target,
        y_min=max(0.0, min(bounds) - padding),
        y_max=max(bounds) + padding,
    )
