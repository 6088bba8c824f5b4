"""
Bar chart normalization for performance metrics.

Values are min/max normalized to bar lengths in [0, 100]. The lowest value
gets an empty bar and the highest a full one.
"""
from dataclasses import dataclass
from datetime import date
from typing import List, Sequence

from domain.models import MetricType, PerformanceMetric

# Category filter value meaning "no filter"
ALL_METRICS = "all"


@dataclass(frozen=True)
class ChartBar:
    """One bar of the metric chart."""
    metric_id: str
    metric_type: str
    recorded_date: date
    label: str  # Short date, e.g. "Mar 5"
    value: float
    unit: str
    height: float  # Percent of full width, 0-100
    color: str


def normalize_heights(values: Sequence[float]) -> List[float]:
    """
    Map values to proportional bar lengths in [0, 100].

    height = (value - min) / (max - min) * 100. When every value is equal
    (including a single value) the range is taken as 1, so every bar is 0.

    Args:
        values: Values to normalize

    Returns:
        Heights in the same order as the input; empty for empty input
    """
    if not values:
        return []

    low = min(values)
    span = (max(values) - low) or 1
    return [(value - low) / span * 100 for value in values]


def short_date_label(day: date) -> str:
    """Format a date as abbreviated month and day, e.g. "Mar 5"."""
    return f"{day.strftime('%b')} {day.day}"


def build_chart(
    metrics: Sequence[PerformanceMetric],
    metric_type: str = ALL_METRICS,
) -> List[ChartBar]:
    """
    Build chart bars for an athlete's metrics.

    Normalization runs over the filtered set only, so bars are relative to
    the selected category.

    Args:
        metrics: Metrics ordered by recorded_date ascending
        metric_type: Category to show, or "all"

    Returns:
        One ChartBar per selected metric, in input order
    """
    if metric_type == ALL_METRICS:
        selected = list(metrics)
    else:
        selected = [m for m in metrics if m.metric_type == metric_type]

    heights = normalize_heights([m.value for m in selected])

    return [
        ChartBar(
            metric_id=metric.id,
            metric_type=metric.metric_type,
            recorded_date=metric.recorded_date,
            label=short_date_label(metric.recorded_date),
            value=metric.value,
            unit=metric.unit or "",
            height=height,
            color=MetricType(metric.metric_type).chart_color,
        )
        for metric, height in zip(selected, heights)
    ]
