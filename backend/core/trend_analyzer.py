"""
Trend analysis for performance metrics.

Compares the mean of the most recent readings in a metric category with the
mean of the readings just before them. This is a fixed two-window moving
average comparison: no smoothing, no regression, no outlier rejection.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Sequence
import logging

from backend.utils.rounding import round_half_up
from domain.models import MetricType, PerformanceMetric

logger = logging.getLogger(__name__)

# Readings per comparison window
TREND_WINDOW = 3


class Trend(str, Enum):
    """Direction of change between the older and recent windows."""

    UP = "up"
    DOWN = "down"
    NEUTRAL = "neutral"

    @property
    def label(self) -> str:
        return {
            Trend.UP: "Improving",
            Trend.DOWN: "Declining",
            Trend.NEUTRAL: "Stable",
        }[self]

    @property
    def color(self) -> str:
        return {
            Trend.UP: "green",
            Trend.DOWN: "red",
            Trend.NEUTRAL: "slate",
        }[self]


@dataclass(frozen=True)
class TrendResult:
    """Trend direction plus magnitude as a whole, non-negative percent."""
    trend: Trend = Trend.NEUTRAL
    change_percent: int = 0


NEUTRAL_TREND = TrendResult()


@dataclass(frozen=True)
class MetricTrend:
    """Trend for one metric category."""
    metric_type: str
    category: MetricType
    trend: Trend
    change_percent: int
    label: str
    color: str


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values)


def analyze_trend(values: Sequence[float]) -> TrendResult:
    """
    Compute the trend of a chronologically ascending value sequence.

    recent is the last TREND_WINDOW values; older is the TREND_WINDOW values
    before that (fewer when the sequence is short). With fewer than two
    values, or no older window at all, the result is neutral.

    An older mean of exactly zero makes the percent change undefined; that
    case is reported as neutral rather than as an infinite change.

    Args:
        values: Metric values, oldest first

    Returns:
        TrendResult with direction and rounded absolute percent change
    """
    values = list(values)
    n = len(values)
    if n < 2:
        return NEUTRAL_TREND

    split = max(n - TREND_WINDOW, 0)
    recent = values[split:]
    older = values[max(split - TREND_WINDOW, 0):split]
    if not older:
        return NEUTRAL_TREND

    older_mean = _mean(older)
    if older_mean == 0:
        logger.debug("Older window mean is zero; percent change undefined, reporting neutral")
        return NEUTRAL_TREND

    change = (_mean(recent) - older_mean) / older_mean * 100

    if change > 0:
        trend = Trend.UP
    elif change < 0:
        trend = Trend.DOWN
    else:
        trend = Trend.NEUTRAL

    return TrendResult(trend=trend, change_percent=abs(round_half_up(change)))


def metric_trends(metrics: Sequence[PerformanceMetric]) -> List[MetricTrend]:
    """
    Compute one trend per metric category.

    Categories are grouped by their raw metric_type label and returned in
    order of first appearance.

    Args:
        metrics: Metrics for one athlete, ordered by recorded_date ascending

    Returns:
        List of MetricTrend, one per category
    """
    grouped: Dict[str, List[float]] = {}
    for metric in metrics:
        grouped.setdefault(metric.metric_type, []).append(metric.value)

    trends = []
    for metric_type, values in grouped.items():
        result = analyze_trend(values)
        trends.append(MetricTrend(
            metric_type=metric_type,
            category=MetricType(metric_type),
            trend=result.trend,
            change_percent=result.change_percent,
            label=result.trend.label,
            color=result.trend.color,
        ))
    return trends
