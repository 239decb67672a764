import logging
from typing import Callable, List, NamedTuple, Sequence

from kinesis_metrics.config.metrics import KINESIS_STREAM_METRICS
from kinesis_metrics.config.reporter import ReporterConfig
from kinesis_metrics.config.statistic import Statistic, ALL_STATISTICS
from kinesis_metrics.config.strings import metric_key
from kinesis_metrics.datapoint import Datapoint
from kinesis_metrics.utils.time_periods import QueryWindow

logger = logging.getLogger(__name__)

# (metric name, statistics, stream name, window) -> datapoints
QueryFn = Callable[[str, List[Statistic], str, QueryWindow], List[Datapoint]]


class MetricTriple(NamedTuple):
    key: str
    value: float
    timestamp: int


def report(
    stream_name: str,
    window: QueryWindow,
    metrics: Sequence[str],
    statistics: Sequence[Statistic],
    query_fn: QueryFn,
    scheme: str,
) -> List[MetricTriple]:
    """
    Queries each metric once and emits one triple per statistic using the
    first returned datapoint. Metrics without datapoints are skipped. The
    output is ordered by metric, then by statistic, following the order of
    `metrics` and `statistics`.

    Errors raised by `query_fn` are propagated.
    """
    stats = list(statistics)
    results: List[MetricTriple] = []

    for metric_name in metrics:
        datapoints = query_fn(metric_name, stats, stream_name, window)
        if len(datapoints) == 0:
            logger.debug("No datapoints for %s in %s. Skipping.", metric_name, window)
            continue

        datapoint = datapoints[0]
        timestamp = datapoint.timestamp_seconds()
        for stat in stats:
            results.append(
                MetricTriple(
                    metric_key(scheme, stream_name, metric_name, stat.value),
                    datapoint.value(stat),
                    timestamp,
                )
            )

    return results


class MetricReporter:
    def __init__(
        self,
        config: ReporterConfig,
        query_fn: QueryFn,
        metrics: Sequence[str] = KINESIS_STREAM_METRICS,
        statistics: Sequence[Statistic] = ALL_STATISTICS,
    ) -> None:
        self._config = config
        self._query_fn = query_fn
        self._metrics = tuple(metrics)
        self._statistics = tuple(statistics)

    def report(self) -> List[MetricTriple]:
        window = self._config.window()
        logger.debug("Reporting on %s", self._config)
        triples = report(
            self._config.stream_name,
            window,
            self._metrics,
            self._statistics,
            self._query_fn,
            self._config.scheme,
        )
        num_reported = len(triples) // max(len(self._statistics), 1)
        logger.debug(
            "Reported %d of %d metrics for %s.",
            num_reported,
            len(self._metrics),
            self._config.stream_name,
        )
        return triples
