from datetime import datetime
from typing import Any, Dict, Iterable

from kinesis_metrics.config.statistic import Statistic, DATAPOINT_TIMESTAMP_FIELD


class Datapoint:
    """
    One aggregated CloudWatch sample. It carries a value for each requested
    statistic and a single timestamp shared by all of them.
    """

    @classmethod
    def from_response(
        cls, raw: Dict[str, Any], statistics: Iterable[Statistic]
    ) -> "Datapoint":
        # Raises KeyError if the response is missing a requested field.
        values = {stat: float(raw[stat.datapoint_field()]) for stat in statistics}
        return cls(raw[DATAPOINT_TIMESTAMP_FIELD], values)

    def __init__(self, timestamp: datetime, values: Dict[Statistic, float]) -> None:
        self._timestamp = timestamp
        self._values = values

    @property
    def timestamp(self) -> datetime:
        return self._timestamp

    def timestamp_seconds(self) -> int:
        return int(self._timestamp.timestamp())

    def value(self, statistic: Statistic) -> float:
        return self._values[statistic]

    def __repr__(self) -> str:
        return "Datapoint({}, {})".format(
            self._timestamp.isoformat(),
            ", ".join("{}={}".format(k.value, v) for k, v in self._values.items()),
        )
