import enum
from typing import Dict, List


class Statistic(str, enum.Enum):
    """
    The CloudWatch aggregations requested for every metric.
    """

    Minimum = "Minimum"
    Maximum = "Maximum"
    Average = "Average"
    Sum = "Sum"
    SampleCount = "SampleCount"

    def datapoint_field(self) -> str:
        """
        The key holding this statistic's value in a `GetMetricStatistics`
        datapoint.
        """
        return DatapointFields[self]


DatapointFields: Dict[Statistic, str] = {}
DatapointFields[Statistic.Minimum] = "Minimum"
DatapointFields[Statistic.Maximum] = "Maximum"
DatapointFields[Statistic.Average] = "Average"
DatapointFields[Statistic.Sum] = "Sum"
DatapointFields[Statistic.SampleCount] = "SampleCount"

DATAPOINT_TIMESTAMP_FIELD = "Timestamp"

# Output order matters: keys are emitted in this order for each metric.
ALL_STATISTICS: List[Statistic] = [
    Statistic.Minimum,
    Statistic.Maximum,
    Statistic.Average,
    Statistic.Sum,
    Statistic.SampleCount,
]
