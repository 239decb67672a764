import boto3
import logging
from typing import Any, Dict, List, Optional

from kinesis_metrics.config.file import ConfigFile
from kinesis_metrics.config.metrics import KINESIS_NAMESPACE, STREAM_NAME_DIMENSION
from kinesis_metrics.config.statistic import Statistic
from kinesis_metrics.datapoint import Datapoint
from kinesis_metrics.utils.time_periods import QueryWindow

logger = logging.getLogger(__name__)


class CloudWatchClient:
    def __init__(
        self,
        region: Optional[str] = None,
        config: Optional[ConfigFile] = None,
        unit: Optional[str] = None,
        client: Optional[Any] = None,
    ) -> None:
        self._unit = unit

        if client is not None:
            self._client = client
        elif config is not None and config.has_credentials():
            self._client = boto3.client(
                "cloudwatch",
                region_name=region,
                aws_access_key_id=config.aws_access_key,
                aws_secret_access_key=config.aws_access_key_secret,
            )
        else:
            self._client = boto3.client("cloudwatch", region_name=region)

    def get_metric_statistics(
        self,
        metric_name: str,
        statistics: List[Statistic],
        stream_name: str,
        window: QueryWindow,
    ) -> List[Datapoint]:
        """
        Retrieves all requested statistics of one stream metric in a single
        call. The datapoints are returned in the order CloudWatch sends them.
        """
        request: Dict[str, Any] = {
            "Namespace": KINESIS_NAMESPACE,
            "MetricName": metric_name,
            "Dimensions": [
                {
                    "Name": STREAM_NAME_DIMENSION,
                    "Value": stream_name,
                }
            ],
            "StartTime": window.start,
            "EndTime": window.end,
            "Period": window.period_seconds,
            "Statistics": [stat.value for stat in statistics],
        }
        if self._unit is not None:
            request["Unit"] = self._unit

        logger.debug(
            "Querying CloudWatch for %s on %s using the range %s -- %s",
            metric_name,
            stream_name,
            window.start,
            window.end,
        )
        response = self._client.get_metric_statistics(**request)
        return [
            Datapoint.from_response(raw, statistics)
            for raw in response["Datapoints"]
        ]
