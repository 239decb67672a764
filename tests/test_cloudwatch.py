import pytest
from datetime import datetime, timezone
from unittest.mock import MagicMock, patch

from kinesis_metrics.cloudwatch import CloudWatchClient
from kinesis_metrics.config.file import ConfigFile
from kinesis_metrics.config.statistic import ALL_STATISTICS, Statistic
from kinesis_metrics.utils.time_periods import QueryWindow


def get_window() -> QueryWindow:
    end = datetime(year=2024, month=5, day=1, hour=12, tzinfo=timezone.utc)
    return QueryWindow.from_seconds(end, 60, 60)


def make_datapoint(ts: datetime, value: float) -> dict:
    return {
        "Timestamp": ts,
        "Minimum": value,
        "Maximum": value,
        "Average": value,
        "Sum": value,
        "SampleCount": 1.0,
        "Unit": "Count",
    }


def test_request_shape():
    boto_client = MagicMock()
    boto_client.get_metric_statistics.return_value = {"Datapoints": []}
    cw = CloudWatchClient(client=boto_client)
    window = get_window()

    datapoints = cw.get_metric_statistics(
        "GetRecords.Latency", ALL_STATISTICS, "mystream", window
    )
    assert datapoints == []

    boto_client.get_metric_statistics.assert_called_once_with(
        Namespace="AWS/Kinesis",
        MetricName="GetRecords.Latency",
        Dimensions=[{"Name": "StreamName", "Value": "mystream"}],
        StartTime=window.start,
        EndTime=window.end,
        Period=60,
        Statistics=["Minimum", "Maximum", "Average", "Sum", "SampleCount"],
    )


def test_unit_is_forwarded():
    boto_client = MagicMock()
    boto_client.get_metric_statistics.return_value = {"Datapoints": []}
    cw = CloudWatchClient(unit="Milliseconds", client=boto_client)
    cw.get_metric_statistics(
        "PutRecord.Latency", [Statistic.Average], "s", get_window()
    )
    _, kwargs = boto_client.get_metric_statistics.call_args
    assert kwargs["Unit"] == "Milliseconds"


def test_datapoints_keep_response_order():
    ts1 = datetime(year=2024, month=5, day=1, hour=11, minute=58, tzinfo=timezone.utc)
    ts2 = datetime(year=2024, month=5, day=1, hour=11, minute=57, tzinfo=timezone.utc)
    boto_client = MagicMock()
    boto_client.get_metric_statistics.return_value = {
        "Datapoints": [make_datapoint(ts1, 3.0), make_datapoint(ts2, 4.0)]
    }
    cw = CloudWatchClient(client=boto_client)
    datapoints = cw.get_metric_statistics(
        "IncomingBytes", ALL_STATISTICS, "s", get_window()
    )
    assert len(datapoints) == 2
    assert datapoints[0].timestamp == ts1
    assert datapoints[0].value(Statistic.Average) == 3.0
    assert datapoints[1].value(Statistic.Average) == 4.0


def test_malformed_response_raises():
    boto_client = MagicMock()
    boto_client.get_metric_statistics.return_value = {"ResponseMetadata": {}}
    cw = CloudWatchClient(client=boto_client)
    with pytest.raises(KeyError):
        cw.get_metric_statistics("IncomingBytes", ALL_STATISTICS, "s", get_window())


def test_client_errors_propagate():
    boto_client = MagicMock()
    boto_client.get_metric_statistics.side_effect = RuntimeError("boom")
    cw = CloudWatchClient(client=boto_client)
    with pytest.raises(RuntimeError):
        cw.get_metric_statistics("IncomingBytes", ALL_STATISTICS, "s", get_window())


@patch("kinesis_metrics.cloudwatch.boto3.client")
def test_credentials_from_config(mock_client):
    config = ConfigFile({"aws_access_key": "key", "aws_access_key_secret": "secret"})
    CloudWatchClient(region="eu-west-1", config=config)
    mock_client.assert_called_once_with(
        "cloudwatch",
        region_name="eu-west-1",
        aws_access_key_id="key",
        aws_secret_access_key="secret",
    )


@patch("kinesis_metrics.cloudwatch.boto3.client")
def test_default_credentials(mock_client):
    CloudWatchClient(region="us-east-1", config=ConfigFile({"aws_region": "x"}))
    mock_client.assert_called_once_with("cloudwatch", region_name="us-east-1")
