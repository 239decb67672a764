from typing import Tuple

KINESIS_NAMESPACE = "AWS/Kinesis"
STREAM_NAME_DIMENSION = "StreamName"

# Stream-level metrics. See
# https://docs.aws.amazon.com/streams/latest/dev/monitoring-with-cloudwatch.html
KINESIS_STREAM_METRICS: Tuple[str, ...] = (
    "GetRecords.Bytes",
    "GetRecords.IteratorAgeMilliseconds",
    "GetRecords.Latency",
    "GetRecords.Records",
    "GetRecords.Success",
    "IncomingBytes",
    "IncomingRecords",
    "PutRecord.Bytes",
    "PutRecord.Latency",
    "PutRecord.Success",
    "PutRecords.Bytes",
    "PutRecords.Latency",
    "PutRecords.Records",
    "PutRecords.Success",
    "ReadProvisionedThroughputExceeded",
    "SubscribeToShard.RateExceeded",
    "SubscribeToShard.Success",
    "SubscribeToShardEvent.Bytes",
    "SubscribeToShardEvent.MillisBehindLatest",
    "SubscribeToShardEvent.Records",
    "SubscribeToShardEvent.Success",
    "WriteProvisionedThroughputExceeded",
)

DEFAULT_SCHEME = "aws.kinesis"
DEFAULT_FETCH_AGE_S = 60
DEFAULT_PERIOD_S = 60
