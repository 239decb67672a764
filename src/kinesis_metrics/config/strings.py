import re
from typing import List

_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")


def snake_case(name: str) -> str:
    """
    Converts a CamelCase identifier into lowercase words separated by
    underscores. Dots are kept as-is, so "PutRecord.Latency" becomes
    "put_record.latency".
    """
    converted = name.replace("::", "/")
    # e.g., IOStream -> IO_Stream
    converted = _ACRONYM_BOUNDARY.sub(r"\1_\2", converted)
    # e.g., getRecords -> get_Records
    converted = _WORD_BOUNDARY.sub(r"\1_\2", converted)
    return converted.replace("-", "_").lower()


def metric_key(
    scheme: str, stream_name: str, metric_name: str, statistic_name: str
) -> str:
    parts: List[str] = [] if scheme == "" else [scheme]
    parts.extend([stream_name, snake_case(metric_name), snake_case(statistic_name)])
    return ".".join(parts)
