import os
from datetime import datetime
from typing import Optional

from kinesis_metrics.config.file import ConfigFile
from kinesis_metrics.config.metrics import (
    DEFAULT_FETCH_AGE_S,
    DEFAULT_PERIOD_S,
    DEFAULT_SCHEME,
)
from kinesis_metrics.utils.time_periods import QueryWindow, universal_now


class ReporterConfig:
    """
    The options for a single reporting run. Instances are not modified after
    construction.
    """

    def __init__(
        self,
        stream_name: str,
        scheme: str = DEFAULT_SCHEME,
        fetch_age_s: int = DEFAULT_FETCH_AGE_S,
        period_s: int = DEFAULT_PERIOD_S,
        end_time: Optional[datetime] = None,
        region: Optional[str] = None,
        unit: Optional[str] = None,
    ) -> None:
        self._stream_name = stream_name
        self._scheme = scheme
        self._fetch_age_s = fetch_age_s
        self._period_s = period_s
        self._end_time = end_time if end_time is not None else universal_now()
        self._region = region
        self._unit = unit

    @classmethod
    def from_args(
        cls, args, config_file: Optional[ConfigFile] = None
    ) -> "ReporterConfig":
        """
        Command line flags take precedence over the configuration file, which
        takes precedence over the built-in defaults.
        """

        def pick(flag_value, file_value, default):
            if flag_value is not None:
                return flag_value
            if file_value is not None:
                return file_value
            return default

        cfg = config_file if config_file is not None else ConfigFile({})
        return cls(
            stream_name=args.name,
            scheme=pick(args.scheme, cfg.scheme, DEFAULT_SCHEME),
            fetch_age_s=pick(args.fetch_age, cfg.fetch_age_s, DEFAULT_FETCH_AGE_S),
            period_s=pick(args.period, cfg.period_s, DEFAULT_PERIOD_S),
            end_time=args.end_time,
            region=pick(args.region, cfg.aws_region, os.environ.get("AWS_REGION")),
            unit=pick(args.unit, cfg.unit, None),
        )

    @property
    def stream_name(self) -> str:
        return self._stream_name

    @property
    def scheme(self) -> str:
        return self._scheme

    @property
    def fetch_age_s(self) -> int:
        return self._fetch_age_s

    @property
    def period_s(self) -> int:
        return self._period_s

    @property
    def end_time(self) -> datetime:
        return self._end_time

    @property
    def region(self) -> Optional[str]:
        return self._region

    @property
    def unit(self) -> Optional[str]:
        return self._unit

    def window(self) -> QueryWindow:
        return QueryWindow.from_seconds(
            self._end_time, self._fetch_age_s, self._period_s
        )

    def __repr__(self) -> str:
        return "ReporterConfig(stream={}, scheme={!r}, window={})".format(
            self._stream_name, self._scheme, self.window()
        )
