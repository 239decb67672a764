import argparse
import logging
import sys
from typing import Optional, TextIO

import kinesis_metrics
from kinesis_metrics.cloudwatch import CloudWatchClient
from kinesis_metrics.config.file import ConfigFile
from kinesis_metrics.config.metrics import (
    DEFAULT_FETCH_AGE_S,
    DEFAULT_PERIOD_S,
    DEFAULT_SCHEME,
)
from kinesis_metrics.config.reporter import ReporterConfig
from kinesis_metrics.graphite import GraphiteOutput
from kinesis_metrics.reporter import MetricReporter
from kinesis_metrics.status import PluginStatus
from kinesis_metrics.utils import set_up_logging
from kinesis_metrics.utils.time_periods import parse_timestamp

logger = logging.getLogger(__name__)


def register_command(subparsers) -> None:
    parser = subparsers.add_parser(
        "report",
        help="Print a Kinesis stream's CloudWatch metrics in Graphite format.",
    )
    add_report_arguments(parser)
    parser.set_defaults(func=main)


def add_report_arguments(parser) -> None:
    parser.add_argument(
        "-n",
        "--name",
        type=str,
        required=True,
        help="Name of the Kinesis stream.",
    )
    parser.add_argument(
        "-s",
        "--scheme",
        type=str,
        help="Metric naming scheme, text to prepend to each metric "
        "(default: {}). Pass an empty string to omit it.".format(DEFAULT_SCHEME),
    )
    parser.add_argument(
        "-f",
        "--fetch_age",
        "--fetch-age",
        dest="fetch_age",
        type=int,
        help="How long ago (in seconds) to fetch metrics for "
        "(default: {}).".format(DEFAULT_FETCH_AGE_S),
    )
    parser.add_argument(
        "-r",
        "--region",
        type=str,
        help="AWS region (default: the AWS_REGION environment variable).",
    )
    parser.add_argument(
        "-t",
        "--end-time",
        dest="end_time",
        type=parse_timestamp,
        help="CloudWatch metric statistics end time (default: now).",
    )
    parser.add_argument(
        "-p",
        "--period",
        type=int,
        help="CloudWatch metric statistics period, in seconds "
        "(default: {}).".format(DEFAULT_PERIOD_S),
    )
    parser.add_argument(
        "-u",
        "--unit",
        type=str,
        help="Only retrieve datapoints recorded with this CloudWatch unit.",
    )
    parser.add_argument(
        "--config-file",
        type=str,
        help="Path to an optional YAML configuration file.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Set to enable debug logging.",
    )


def run_report(args, out: Optional[TextIO] = None) -> PluginStatus:
    """
    Runs one reporting pass and returns the status to exit with. Metric lines
    are only written once every metric has been queried successfully.
    """
    out = out if out is not None else sys.stdout
    try:
        config_file = (
            ConfigFile.load(args.config_file) if args.config_file is not None else None
        )
        config = ReporterConfig.from_args(args, config_file)
        cw_client = CloudWatchClient(config.region, config_file, config.unit)
        reporter = MetricReporter(config, cw_client.get_metric_statistics)
        triples = reporter.report()
        GraphiteOutput(out).write_all(triples)
        logger.debug("Wrote %d metric values.", len(triples))
        return PluginStatus.Ok

    except Exception as ex:  # pylint: disable=broad-exception-caught
        # A failed probe is reported as UNKNOWN, never as an empty success.
        logger.exception("Failed to report metrics for stream %s.", args.name)
        print("Check failed to run: {}".format(ex), file=out)
        return PluginStatus.Unknown


def main(args) -> None:
    set_up_logging(debug_mode=args.debug)
    status = run_report(args)
    sys.exit(status.value)


def entrypoint() -> None:
    parser = argparse.ArgumentParser(
        description=kinesis_metrics.__description__,
    )
    add_report_arguments(parser)
    args = parser.parse_args()
    main(args)
