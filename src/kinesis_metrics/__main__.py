import argparse
import sys

import kinesis_metrics
import kinesis_metrics.exec.list_metrics
import kinesis_metrics.exec.report


def main():
    parser = argparse.ArgumentParser(
        description="Reports Kinesis stream metrics from CloudWatch for Graphite.",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="store_true",
        help="Print the version and exit.",
    )
    subparsers = parser.add_subparsers(title="Commands")
    kinesis_metrics.exec.report.register_command(subparsers)
    kinesis_metrics.exec.list_metrics.register_command(subparsers)
    args = parser.parse_args()

    if args.version:
        print("kinesis-metrics", kinesis_metrics.__version__)
        return

    if "func" not in args:
        parser.print_help()
        sys.exit(1)

    args.func(args)


if __name__ == "__main__":
    main()
