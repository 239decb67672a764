from tabulate import tabulate

from kinesis_metrics.config.metrics import KINESIS_NAMESPACE, KINESIS_STREAM_METRICS
from kinesis_metrics.config.statistic import ALL_STATISTICS
from kinesis_metrics.config.strings import snake_case


def register_command(subparsers) -> None:
    parser = subparsers.add_parser(
        "list-metrics",
        help="Show the CloudWatch metrics and statistics that are reported.",
    )
    parser.set_defaults(func=main)


def main(_args) -> None:
    print("Namespace:", KINESIS_NAMESPACE)
    print()
    print(
        tabulate(
            [(name, snake_case(name)) for name in KINESIS_STREAM_METRICS],
            headers=["Metric", "Key Segment"],
            tablefmt="simple_grid",
        )
    )
    print()
    print(
        tabulate(
            [(stat.value, snake_case(stat.value)) for stat in ALL_STATISTICS],
            headers=["Statistic", "Key Segment"],
            tablefmt="simple_grid",
        )
    )
