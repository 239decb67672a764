import sys
from typing import Iterable, Optional, TextIO

from kinesis_metrics.reporter import MetricTriple


def format_line(triple: MetricTriple) -> str:
    """
    Renders a triple using Graphite's plaintext protocol:
    `<key> <value> <timestamp>`.
    """
    return "{} {} {}".format(triple.key, triple.value, triple.timestamp)


class GraphiteOutput:
    def __init__(self, out: Optional[TextIO] = None) -> None:
        self._out = out if out is not None else sys.stdout

    def write(self, triple: MetricTriple) -> None:
        print(format_line(triple), file=self._out)

    def write_all(self, triples: Iterable[MetricTriple]) -> int:
        num_written = 0
        for triple in triples:
            self.write(triple)
            num_written += 1
        self._out.flush()
        return num_written
