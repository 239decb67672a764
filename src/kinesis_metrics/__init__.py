__version__ = "0.1.0"
__description__ = "Reports Kinesis stream metrics from CloudWatch in Graphite format."
__author__ = "kinesis-metrics contributors"
