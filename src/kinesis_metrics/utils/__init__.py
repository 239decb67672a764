import logging


def set_up_logging(filename=None, debug_mode=False):
    # Graphite lines are written to stdout, so log records must never end up
    # there. `logging.basicConfig()` defaults to stderr.
    logging_kwargs = {
        "format": "%(asctime)s %(levelname)-8s %(message)s",
        "datefmt": "%Y-%m-%d %H:%M",
        "level": logging.DEBUG if debug_mode else logging.INFO,
    }
    if filename is not None:
        # Logs will be written to a file.
        logging_kwargs["filename"] = filename
    logging.basicConfig(**logging_kwargs)

    # boto3 logging is too verbose - it interferes with our debug messages. This
    # snippet disables debug logging on boto3 related modules.
    logging.getLogger("boto3").setLevel(logging.INFO)
    logging.getLogger("botocore").setLevel(logging.INFO)
    logging.getLogger("s3transfer").setLevel(logging.INFO)
    logging.getLogger("urllib3").setLevel(logging.INFO)
