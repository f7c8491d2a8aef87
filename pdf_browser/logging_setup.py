import logging
import sys

# SDK loggers that flood DEBUG output with request signing and wire dumps.
NOISY_LOGGERS = ("boto3", "botocore", "s3transfer", "urllib3")


def setup_logging(service_name: str, level: str = "INFO") -> logging.Logger:
    """
    Configure process-wide logging for the service.

    The AWS SDK loggers are held at WARNING unless *level* is more severe,
    so DEBUG output stays about the PDF browser itself.
    """
    logging.basicConfig(
        level=level,
        format=f"%(asctime)s - {service_name} - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    sdk_level = max(logging.getLevelName(level), logging.WARNING)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(sdk_level)
    return logging.getLogger(service_name)
