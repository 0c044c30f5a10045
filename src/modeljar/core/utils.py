"""
Utility functions shared across modules.
"""

import logging

LOG_FORMAT = "%(levelname)s %(name)s - %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """
    Console logging for CLI runs: INFO by default, DEBUG with --verbose.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("modeljar").setLevel(level)
