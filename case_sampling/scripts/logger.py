"""Logging configuration for the case sampling package.

To use this logging configuration, set the environment variable
CASE_SAMPLING_LOG_CFG to the path of the logging configuration file.
The repo has a sample configuration file in the root directory.

"""

import logging
import logging.config
import os
from pathlib import Path

import tomli

LOG_CFG_ENV = "CASE_SAMPLING_LOG_CFG"
LOG_ROOT_NAME = "case_sampling"


def setup_logging():
    cfg_path = (
        os.getenv(LOG_CFG_ENV)
        or Path(__file__).parent.parent.parent / "logging_config.toml"
    )

    cfg_path = Path(cfg_path)

    if not cfg_path.exists():
        package_logger = logging.getLogger(LOG_ROOT_NAME)
        for handler in package_logger.handlers[:]:
            package_logger.removeHandler(handler)
        package_logger.addHandler(logging.NullHandler())
        return

    if not cfg_path.is_file():
        raise FileNotFoundError(f"Logging config not found at {cfg_path}")

    with cfg_path.open("rb") as f:
        cfg = tomli.load(f)

    logging.config.dictConfig(cfg)
