# case_sampling/__init__.py

# Case selection and inter-rater reliability for qualitative follow-up of
# organisational self-assessments.
#
# The package only emits records through module loggers. Applications call
# setup_logging() once at start-up to attach handlers from logging_config.toml
# (or the file named by CASE_SAMPLING_LOG_CFG).

from .sampling import SamplingMethod, SamplingService
from .scripts.logger import setup_logging

__version__ = "0.1.0"

__all__ = ["SamplingMethod", "SamplingService", "setup_logging"]
