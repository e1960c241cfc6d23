"""releasegate - run an ordered set of pre-release checks, stop at the first failure."""

from loguru import logger

__version__ = "0.1.0"

# Silent when used as a library; the CLI re-enables it in setup_logging
logger.disable("releasegate")
