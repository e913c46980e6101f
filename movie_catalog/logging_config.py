"""
Logging setup.

Every module logs through loguru's shared ``logger``; this only decides where
the records go and at which level.
"""

import sys  # stderr sink

from loguru import logger  # console logger

LOG_FORMAT = '<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | {message}'


def setup_logging(level: str = 'INFO') -> None:
	"""Replace loguru's default sink with a single stderr sink at `level`. Safe to call repeatedly."""
	logger.remove()  # drops the default handler and any earlier one we added
	logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT)
