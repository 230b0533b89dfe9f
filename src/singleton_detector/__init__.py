"""singleton_detector - classpath discovery and graph reporting for singleton analysis."""

import logging

__version__ = "0.7.2"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ["__version__"]
