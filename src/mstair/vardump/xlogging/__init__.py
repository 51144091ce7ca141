"""
package: mstair.vardump.xlogging
"""

from mstair.vardump.xlogging.core_logger import CoreLogger, initialize_root
from mstair.vardump.xlogging.logger_constants import TRACE
from mstair.vardump.xlogging.logger_factory import create_logger


__all__ = [
    "TRACE",
    "CoreLogger",
    "create_logger",
    "initialize_root",
]
