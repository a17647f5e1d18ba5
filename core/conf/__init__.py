import logging
import sys

from .common import *

logger = logging.getLogger(__name__)

if not ENV:
    logger.error("ENV is not set, expected the name of a module in conf/")
    sys.exit(1)

try:
    exec(f'from .{ENV} import *')
    logger.info(f"Configuration loaded from conf/{ENV}.py")
except (ImportError, SyntaxError):
    logger.error(f"Configuration file not found in conf/{ENV}.py")
    sys.exit(1)
