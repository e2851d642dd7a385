# clparam Command Line Parameters — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for clparam."""
import logging

logger: logging.Logger = logging.getLogger("clparam")
