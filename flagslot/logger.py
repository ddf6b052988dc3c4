# flagslot — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for flagslot."""
import logging

logger: logging.Logger = logging.getLogger("flagslot")
