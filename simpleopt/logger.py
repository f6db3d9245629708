# Simpleopt CLI Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for simpleopt."""
import logging

logger: logging.Logger = logging.getLogger("simpleopt")
