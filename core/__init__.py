"""
Core utilities and shared components for pokesearch.
"""

from .logging_config import (
    setup_logger,
    set_level,
    get_test_logger,
    get_cli_logger
)

__all__ = [
    'setup_logger',
    'set_level',
    'get_test_logger',
    'get_cli_logger'
]
