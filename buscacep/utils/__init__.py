"""
Utilities package
"""

from buscacep.utils.logger import setup_logger
from buscacep.utils.error_handler import ErrorHandler, ErrorType
from buscacep.utils.config_helper import ConfigHelper, get_config

__all__ = ['setup_logger', 'ErrorHandler', 'ErrorType', 'ConfigHelper', 'get_config']
