from .config import Config, get_config
from .log import setup_logging

__all__ = ['Config', 'get_config', 'setup_logging']
