# Utils package for webcompat

from .logging import CategoryLog, default_log, get_logger, setup_logging

__all__ = ['CategoryLog', 'default_log', 'get_logger', 'setup_logging']
