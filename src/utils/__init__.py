"""
Utility modules for the payment server
"""
from .config_loader import ConfigError, PaymentServerConfig, load_server_config

__all__ = [
    'ConfigError',
    'PaymentServerConfig',
    'load_server_config',
]
