"""
Utility modules for the checkout relay
"""
from .config_loader import RelayConfig, load_relay_config

__all__ = [
    'RelayConfig',
    'load_relay_config',
]
