"""
Utility modules for the audit API client
"""
from .config_loader import ApiClientConfig, get_api_config, load_api_config

__all__ = [
    'ApiClientConfig',
    'get_api_config',
    'load_api_config',
]
