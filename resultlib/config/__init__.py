"""
Configuration management module.
"""

from .settings import Settings, get_settings, set_settings

__all__ = [
    'Settings',
    'get_settings',
    'set_settings',
]
