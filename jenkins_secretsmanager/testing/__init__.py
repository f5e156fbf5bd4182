"""
Testing Package

Browser helpers for exercising the provider's configuration screen.
"""

from .config_form import PluginConfigurationForm
from .browser import create_driver, open_configuration_form

__all__ = ["PluginConfigurationForm", "create_driver", "open_configuration_form"]
