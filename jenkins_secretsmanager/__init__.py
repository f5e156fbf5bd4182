"""
Secrets Manager Credentials Provider

Fetches secrets from AWS Secrets Manager and exposes them to Jenkins as
credential objects.
"""

__version__ = "1.0.0"

from .supplier import CredentialsSupplier
from .provider import CredentialsProvider
from .config import PluginConfiguration, load_configuration

__all__ = ["CredentialsSupplier", "CredentialsProvider", "PluginConfiguration", "load_configuration"]
