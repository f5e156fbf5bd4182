"""
Custom Exceptions

Defines exceptions with context for the Secrets Manager credentials provider.
"""

from typing import Dict, Any, Optional


class SecretsManagerCredentialsError(Exception):
    """Base exception for credentials provider errors."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self):
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} (Context: {context_str})"
        return self.message


class ConfigurationError(SecretsManagerCredentialsError):
    """Exception raised when plugin configuration is invalid."""

    def __init__(self, message: str, config_file: Optional[str] = None,
                 config_path: Optional[str] = None, **kwargs):
        context = kwargs.copy()
        if config_file:
            context['config_file'] = config_file
        if config_path:
            context['config_path'] = config_path

        super().__init__(message, context)


class CredentialError(SecretsManagerCredentialsError):
    """Exception raised when a secret cannot be turned into a credential."""

    def __init__(self, message: str, credential_type: Optional[str] = None,
                 credential_name: Optional[str] = None, **kwargs):
        context = kwargs.copy()
        if credential_type:
            context['credential_type'] = credential_type
        if credential_name:
            context['credential_name'] = credential_name

        super().__init__(message, context)
