"""
Credentials Package

Credential types backed by Secrets Manager secrets, and the factory that
creates them from secret entries.
"""

from .base import (
    StandardCredentials,
    StringCredentials,
    UsernamePasswordCredentials,
    SshUserPrivateKeyCredentials,
    CertificateCredentials,
    FileCredentials,
)
from .factory import CredentialsFactory, Tags, Type
from .secret import SecretValue

__all__ = [
    "StandardCredentials",
    "StringCredentials",
    "UsernamePasswordCredentials",
    "SshUserPrivateKeyCredentials",
    "CertificateCredentials",
    "FileCredentials",
    "CredentialsFactory",
    "Tags",
    "Type",
    "SecretValue",
]
