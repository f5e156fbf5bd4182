"""
Credentials Factory

Maps a secret entry's tags to the matching credential type.
"""

from typing import Dict, Optional

from .base import (
    StandardCredentials,
    StringCredentials,
    UsernamePasswordCredentials,
    SshUserPrivateKeyCredentials,
    CertificateCredentials,
    FileCredentials,
)
from .secret import SecretValue
from ..loggingx import get_logger

logger = get_logger(__name__)


class Tags:
    """Secret tags that drive credential conversion."""

    type = "jenkins:credentials:type"
    username = "jenkins:credentials:username"
    filename = "jenkins:credentials:filename"


class Type:
    """Values of the credential type tag."""

    string = "string"
    username_password = "usernamePassword"
    ssh_user_private_key = "sshUserPrivateKey"
    certificate = "certificate"
    file = "file"


class CredentialsFactory:
    """Creates credentials from secret entries."""

    @staticmethod
    def create(name: str, description: str, tags: Dict[str, str], client,
               secret_id: Optional[str] = None) -> Optional[StandardCredentials]:
        """
        Convert a secret entry into a credential.

        Args:
            name: Credential id (the secret name after any name transformation)
            description: Credential description
            tags: Secret tags as a key/value map
            client: Secrets Manager client used to resolve the secret value later
            secret_id: ARN or original name to fetch the value by (defaults to name)

        Returns:
            The credential, or None if the entry is not a usable credential
        """
        credential_type = tags.get(Tags.type)
        secret = SecretValue(client, secret_id or name)

        if credential_type == Type.string:
            return StringCredentials(name, description, secret)

        elif credential_type == Type.username_password:
            username = tags.get(Tags.username)
            if not username:
                logger.debug("Skipping secret without username tag",
                             secret=name, credential_type=credential_type)
                return None
            return UsernamePasswordCredentials(name, description, username, secret)

        elif credential_type == Type.ssh_user_private_key:
            username = tags.get(Tags.username)
            if not username:
                logger.debug("Skipping secret without username tag",
                             secret=name, credential_type=credential_type)
                return None
            return SshUserPrivateKeyCredentials(name, description, username, secret)

        elif credential_type == Type.certificate:
            return CertificateCredentials(name, description, secret)

        elif credential_type == Type.file:
            filename = tags.get(Tags.filename) or name
            return FileCredentials(name, description, filename, secret)

        logger.debug("Skipping secret without a known credential type",
                     secret=name, credential_type=credential_type)
        return None
