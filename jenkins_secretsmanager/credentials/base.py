"""
Credential Types

Host-side representations of secrets. Each credential is identified by
its id; the secret material is resolved lazily through a SecretValue.
"""

from typing import Dict, Any, List, Optional

from .secret import SecretValue

MASK = '***MASKED***'


class StandardCredentials:
    """Base class for credentials backed by a Secrets Manager secret."""

    credential_type: str = "base"

    def __init__(self, id: str, description: str, secret: SecretValue):
        self.id = id
        self.description = description or ''
        self.secret = secret

    def to_dict(self, mask: bool = True) -> Dict[str, Any]:
        """
        Describe the credential.

        Args:
            mask: Replace secret material with a mask instead of fetching it

        Returns:
            Dictionary with the credential attributes
        """
        data = {
            'id': self.id,
            'type': self.credential_type,
            'description': self.description,
        }
        data.update(self._attributes())

        for field, resolver in self._secret_fields().items():
            data[field] = MASK if mask else resolver()

        return data

    def _attributes(self) -> Dict[str, Any]:
        return {}

    def _secret_fields(self) -> Dict[str, Any]:
        return {}

    def __eq__(self, other):
        if not isinstance(other, StandardCredentials):
            return NotImplemented
        return type(self) is type(other) and self.id == other.id

    def __hash__(self):
        return hash((type(self).__name__, self.id))

    def __repr__(self):
        return f"{self.__class__.__name__}(id={self.id!r})"


class StringCredentials(StandardCredentials):
    """Secret text."""

    credential_type = "string"

    def get_secret(self) -> str:
        return self.secret.get_string()

    def _secret_fields(self):
        return {'secret': self.get_secret}


class UsernamePasswordCredentials(StandardCredentials):
    """Username with a password held in the secret."""

    credential_type = "usernamePassword"

    def __init__(self, id: str, description: str, username: str, secret: SecretValue):
        super().__init__(id, description, secret)
        self.username = username

    def get_password(self) -> str:
        return self.secret.get_string()

    def _attributes(self):
        return {'username': self.username}

    def _secret_fields(self):
        return {'password': self.get_password}


class SshUserPrivateKeyCredentials(StandardCredentials):
    """SSH username with a PEM private key held in the secret."""

    credential_type = "sshUserPrivateKey"

    def __init__(self, id: str, description: str, username: str, secret: SecretValue):
        super().__init__(id, description, secret)
        self.username = username

    def get_private_key(self) -> str:
        return self.secret.get_string()

    def get_private_keys(self) -> List[str]:
        return [self.get_private_key()]

    def get_passphrase(self) -> Optional[str]:
        # Keys are stored unencrypted
        return None

    def _attributes(self):
        return {'username': self.username}

    def _secret_fields(self):
        return {'private_key': self.get_private_key}


class CertificateCredentials(StandardCredentials):
    """PKCS#12 keystore held as binary secret, with an empty password."""

    credential_type = "certificate"

    def get_keystore_bytes(self) -> bytes:
        return self.secret.get_binary()

    def get_password(self) -> str:
        return ''

    def _secret_fields(self):
        return {'keystore': self.get_keystore_bytes}


class FileCredentials(StandardCredentials):
    """Secret file; content comes from the binary or string secret value."""

    credential_type = "file"

    def __init__(self, id: str, description: str, filename: str, secret: SecretValue):
        super().__init__(id, description, secret)
        self.filename = filename

    def get_content(self) -> bytes:
        return self.secret.get_bytes()

    def _attributes(self):
        return {'filename': self.filename}

    def _secret_fields(self):
        return {'content': self.get_content}
