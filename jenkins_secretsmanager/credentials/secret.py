"""
Lazy Secret Values

Credential objects hold a reference to their secret and only call
GetSecretValue when the value is actually used.
"""

from typing import Dict, Any

from botocore.exceptions import BotoCoreError, ClientError

from ..errors import CredentialError
from ..loggingx import get_logger

logger = get_logger(__name__)


class SecretValue:
    """On-demand accessor for the current value of one secret."""

    def __init__(self, client, secret_id: str):
        """
        Args:
            client: boto3 Secrets Manager client
            secret_id: ARN or name of the secret
        """
        self.client = client
        self.secret_id = secret_id

    def _fetch(self) -> Dict[str, Any]:
        try:
            response = self.client.get_secret_value(SecretId=self.secret_id)
        except ClientError as e:
            error = e.response.get('Error', {})
            raise CredentialError(
                f"Could not fetch secret value: {error.get('Message') or e}",
                credential_name=self.secret_id,
                error_code=error.get('Code')
            ) from e
        except BotoCoreError as e:
            raise CredentialError(
                f"Could not fetch secret value: {e}",
                credential_name=self.secret_id
            ) from e

        logger.debug("Fetched secret value", secret_id=self.secret_id)
        return response

    def get_string(self) -> str:
        """
        Get the SecretString of the current version.

        Raises:
            CredentialError: If the secret cannot be fetched or holds binary data
        """
        response = self._fetch()
        value = response.get('SecretString')
        if value is None:
            raise CredentialError("Secret does not contain a string value",
                                  credential_name=self.secret_id)
        return value

    def get_binary(self) -> bytes:
        """
        Get the SecretBinary of the current version.

        Raises:
            CredentialError: If the secret cannot be fetched or holds a string
        """
        response = self._fetch()
        value = response.get('SecretBinary')
        if value is None:
            raise CredentialError("Secret does not contain a binary value",
                                  credential_name=self.secret_id)
        return value

    def get_bytes(self) -> bytes:
        """Get the secret as bytes, whichever form it is stored in."""
        response = self._fetch()
        if response.get('SecretBinary') is not None:
            return response['SecretBinary']
        if response.get('SecretString') is not None:
            return response['SecretString'].encode('utf-8')
        raise CredentialError("Secret has no value", credential_name=self.secret_id)

    def __repr__(self):
        return f"SecretValue(secret_id={self.secret_id!r})"
