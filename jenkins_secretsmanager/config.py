"""
Plugin Configuration

Process-wide settings for the credentials provider: client connection,
list filters, transformations and caching. The YAML shape follows the
plugin's configuration-as-code layout.
"""

import os
import re
import threading
from pathlib import Path
from typing import Dict, Any, List, Optional

import yaml

from .client import ClientConfiguration
from .errors import ConfigurationError
from .filters import Filter
from .loggingx import get_logger
from .transformations import (
    NameTransformation,
    DescriptionTransformation,
    name_transformation_from_dict,
    description_transformation_from_dict,
)

logger = get_logger(__name__)

CONFIG_ENV_VAR = "SECRETSMANAGER_CONFIG"

# Key under which configuration-as-code files nest the plugin settings
CASC_ROOT = ("unclassified", "awsCredentialsProvider")


class ListSecrets:
    """Settings for the ListSecrets call."""

    def __init__(self, filters: Optional[List[Filter]] = None):
        self.filters = list(filters or [])

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'ListSecrets':
        data = data or {}
        if not isinstance(data, dict):
            raise ConfigurationError("listSecrets must be a mapping", config_path='listSecrets')

        filters = data.get('filters') or []
        if not isinstance(filters, list):
            raise ConfigurationError("listSecrets.filters must be a list",
                                     config_path='listSecrets.filters')

        parsed = [Filter.from_dict(f) for f in filters]
        for config_filter in parsed:
            config_filter.validate()

        return cls(parsed)


class Transformations:
    """Name and description rewrites applied to each secret entry."""

    def __init__(self, name: Optional[NameTransformation] = None,
                 description: Optional[DescriptionTransformation] = None):
        self.name = name or NameTransformation()
        self.description = description or DescriptionTransformation()

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'Transformations':
        data = data or {}
        if not isinstance(data, dict):
            raise ConfigurationError("transformations must be a mapping",
                                     config_path='transformations')

        return cls(name=name_transformation_from_dict(data.get('name')),
                   description=description_transformation_from_dict(data.get('description')))


class PluginConfiguration:
    """Global configuration, read by the supplier on every invocation."""

    _instance: Optional['PluginConfiguration'] = None
    _lock = threading.Lock()

    def __init__(self, client: Optional[ClientConfiguration] = None,
                 list_secrets: Optional[ListSecrets] = None,
                 transformations: Optional[Transformations] = None,
                 cache: bool = True):
        self.client = client
        self.list_secrets = list_secrets
        self.transformations = transformations
        self.cache = cache

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'PluginConfiguration':
        """
        Build configuration from a parsed YAML/JSON document.

        Args:
            data: Mapping with optional client, listSecrets, transformations
                  and cache keys

        Raises:
            ConfigurationError: If the document has an invalid shape
        """
        data = data or {}
        if not isinstance(data, dict):
            raise ConfigurationError("Configuration must be a mapping")

        for key in CASC_ROOT:
            if isinstance(data.get(key), dict):
                data = data[key]

        cache = data.get('cache', True)
        if not isinstance(cache, bool):
            raise ConfigurationError("cache must be true or false", config_path='cache')

        return cls(
            client=ClientConfiguration.from_dict(data['client']) if data.get('client') else None,
            list_secrets=ListSecrets.from_dict(data['listSecrets']) if data.get('listSecrets') else None,
            transformations=Transformations.from_dict(data.get('transformations')),
            cache=cache
        )

    @classmethod
    def get_instance(cls) -> 'PluginConfiguration':
        """
        Get the process-wide configuration.

        Loads the file named by SECRETSMANAGER_CONFIG on first access, or
        falls back to an empty configuration.
        """
        with cls._lock:
            if cls._instance is None:
                config_file = os.environ.get(CONFIG_ENV_VAR)
                if config_file:
                    cls._instance = load_configuration(config_file)
                else:
                    cls._instance = cls()
            return cls._instance

    @classmethod
    def set_instance(cls, configuration: 'PluginConfiguration') -> None:
        with cls._lock:
            cls._instance = configuration

    @classmethod
    def reset_instance(cls) -> None:
        with cls._lock:
            cls._instance = None


def _substitute_environment_variables(value: str) -> str:
    """Replace ${VAR_NAME} placeholders; unknown variables are left as-is."""
    def replace_var(match):
        var_name = match.group(1)
        return os.environ.get(var_name, match.group(0))

    return re.sub(r'\$\{([^}]+)\}', replace_var, value)


def _substitute_env_vars_in_config(config: Any) -> Any:
    if isinstance(config, dict):
        return {k: _substitute_env_vars_in_config(v) for k, v in config.items()}
    elif isinstance(config, list):
        return [_substitute_env_vars_in_config(item) for item in config]
    elif isinstance(config, str):
        return _substitute_environment_variables(config)
    else:
        return config


def load_configuration(config_file: str) -> PluginConfiguration:
    """
    Load plugin configuration from a YAML file.

    Args:
        config_file: Path to the YAML file

    Returns:
        Parsed configuration

    Raises:
        ConfigurationError: If the file is missing, unreadable or invalid
    """
    path = Path(config_file)
    if not path.exists():
        raise ConfigurationError("Configuration file not found", config_file=str(path))

    try:
        with open(path, 'r') as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML: {e}", config_file=str(path))

    data = _substitute_env_vars_in_config(data)

    try:
        configuration = PluginConfiguration.from_dict(data)
    except ConfigurationError as e:
        e.context.setdefault('config_file', str(path))
        raise

    logger.info("Loaded plugin configuration", config_file=str(path))
    return configuration
