"""
List Filters

Turns configured list filters into the shape the Secrets Manager
ListSecrets API expects. Filters are evaluated by the service, not here.
"""

from typing import Dict, Any, List, Iterable, Optional

from .errors import ConfigurationError

# Keys accepted by the ListSecrets "Filters" parameter.
FILTER_KEYS = [
    'description',
    'name',
    'tag-key',
    'tag-value',
    'primary-region',
    'owning-service',
    'all',
]


class Filter:
    """A configured key/values predicate for listing secrets."""

    def __init__(self, key: str, values: Optional[List[str]] = None):
        self.key = key
        self.values = list(values or [])

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Filter':
        if not isinstance(data, dict):
            raise ConfigurationError("Filter must be a mapping with 'key' and 'values'",
                                     config_path='listSecrets.filters')

        key = data.get('key')
        values = data.get('values', [])

        # Accept both plain strings and the {value: ...} form
        if isinstance(values, str):
            values = [values]
        if not isinstance(values, list):
            raise ConfigurationError(f"Filter '{key}' values must be a list",
                                     config_path='listSecrets.filters')
        values = [v.get('value') if isinstance(v, dict) else v for v in values]

        return cls(key, values)

    def validate(self) -> None:
        """Raise ConfigurationError if the filter cannot be sent to the service."""
        if self.key not in FILTER_KEYS:
            raise ConfigurationError(
                f"Invalid filter key '{self.key}'. Allowed: {', '.join(FILTER_KEYS)}",
                config_path='listSecrets.filters'
            )

        if not self.values or any(not isinstance(v, str) or not v for v in self.values):
            raise ConfigurationError(
                f"Filter '{self.key}' needs at least one non-empty value",
                config_path='listSecrets.filters'
            )

    def __eq__(self, other):
        if not isinstance(other, Filter):
            return NotImplemented
        return self.key == other.key and self.values == other.values

    def __repr__(self):
        return f"Filter(key={self.key!r}, values={self.values!r})"


class FiltersFactory:
    """Creates service API filters from filter configuration."""

    @staticmethod
    def create(filters: Iterable[Filter]) -> List[Dict[str, Any]]:
        """
        Convert configured filters into ListSecrets request filters.

        Args:
            filters: Configured filters

        Returns:
            List of {"Key": ..., "Values": [...]} dictionaries

        Raises:
            ConfigurationError: If a filter has an unknown key or no values
        """
        api_filters = []

        for config_filter in filters:
            config_filter.validate()
            api_filters.append({
                'Key': config_filter.key,
                'Values': list(config_filter.values)
            })

        return api_filters
