"""
Transformations

Rewrite secret names and descriptions before they become credential
attributes.
"""

from typing import Dict, Any, List, Optional

from .errors import ConfigurationError


class NameTransformation:
    """Identity name transformation."""

    def transform(self, name: str) -> str:
        return name


class RemovePrefix(NameTransformation):
    """Strip a single prefix from secret names."""

    def __init__(self, prefix: Optional[str]):
        self.prefix = prefix or ''

    def transform(self, name: str) -> str:
        if self.prefix and name.startswith(self.prefix):
            return name[len(self.prefix):]
        return name


class RemovePrefixes(NameTransformation):
    """Strip the first matching prefix from secret names."""

    def __init__(self, prefixes: Optional[List[str]]):
        self.prefixes = [p for p in (prefixes or []) if p]

    def transform(self, name: str) -> str:
        for prefix in self.prefixes:
            if name.startswith(prefix):
                return name[len(prefix):]
        return name


class DescriptionTransformation:
    """Identity description transformation."""

    def transform(self, description: str) -> str:
        return description


class Hide(DescriptionTransformation):
    """Blank out secret descriptions."""

    def transform(self, description: str) -> str:
        return ''


def name_transformation_from_dict(data: Optional[Dict[str, Any]]) -> NameTransformation:
    """
    Build a name transformation from its configuration.

    Accepted forms:
        None / {}                                      -> identity
        {"removePrefix": {"prefix": "ci-"}}
        {"removePrefixes": {"prefixes": [{"value": "a-"}, "b-"]}}
    """
    if not data:
        return NameTransformation()

    if not isinstance(data, dict) or len(data) != 1:
        raise ConfigurationError("Name transformation must have exactly one kind",
                                 config_path='transformations.name')

    kind, options = next(iter(data.items()))
    options = options or {}
    if not isinstance(options, dict):
        raise ConfigurationError(f"Options of name transformation '{kind}' must be a mapping",
                                 config_path='transformations.name')

    if kind == 'removePrefix':
        return RemovePrefix(options.get('prefix'))

    if kind == 'removePrefixes':
        prefixes = options.get('prefixes') or []
        if not isinstance(prefixes, list):
            raise ConfigurationError("removePrefixes.prefixes must be a list",
                                     config_path='transformations.name.removePrefixes')
        return RemovePrefixes([p.get('value') if isinstance(p, dict) else p for p in prefixes])

    if kind == 'default':
        return NameTransformation()

    raise ConfigurationError(f"Unknown name transformation: {kind}",
                             config_path='transformations.name')


def description_transformation_from_dict(data: Optional[Dict[str, Any]]) -> DescriptionTransformation:
    """Build a description transformation ({"hide": {}} or identity)."""
    if not data:
        return DescriptionTransformation()

    if not isinstance(data, dict) or len(data) != 1:
        raise ConfigurationError("Description transformation must have exactly one kind",
                                 config_path='transformations.description')

    kind = next(iter(data))

    if kind == 'hide':
        return Hide()

    if kind == 'default':
        return DescriptionTransformation()

    raise ConfigurationError(f"Unknown description transformation: {kind}",
                             config_path='transformations.description')
