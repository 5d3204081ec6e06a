"""
Filter, transform and extractor configuration.

Configuration files and HTTP-style payloads use camelCase keys
(`includeDeprecated`, `maxDepth`, ...); `from_dict` maps them onto the
snake_case dataclasses below.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .exceptions import ConfigurationError

HTTP_METHODS = ('get', 'put', 'post', 'delete', 'options', 'head', 'patch', 'trace')


def is_http_method(key):
    return key in HTTP_METHODS


class OutputFormat(str, Enum):
    JSON = 'json'
    YAML = 'yaml'
    XML = 'xml'
    MARKDOWN = 'markdown'

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            valid = ', '.join(f.value for f in cls)
            raise ConfigurationError(
                f"Invalid format '{value}'. Must be one of {valid}.",
                config_key='output.format',
            ) from None


DEFAULT_OUTPUT_FORMAT = OutputFormat.MARKDOWN


def _string_list(value, key):
    if value is None:
        return []
    if isinstance(value, str):
        return [part.strip() for part in value.split(',') if part.strip()]
    if not isinstance(value, (list, tuple)):
        raise ConfigurationError(f"Expected a list of strings for '{key}'", config_key=key)
    return [str(item) for item in value]


@dataclass
class FilterPatterns:
    include: List[str] = field(default_factory=list)
    exclude: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data, key):
        data = data or {}
        return cls(
            include=_string_list(data.get('include'), f'{key}.include'),
            exclude=_string_list(data.get('exclude'), f'{key}.exclude'),
        )

    def is_empty(self):
        return not self.include and not self.exclude


@dataclass
class FilterOptions:
    paths: FilterPatterns = field(default_factory=FilterPatterns)
    tags: FilterPatterns = field(default_factory=FilterPatterns)
    operation_ids: FilterPatterns = field(default_factory=FilterPatterns)
    methods: List[str] = field(default_factory=list)
    include_deprecated: bool = False

    @classmethod
    def from_dict(cls, data):
        data = data or {}
        methods = [m.lower() for m in _string_list(data.get('methods'), 'filter.methods')]
        for method in methods:
            if not is_http_method(method):
                raise ConfigurationError(
                    f"Unknown HTTP method '{method}'", config_key='filter.methods'
                )
        return cls(
            paths=FilterPatterns.from_dict(data.get('paths'), 'filter.paths'),
            tags=FilterPatterns.from_dict(data.get('tags'), 'filter.tags'),
            operation_ids=FilterPatterns.from_dict(
                data.get('operationIds'), 'filter.operationIds'
            ),
            methods=methods,
            include_deprecated=bool(data.get('includeDeprecated', False)),
        )


@dataclass
class TransformOptions:
    max_depth: Optional[int] = None
    remove_examples: bool = False
    remove_descriptions: bool = False
    remove_summaries: bool = False
    include_servers: bool = True
    include_info: bool = True
    include_schemas: bool = True
    include_request_bodies: bool = True
    include_responses: bool = True

    @classmethod
    def from_dict(cls, data):
        data = data or {}
        max_depth = data.get('maxDepth')
        if max_depth is not None:
            try:
                max_depth = int(max_depth)
            except (TypeError, ValueError):
                raise ConfigurationError(
                    f"maxDepth must be an integer, got {max_depth!r}",
                    config_key='transform.maxDepth',
                ) from None
            if max_depth < 0:
                raise ConfigurationError(
                    "maxDepth must be >= 0", config_key='transform.maxDepth'
                )
        return cls(
            max_depth=max_depth,
            remove_examples=bool(data.get('removeExamples', False)),
            remove_descriptions=bool(data.get('removeDescriptions', False)),
            remove_summaries=bool(data.get('removeSummaries', False)),
            include_servers=bool(data.get('includeServers', True)),
            include_info=bool(data.get('includeInfo', True)),
            include_schemas=bool(data.get('includeSchemas', True)),
            include_request_bodies=bool(data.get('includeRequestBodies', True)),
            include_responses=bool(data.get('includeResponses', True)),
        )


@dataclass
class SourceConfig:
    path: str = ''
    type: str = 'local'
    content: Optional[str] = None


@dataclass
class OutputConfig:
    format: OutputFormat = DEFAULT_OUTPUT_FORMAT
    destination: Optional[str] = None


@dataclass
class ExtractorConfig:
    source: SourceConfig = field(default_factory=SourceConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    filter: Optional[FilterOptions] = None
    transform: Optional[TransformOptions] = None

    @classmethod
    def from_dict(cls, data):
        """
        Build a configuration from a nested dictionary.

        Args:
            data (dict): Parsed configuration file contents

        Returns:
            ExtractorConfig: The configuration; `filter` and `transform` stay
            None when their sections are absent
        """
        if not isinstance(data, dict):
            raise ConfigurationError("Configuration must be a mapping")

        source = data.get('source') or {}
        output = data.get('output') or {}
        source_type = source.get('type', 'local')
        if source_type not in ('local', 'memory'):
            raise ConfigurationError(
                f"Unsupported source type '{source_type}'", config_key='source.type'
            )

        return cls(
            source=SourceConfig(
                path=source.get('path', ''),
                type=source_type,
                content=source.get('content'),
            ),
            output=OutputConfig(
                format=OutputFormat.parse(output.get('format', DEFAULT_OUTPUT_FORMAT)),
                destination=output.get('destination'),
            ),
            filter=FilterOptions.from_dict(data['filter']) if 'filter' in data else None,
            transform=(
                TransformOptions.from_dict(data['transform']) if 'transform' in data else None
            ),
        )


def default_config():
    """Return a fresh configuration populated with the default options."""
    return ExtractorConfig(
        filter=FilterOptions(),
        transform=TransformOptions(),
    )
