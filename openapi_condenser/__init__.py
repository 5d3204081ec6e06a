"""
Filter, prune and condense OpenAPI 3 specifications.
"""
from .components import remove_unused_components
from .exceptions import (
    CondenserError,
    ConfigurationError,
    SpecParseError,
    UnsupportedVersionError,
)
from .extractor import ExtractorResult, extract_openapi
from .filters import filter_paths
from .options import (
    ExtractorConfig,
    FilterOptions,
    FilterPatterns,
    OutputFormat,
    TransformOptions,
    default_config,
)
from .pruner import transform_schema
from .refs import find_refs, get_component_name_from_ref, resolve_ref
from .stats import SpecStats, calculate_stats
from .transformer import transform_openapi

__version__ = "1.0.0"

__all__ = [
    "CondenserError",
    "ConfigurationError",
    "ExtractorConfig",
    "ExtractorResult",
    "FilterOptions",
    "FilterPatterns",
    "OutputFormat",
    "SpecParseError",
    "SpecStats",
    "TransformOptions",
    "UnsupportedVersionError",
    "calculate_stats",
    "default_config",
    "extract_openapi",
    "filter_paths",
    "find_refs",
    "get_component_name_from_ref",
    "remove_unused_components",
    "resolve_ref",
    "transform_openapi",
    "transform_schema",
]
