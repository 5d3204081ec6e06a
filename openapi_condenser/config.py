"""
Configuration files and command-line overrides.
"""
import copy
import json
import os

import yaml

from .exceptions import ConfigurationError
from .options import (
    ExtractorConfig,
    FilterOptions,
    FilterPatterns,
    OutputFormat,
    TransformOptions,
    is_http_method,
)

DEFAULT_CONFIG_PATH = 'openapi-condenser.config.yaml'


def load_config(config_path=DEFAULT_CONFIG_PATH):
    """
    Load an extractor configuration from a JSON or YAML file.

    Raises:
        ConfigurationError: If the file is missing or cannot be parsed
    """
    if not os.path.isfile(config_path):
        raise ConfigurationError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, 'r', encoding='utf-8') as file:
            if config_path.endswith('.json'):
                data = json.load(file)
            else:
                data = yaml.safe_load(file)
    except (ValueError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Failed to load configuration: {e}") from e

    return ExtractorConfig.from_dict(data or {})


def _split(value):
    return [part.strip() for part in value.split(',') if part.strip()]


def merge_with_command_line_args(config, args):
    """
    Override a configuration with parsed command-line arguments.

    Args:
        config (ExtractorConfig): Base configuration; left untouched
        args (argparse.Namespace): Parsed CLI arguments

    Returns:
        ExtractorConfig: A new, merged configuration
    """
    result = copy.deepcopy(config)

    if getattr(args, 'source', None):
        result.source.path = args.source
        result.source.type = 'local'
    if getattr(args, 'format', None):
        result.output.format = OutputFormat.parse(args.format)
    if getattr(args, 'output', None):
        result.output.destination = args.output

    if result.filter is None:
        result.filter = FilterOptions()
    filter_options = result.filter

    if getattr(args, 'include_paths', None):
        filter_options.paths = FilterPatterns(_split(args.include_paths), filter_options.paths.exclude)
    if getattr(args, 'exclude_paths', None):
        filter_options.paths = FilterPatterns(filter_options.paths.include, _split(args.exclude_paths))
    if getattr(args, 'include_tags', None):
        filter_options.tags = FilterPatterns(_split(args.include_tags), filter_options.tags.exclude)
    if getattr(args, 'exclude_tags', None):
        filter_options.tags = FilterPatterns(filter_options.tags.include, _split(args.exclude_tags))
    if getattr(args, 'methods', None):
        methods = [m.lower() for m in _split(args.methods)]
        for method in methods:
            if not is_http_method(method):
                raise ConfigurationError(f"Unknown HTTP method '{method}'", config_key='methods')
        filter_options.methods = methods
    if getattr(args, 'include_deprecated', False):
        filter_options.include_deprecated = True

    overrides = {
        'include_schemas': not getattr(args, 'exclude_schemas', False),
        'include_request_bodies': not getattr(args, 'exclude_request_bodies', False),
        'include_responses': not getattr(args, 'exclude_responses', False),
        'remove_examples': getattr(args, 'remove_examples', False),
        'remove_descriptions': getattr(args, 'remove_descriptions', False),
        'remove_summaries': getattr(args, 'remove_summaries', False),
    }
    max_depth = getattr(args, 'max_depth', None)
    if max_depth is not None and max_depth < 0:
        raise ConfigurationError("--max-depth must be >= 0", config_key='max_depth')
    # Flags only ever switch an option away from its default
    changed = {
        key: value for key, value in overrides.items()
        if value != getattr(TransformOptions(), key)
    }
    if changed or max_depth is not None:
        if result.transform is None:
            result.transform = TransformOptions()
        for key, value in changed.items():
            setattr(result.transform, key, value)
        if max_depth is not None:
            result.transform.max_depth = max_depth

    return result
