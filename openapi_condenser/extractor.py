"""
End-to-end extraction: load, transform, serialize and report statistics.
"""
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .exceptions import ConfigurationError, CondenserError
from .formatters import get_formatter
from .loader import load_from_string, load_openapi_spec
from .stats import SpecStats, calculate_output_stats, calculate_stats
from .transformer import transform_openapi

logger = logging.getLogger(__name__)


@dataclass
class ExtractorResult:
    success: bool
    data: Optional[str] = None
    document: Optional[Dict[str, Any]] = None
    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    stats: Optional[Dict[str, SpecStats]] = None


def load_source(source, warnings):
    if source.type == 'memory':
        if source.content is None:
            raise ConfigurationError("Memory source requires content", config_key='source.content')
        return load_from_string(source.content, source.path, warnings=warnings)
    if not source.path:
        raise ConfigurationError("No source path given", config_key='source.path')
    return load_openapi_spec(source.path, warnings=warnings)


def write_output(destination, output):
    parent = os.path.dirname(destination)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(destination, 'w', encoding='utf-8') as file:
        file.write(output)


def extract_openapi(config):
    """
    Run the whole extraction described by a configuration.

    Errors are never raised to the caller; they are reported in the
    result with `success` set to False.

    Args:
        config (ExtractorConfig): Source, output, filter and transform settings

    Returns:
        ExtractorResult: The serialized output plus before/after statistics
    """
    warnings = []
    try:
        document = load_source(config.source, warnings)
        before = calculate_stats(document)

        transformed = transform_openapi(document, config.filter, config.transform)

        formatter = get_formatter(config.output.format)
        output = formatter(transformed)
        after = calculate_output_stats(transformed, output)

        if config.output.destination:
            write_output(config.output.destination, output)
            logger.info("Output written to %s", config.output.destination)

        if config.filter and before.paths and not after.paths:
            warnings.append("Filters removed every path from the document")
    except CondenserError as e:
        logger.debug("Extraction failed", exc_info=True)
        return ExtractorResult(success=False, errors=[f"Error extracting OpenAPI: {e.message}"])
    except Exception as e:
        logger.debug("Extraction failed", exc_info=True)
        return ExtractorResult(success=False, errors=[f"Error extracting OpenAPI: {e}"])

    for warning in warnings:
        logger.warning(warning)

    return ExtractorResult(
        success=True,
        data=output,
        document=transformed,
        warnings=warnings,
        stats={'before': before, 'after': after},
    )
