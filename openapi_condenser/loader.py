"""
Loading OpenAPI documents from files or in-memory text.
"""
import json
import logging
import os

import yaml

from .exceptions import SpecParseError, UnsupportedVersionError

logger = logging.getLogger(__name__)


def get_extension(source):
    """Return the lower-case extension of a path or URL, or ''."""
    filename = source.split('?')[0].split('/')[-1]
    if not filename:
        return ''
    last_dot = filename.rfind('.')
    # Dot-files like '.env' have no extension
    if last_dot < 1:
        return ''
    return filename[last_dot:].lower()


def _parse_json(content):
    return json.loads(content)


def _parse_yaml(content):
    return yaml.safe_load(content)


def parse_content(content, source='', content_type=None, warnings=None):
    """
    Parse JSON or YAML text into a document.

    The content type wins, then the file extension; otherwise JSON is tried
    first with YAML as a fallback.

    Args:
        content (str): Raw text
        source (str): File path or URL, used for the extension and messages
        content_type (str, optional): A MIME type such as 'application/json'
        warnings (list, optional): Receives non-fatal notices

    Returns:
        dict: The parsed document

    Raises:
        SpecParseError: If the text is neither JSON nor YAML, or is not a mapping
    """
    try:
        if content_type and 'json' in content_type:
            data = _parse_json(content)
        elif content_type and ('yaml' in content_type or 'yml' in content_type):
            data = _parse_yaml(content)
        elif get_extension(source) == '.json':
            data = _parse_json(content)
        elif get_extension(source) in ('.yaml', '.yml'):
            data = _parse_yaml(content)
        else:
            try:
                data = _parse_json(content)
            except ValueError:
                data = _parse_yaml(content)
                if warnings is not None:
                    warnings.append(f"'{source or 'input'}' is not JSON; parsed as YAML")
    except (ValueError, yaml.YAMLError) as e:
        logger.debug("Parse failure for %s: %s", source, e)
        raise SpecParseError(
            f"Failed to parse content from '{source}'. Not valid JSON or YAML.",
            source=source,
        ) from e

    if not isinstance(data, dict):
        raise SpecParseError(
            f"Failed to parse content from '{source}'. Document is not a mapping.",
            source=source,
        )
    return data


def check_version(document):
    """
    Ensure the document declares OpenAPI 3.x.

    Raises:
        UnsupportedVersionError: If `openapi` is missing or not 3.x
    """
    version = document.get('openapi')
    if version is None:
        if 'swagger' in document:
            raise UnsupportedVersionError(
                "Swagger 2.0 documents are not supported", version=document['swagger']
            )
        raise UnsupportedVersionError("Missing 'openapi' version field")
    if not str(version).startswith('3'):
        raise UnsupportedVersionError(
            f"Unsupported OpenAPI version '{version}'. Only 3.x is supported.",
            version=str(version),
        )
    return str(version)


def load_from_string(content, source='', content_type=None, warnings=None):
    """Parse and version-check an in-memory document."""
    document = parse_content(content, source, content_type, warnings)
    check_version(document)
    return document


def load_openapi_spec(file_path, warnings=None):
    """Load an OpenAPI specification from a file."""
    if not os.path.isfile(file_path):
        raise FileNotFoundError(f"Spec file not found: {file_path}")
    try:
        with open(file_path, 'r', encoding='utf-8') as file:
            content = file.read()
    except UnicodeDecodeError as e:
        raise SpecParseError(
            f"Failed to read '{file_path}'. Not valid UTF-8 text.", source=file_path
        ) from e
    return load_from_string(content, file_path, warnings=warnings)
