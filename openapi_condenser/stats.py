"""
Size and complexity statistics for OpenAPI documents.
"""
import json
import math
from dataclasses import asdict, dataclass, replace

from .options import is_http_method

# Rough approximation: one token is about four characters of English text
CHARS_PER_TOKEN = 4


@dataclass
class SpecStats:
    paths: int = 0
    operations: int = 0
    schemas: int = 0
    char_count: int = 0
    line_count: int = 0
    token_count: int = 0

    def to_dict(self):
        return asdict(self)


def calculate_text_stats(text):
    """
    Compute the size part of the statistics for a serialized document.

    Returns:
        tuple: (char_count, line_count, token_count)
    """
    char_count = len(text)
    line_count = text.count('\n') + 1
    token_count = math.ceil(char_count / CHARS_PER_TOKEN)
    return char_count, line_count, token_count


def calculate_stats(document):
    """
    Compute path, operation and schema counts plus size estimates.

    Sizes are measured on the document pretty-printed as JSON with a
    two-space indent.

    Args:
        document (dict): The OpenAPI document

    Returns:
        SpecStats: All zero when `document` is not a mapping
    """
    if not isinstance(document, dict):
        return SpecStats()

    paths = document.get('paths')
    if not isinstance(paths, dict):
        paths = {}

    operations = 0
    for path_item in paths.values():
        if isinstance(path_item, dict):
            operations += sum(1 for key in path_item if is_http_method(key))

    components = document.get('components')
    schemas = components.get('schemas') if isinstance(components, dict) else None
    schema_count = len(schemas) if isinstance(schemas, dict) else 0

    pretty = json.dumps(document, indent=2, ensure_ascii=False, default=str)
    char_count, line_count, token_count = calculate_text_stats(pretty)

    return SpecStats(
        paths=len(paths),
        operations=operations,
        schemas=schema_count,
        char_count=char_count,
        line_count=line_count,
        token_count=token_count,
    )


def calculate_output_stats(document, output):
    """
    Statistics for a transformed document as it is delivered.

    Counts come from `document`; sizes from the serialized `output`.
    """
    char_count, line_count, token_count = calculate_text_stats(output)
    return replace(
        calculate_stats(document),
        char_count=char_count,
        line_count=line_count,
        token_count=token_count,
    )
