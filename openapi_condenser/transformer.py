"""
The filter/transform/prune pipeline.
"""
import json
import logging

from .components import remove_unused_components
from .exceptions import SpecParseError
from .filters import filter_paths
from .pruner import remove_schemas_block, remove_structural_sections, transform_schema

logger = logging.getLogger(__name__)


def clone_document(document):
    """
    Deep-copy a document through JSON so no two nodes share an object.

    YAML anchors load as shared objects; pruning edits nodes in place and
    must only touch the occurrence it visits.

    Raises:
        SpecParseError: If the document contains itself (recursive alias)
            or has keys JSON cannot represent
    """
    try:
        return json.loads(json.dumps(document, default=str))
    except (TypeError, ValueError) as e:
        raise SpecParseError(f"Document cannot be copied: {e}") from e


def transform_openapi(document, filter_options=None, transform_options=None):
    """
    Apply filtering and transformations to an entire OpenAPI document.

    Stages run in a fixed order: path filtering, structural removals,
    field pruning, unused-component removal and finally the optional
    removal of the schemas block.

    Args:
        document (dict): The OpenAPI document; never modified
        filter_options (FilterOptions, optional): Path/tag/method filter
        transform_options (TransformOptions, optional): Pruning options

    Returns:
        dict: The transformed copy of the document
    """
    transformed = clone_document(document)

    # 1. Path, method and tag filtering
    if filter_options and isinstance(transformed.get('paths'), dict):
        transformed['paths'] = filter_paths(transformed['paths'], filter_options)

    if transform_options:
        # 2. Structural removals
        remove_structural_sections(transformed, transform_options)

        # 3. Field pruning over the whole tree
        transformed = transform_schema(transformed, transform_options)

    # 4. Components nothing points to any more
    if isinstance(transformed, dict):
        transformed = remove_unused_components(transformed)

    # 5. Schemas explicitly excluded
    if transform_options and isinstance(transformed, dict):
        remove_schemas_block(transformed, transform_options)

    return transformed
