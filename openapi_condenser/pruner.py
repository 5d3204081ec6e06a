"""
Field stripping and structural removal for OpenAPI documents.
"""
from .options import HTTP_METHODS


def transform_schema(node, transform_options, current_depth=0):
    """
    Recursively strip configured fields and truncate deep subtrees.

    Dictionaries are modified in place; lists are rebuilt so that elements
    replaced by a truncation marker land in the result.

    Args:
        node: The object to traverse (dict, list, or scalar value)
        transform_options (TransformOptions): Active transform options
        current_depth (int): Depth of `node` below the starting point

    Returns:
        The transformed node
    """
    if not isinstance(node, (dict, list)):
        return node

    # References are opaque; the component they point to is pruned on its own
    if isinstance(node, dict) and '$ref' in node:
        return node

    max_depth = transform_options.max_depth
    if max_depth is not None and current_depth >= max_depth:
        return {'description': f"Truncated: Max depth of {max_depth} reached"}

    if isinstance(node, list):
        return [transform_schema(item, transform_options, current_depth + 1) for item in node]

    if transform_options.remove_examples:
        node.pop('example', None)
        node.pop('examples', None)
    if transform_options.remove_descriptions:
        node.pop('description', None)
    if transform_options.remove_summaries:
        node.pop('summary', None)

    for key, value in list(node.items()):
        if isinstance(value, (dict, list)):
            node[key] = transform_schema(value, transform_options, current_depth + 1)

    return node


def iter_operations(document):
    """Yield every operation object in the document's paths."""
    paths = document.get('paths')
    if not isinstance(paths, dict):
        return
    for path_item in paths.values():
        if not isinstance(path_item, dict):
            continue
        for method in HTTP_METHODS:
            operation = path_item.get(method)
            if isinstance(operation, dict):
                yield operation


def remove_structural_sections(document, transform_options):
    """
    Delete whole sections switched off in the transform options.

    Request bodies and responses are removed here, before unused
    components are collected, so they no longer keep components alive.
    """
    if transform_options.include_servers is False:
        document.pop('servers', None)
    if transform_options.include_info is False:
        document.pop('info', None)

    for operation in iter_operations(document):
        if transform_options.include_request_bodies is False:
            operation.pop('requestBody', None)
        if transform_options.include_responses is False:
            operation.pop('responses', None)

    return document


def remove_schemas_block(document, transform_options):
    """Drop `components.schemas` when schemas are excluded."""
    if transform_options.include_schemas is not False:
        return document

    components = document.get('components')
    if isinstance(components, dict):
        components.pop('schemas', None)
        if not components:
            del document['components']
    return document
