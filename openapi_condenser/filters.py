"""
Path, tag, method and operationId filtering of an OpenAPI `paths` object.
"""
import logging

from wcmatch import glob

from .options import is_http_method

logger = logging.getLogger(__name__)

# Non-method keys carried over onto a surviving path item
PATH_ITEM_METADATA = ('summary', 'description', 'parameters', 'servers', '$ref')

# `*` stays within one segment, `**` spans segments, `{a,b}` alternates and
# dot-prefixed segments match like any other
GLOB_FLAGS = glob.GLOBSTAR | glob.BRACE | glob.DOTGLOB | glob.CASE


def matches_patterns(value, patterns):
    """Return True if `value` matches at least one glob pattern."""
    if not patterns:
        return False
    return glob.globmatch(value, list(patterns), flags=GLOB_FLAGS)


def matches_tags(operation_tags, tag_patterns):
    """
    Check whether an operation's tags pass the include/exclude patterns.

    Args:
        operation_tags (list): Tags declared on the operation
        tag_patterns (FilterPatterns): Include and exclude globs

    Returns:
        bool: True if the operation is kept
    """
    include = tag_patterns.include
    exclude = tag_patterns.exclude

    if not include and not exclude:
        return True

    tags = [tag for tag in (operation_tags or []) if isinstance(tag, str)]
    # An untagged operation can never satisfy an include filter
    if not tags:
        return not include

    matches_include = any(matches_patterns(tag, include) for tag in tags) if include else True
    matches_exclude = any(matches_patterns(tag, exclude) for tag in tags) if exclude else False

    return matches_include and not matches_exclude


def matches_operation_id(operation_id, id_patterns):
    if id_patterns.include:
        if not isinstance(operation_id, str) or not matches_patterns(operation_id, id_patterns.include):
            return False
    if id_patterns.exclude and isinstance(operation_id, str):
        if matches_patterns(operation_id, id_patterns.exclude):
            return False
    return True


def matches_operation(method, operation, filter_options):
    """
    Decide whether a single operation survives filtering.

    Args:
        method (str): Lower-case HTTP method the operation is declared under
        operation (dict): The operation object
        filter_options (FilterOptions): Active filter

    Returns:
        bool: True if the operation is kept
    """
    if filter_options.methods and method not in filter_options.methods:
        return False

    if operation.get('deprecated') and not filter_options.include_deprecated:
        return False

    if not matches_tags(operation.get('tags'), filter_options.tags):
        return False

    return matches_operation_id(operation.get('operationId'), filter_options.operation_ids)


def filter_methods(path_item, filter_options):
    """
    Keep only the operations of a path item that pass the filter.

    Args:
        path_item (dict): The path item object
        filter_options (FilterOptions): Active filter

    Returns:
        dict: A new path item holding only the accepted operations
    """
    filtered = {}
    for key, operation in path_item.items():
        if not is_http_method(key) or not isinstance(operation, dict):
            continue
        if matches_operation(key, operation, filter_options):
            filtered[key] = operation
    return filtered


def filter_paths(paths, filter_options):
    """
    Filter the paths object by path globs, then by operation.

    Args:
        paths (dict): The `paths` object of the document
        filter_options (FilterOptions): Active filter

    Returns:
        dict: A new paths object; paths left without operations are dropped
    """
    if not filter_options:
        return paths

    path_keys = list(paths.keys())

    if filter_options.paths.include:
        path_keys = [p for p in path_keys if matches_patterns(p, filter_options.paths.include)]
    if filter_options.paths.exclude:
        path_keys = [p for p in path_keys if not matches_patterns(p, filter_options.paths.exclude)]

    filtered_paths = {}
    for path in path_keys:
        path_item = paths[path]
        if not isinstance(path_item, dict):
            continue

        new_path_item = filter_methods(path_item, filter_options)
        if not new_path_item:
            continue

        for key in PATH_ITEM_METADATA:
            if key in path_item:
                new_path_item[key] = path_item[key]

        filtered_paths[path] = new_path_item

    logger.debug("Path filter kept %d of %d paths", len(filtered_paths), len(paths))
    return filtered_paths
