"""
Removal of components that are no longer referenced.
"""
import logging
from collections import deque

from .refs import component_ref, find_refs, get_component_name_from_ref

logger = logging.getLogger(__name__)

# Top-level sections that may reference components
REFERENCE_ROOTS = ('paths', 'tags', 'security', 'info', 'servers', 'webhooks', 'externalDocs')


def collect_used_refs(document):
    """
    Collect every reference reachable from the document roots.

    References inside components are followed breadth-first, each one
    processed exactly once.

    Args:
        document (dict): The OpenAPI document

    Returns:
        set: All reachable reference strings
    """
    components = document.get('components')
    if not isinstance(components, dict):
        components = {}

    initial_refs = set()
    for root in REFERENCE_ROOTS:
        if document.get(root):
            find_refs(document[root], initial_refs)

    used_refs = set(initial_refs)
    queue = deque(initial_refs)

    while queue:
        ref = queue.popleft()
        parsed = get_component_name_from_ref(ref)
        if parsed is None:
            continue

        component_type, component_name = parsed
        group = components.get(component_type)
        if not isinstance(group, dict) or component_name not in group:
            continue

        for sub_ref in find_refs(group[component_name]):
            if sub_ref not in used_refs:
                used_refs.add(sub_ref)
                queue.append(sub_ref)

    return used_refs


def remove_unused_components(document):
    """
    Remove all components that are not referenced, directly or
    transitively, from the non-component parts of the document.

    Args:
        document (dict): The OpenAPI document, modified in place

    Returns:
        dict: The document; `components` is deleted when nothing survives
    """
    components = document.get('components')
    if components is None:
        return document
    if not isinstance(components, dict):
        del document['components']
        return document

    used_refs = collect_used_refs(document)

    new_components = {}
    removed = 0
    for component_type, group in components.items():
        if not isinstance(group, dict):
            continue
        kept = {
            name: value for name, value in group.items()
            if component_ref(component_type, name) in used_refs
        }
        removed += len(group) - len(kept)
        if kept:
            new_components[component_type] = kept

    logger.debug(
        "Kept %d components, removed %d",
        sum(len(group) for group in new_components.values()),
        removed,
    )

    if new_components:
        document['components'] = new_components
    else:
        del document['components']

    return document
