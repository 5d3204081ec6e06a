"""
Helpers for locating and resolving `$ref` pointers in an OpenAPI document.
"""
import logging

logger = logging.getLogger(__name__)

COMPONENTS_PREFIX = '#/components/'


def find_refs(obj, refs=None):
    """
    Recursively find all $ref occurrences in an object.

    Refs are recorded, never followed.

    Args:
        obj: The object to traverse (dict, list, or scalar value)
        refs (set, optional): Set to add the found references to

    Returns:
        set: Every string value found under a `$ref` key
    """
    if refs is None:
        refs = set()

    if isinstance(obj, dict):
        for key, value in obj.items():
            if key == '$ref' and isinstance(value, str):
                refs.add(value)
            else:
                find_refs(value, refs)
    elif isinstance(obj, list):
        for item in obj:
            find_refs(item, refs)

    return refs


def get_component_name_from_ref(ref):
    """
    Split a component reference into its type and name.

    Args:
        ref (str): A reference such as '#/components/schemas/Common/Error'

    Returns:
        tuple: (component_type, component_name), or None if the reference
        does not point into the components section
    """
    if not isinstance(ref, str) or not ref.startswith(COMPONENTS_PREFIX):
        return None

    parts = ref[len(COMPONENTS_PREFIX):].split('/')
    if len(parts) < 2:
        logger.warning("Invalid component reference found: %s", ref)
        return None

    component_type = parts[0]
    # Names may contain slashes
    component_name = '/'.join(parts[1:])
    if not component_type or not component_name:
        return None

    return component_type, component_name


def component_ref(component_type, component_name):
    """Build the canonical reference string for a component."""
    return f"{COMPONENTS_PREFIX}{component_type}/{component_name}"


def resolve_ref(node, document):
    """
    Resolve a reference object against the document's components.

    Args:
        node: A reference object ({'$ref': ...}) or any other value
        document (dict): The OpenAPI document

    Returns:
        The referenced component, or `node` itself when it is not a
        component reference or the reference is dangling
    """
    if not isinstance(node, dict):
        return node
    ref = node.get('$ref')
    if not isinstance(ref, str) or not ref.startswith(COMPONENTS_PREFIX):
        return node

    current = document.get('components') if isinstance(document, dict) else None
    for part in ref[len(COMPONENTS_PREFIX):].split('/'):
        if not isinstance(current, dict) or part not in current:
            return node
        current = current[part]

    if current is None:
        return node
    return current
