"""
Serializers for transformed documents.
"""
import json
import re

import xmltodict
import yaml

from .exceptions import ConfigurationError
from .markdown import format_as_concise_text
from .options import OutputFormat

_XML_NAME = re.compile(r'^[A-Za-z_][A-Za-z0-9_.-]*$')


def format_as_json(document):
    return json.dumps(document, indent=2, ensure_ascii=False, default=str)


def format_as_yaml(document):
    return yaml.dump(document, default_flow_style=False, sort_keys=False, allow_unicode=True)


def _xml_text(value):
    if value is None:
        return None
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


def _is_element_name(key):
    return bool(_XML_NAME.match(key)) and not key.lower().startswith('xml') and key != 'entry'


def _to_xml_tree(value):
    """
    Reshape a document into the dict layout `xmltodict.unparse` expects.

    Keys that are not valid element names are gathered under `entry` with
    the original key as an attribute; list items become repeated `item`.
    """
    if isinstance(value, dict):
        tree = {}
        for key, child_value in value.items():
            key = str(key)
            if _is_element_name(key):
                tree[key] = _to_xml_tree(child_value)
                continue
            child = _to_xml_tree(child_value)
            if isinstance(child, dict):
                entry = {'@key': key, **child}
            elif child is None:
                entry = {'@key': key}
            else:
                entry = {'@key': key, '#text': child}
            tree.setdefault('entry', []).append(entry)
        return tree
    if isinstance(value, list):
        return {'item': [_to_xml_tree(item) for item in value]}
    return _xml_text(value)


def format_as_xml(document):
    """
    Format a document as XML under an `<openapi>` root.

    Keys that are not valid element names (paths, `$ref`, status codes)
    become `<entry key="...">` elements; list items become `<item>`.
    """
    return xmltodict.unparse(
        {'openapi': _to_xml_tree(document)},
        full_document=False,
        pretty=True,
        indent='  ',
    )


FORMATTERS = {
    OutputFormat.JSON: format_as_json,
    OutputFormat.YAML: format_as_yaml,
    OutputFormat.XML: format_as_xml,
    OutputFormat.MARKDOWN: format_as_concise_text,
}


def get_formatter(output_format):
    """
    Look up the serializer for an output format.

    Raises:
        ConfigurationError: If the format is unknown
    """
    formatter = FORMATTERS.get(OutputFormat.parse(output_format))
    if formatter is None:
        raise ConfigurationError(f"Unsupported output format: {output_format}")
    return formatter
