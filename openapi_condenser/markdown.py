"""
Concise Markdown rendering of an OpenAPI document, aimed at LLM prompts.
"""
from .options import HTTP_METHODS
from .refs import resolve_ref

CONTENT_TYPE_MAPPINGS = (
    ('json', 'json'),
    ('form-data', 'form-data'),
    ('x-www-form-urlencoded', 'form-urlencoded'),
    ('xml', 'xml'),
    ('text/plain', 'text'),
)

MAX_PROPERTY_NESTING = 8


def _one_line(text):
    return str(text).replace('\n', ' ')


def shorten_content_type(content_type):
    for key, short_name in CONTENT_TYPE_MAPPINGS:
        if key in content_type:
            return short_name
    return content_type


def format_schema_type(schema, document):
    """Short type label: a ref's name, `array<...>`, or the schema type."""
    if not isinstance(schema, dict):
        return 'any'
    if '$ref' in schema:
        return str(schema['$ref']).split('/')[-1] or 'any'
    if schema.get('type') == 'array' and schema.get('items'):
        return f"array<{format_schema_type(schema['items'], document)}>"
    return str(schema.get('type') or 'any')


def format_properties(properties, required, document, indent=0):
    lines = []
    indent_str = '  ' * indent
    required = required or []

    for prop_name, prop_schema in properties.items():
        resolved = resolve_ref(prop_schema, document)
        if not isinstance(resolved, dict):
            resolved = {}
        required_str = ' (required)' if prop_name in required else ''
        description = resolved.get('description')
        description_str = f" - {str(description).splitlines()[0]}" if description else ''
        type_str = format_schema_type(prop_schema, document)

        lines.append(f"{indent_str}* `{prop_name}`: `{type_str}`{required_str}{description_str}\n")

        nested = None
        if resolved.get('type') == 'object':
            nested = resolved
        elif resolved.get('type') == 'array' and resolved.get('items'):
            items = resolve_ref(resolved['items'], document)
            if isinstance(items, dict) and items.get('type') == 'object':
                nested = items

        # Bounded so self-referencing schemas terminate
        if nested is not None and isinstance(nested.get('properties'), dict) and indent < MAX_PROPERTY_NESTING:
            lines.append(format_properties(
                nested['properties'], nested.get('required'), document, indent + 1
            ))

    return ''.join(lines)


def format_endpoint(method, path, operation, document):
    output = f"### `{method.upper()}` {path}\n"

    description = _one_line(operation.get('summary') or operation.get('description') or '')
    if description:
        output += f"\n{description}\n"

    parameters = operation.get('parameters') or []
    if parameters:
        output += "\nP:\n"
        for param_ref in parameters:
            param = resolve_ref(param_ref, document)
            if not isinstance(param, dict):
                continue
            schema = param.get('schema')
            type_str = format_schema_type(schema, document) if schema else 'any'
            required = ' (required)' if param.get('required') else ''
            param_desc = f" - {_one_line(param['description'])}" if param.get('description') else ''
            output += f"* `{param.get('name')}` (*{param.get('in')}*): `{type_str}`{required}{param_desc}\n"

    if operation.get('requestBody'):
        request_body = resolve_ref(operation['requestBody'], document)
        content = request_body.get('content') if isinstance(request_body, dict) else None
        if content:
            output += "\nB:\n"
            for content_type, media_type in content.items():
                schema = media_type.get('schema') if isinstance(media_type, dict) else None
                output += f"* `{shorten_content_type(content_type)}` -> `{format_schema_type(schema, document)}`\n"

    responses = operation.get('responses')
    if isinstance(responses, dict):
        output += "\nR:\n"
        for code, response_ref in responses.items():
            response = resolve_ref(response_ref, document)
            if not isinstance(response, dict):
                response = {}
            parts = []
            for content_type, media_type in (response.get('content') or {}).items():
                schema = media_type.get('schema') if isinstance(media_type, dict) else None
                parts.append(
                    f"`{shorten_content_type(content_type)}` -> `{format_schema_type(schema, document)}`"
                )
            response_id = ', '.join(parts)
            if not response_id:
                response_id = _one_line(response.get('description') or 'No description')
            output += f"* `{code}`: {response_id}\n"

    return output


def format_schema(name, schema_ref, document):
    schema = resolve_ref(schema_ref, document)
    if not isinstance(schema, dict):
        schema = {}

    output = f"### S: {name}\n"
    if schema.get('description'):
        output += f"\n{_one_line(schema['description'])}\n"

    schema_type = schema.get('type')
    if schema_type == 'object' and isinstance(schema.get('properties'), dict):
        output += "\nProps:\n"
        output += format_properties(schema['properties'], schema.get('required'), document)
    elif schema_type == 'array' and schema.get('items'):
        output += f"\n**Type**: Array of `{format_schema_type(schema['items'], document)}`\n"
        items = resolve_ref(schema['items'], document)
        if isinstance(items, dict) and items.get('type') == 'object' and isinstance(items.get('properties'), dict):
            output += "\nItem Props:\n"
            output += format_properties(items['properties'], items.get('required'), document)
    elif schema_type:
        output += f"\n**Type**: `{schema_type}`\n"

    return output


def format_as_concise_text(document):
    """
    Format a document as concise Markdown.

    Sections: the info header, `## Endpoints` and `## Schemas`, separated
    by horizontal rules.
    """
    parts = []

    info = document.get('info')
    if isinstance(info, dict):
        info_block = f"# {info.get('title', '')}"
        if info.get('version'):
            info_block += f" (v{info['version']})"
        if info.get('description'):
            info_block += f"\n\n{str(info['description']).strip()}"
        parts.append(info_block)

    endpoints = []
    for path, path_item in (document.get('paths') or {}).items():
        if not isinstance(path_item, dict):
            continue
        for method in path_item:
            if method not in HTTP_METHODS:
                continue
            operation = path_item[method]
            if not isinstance(operation, dict) or 'responses' not in operation:
                continue
            endpoints.append(format_endpoint(method, path, operation, document))

    if endpoints:
        parts.append("## Endpoints\n\n" + '\n---\n\n'.join(endpoints))

    components = document.get('components') or {}
    schemas = [
        format_schema(name, schema_ref, document)
        for name, schema_ref in (components.get('schemas') or {}).items()
    ]
    if schemas:
        parts.append("## Schemas\n\n" + '\n---\n\n'.join(schemas))

    return '\n\n---\n\n'.join(parts).strip()
