"""
Shared pytest fixtures.
"""
import copy

import pytest

SAMPLE_SPEC = {
    'openapi': '3.0.0',
    'info': {
        'title': 'Sample API',
        'version': '1.0.0',
        'description': 'A sample API for testing.',
    },
    'servers': [
        {'url': 'https://api.example.com/v1', 'description': 'Production server'},
    ],
    'tags': [
        {'name': 'users', 'description': 'User operations'},
        {'name': 'items', 'description': 'Item operations'},
        {'name': 'internal', 'description': 'Internal stuff'},
    ],
    'paths': {
        '/users': {
            'get': {
                'summary': 'Get all users',
                'tags': ['users'],
                'description': 'Returns a list of all users.',
                'responses': {
                    '200': {
                        'description': 'A list of users.',
                        'content': {
                            'application/json': {
                                'schema': {
                                    'type': 'array',
                                    'items': {'$ref': '#/components/schemas/User'},
                                },
                                'example': [{'id': '1', 'name': 'John Doe'}],
                            },
                        },
                    },
                },
            },
        },
        '/users/{userId}': {
            'get': {
                'summary': 'Get a user by ID',
                'tags': ['users'],
                'description': 'Returns a single user.',
                'parameters': [
                    {'name': 'userId', 'in': 'path', 'required': True, 'schema': {'type': 'string'}},
                ],
                'responses': {
                    '200': {
                        'description': 'A single user.',
                        'content': {
                            'application/json': {
                                'schema': {'$ref': '#/components/schemas/User'},
                            },
                        },
                    },
                },
            },
        },
        '/items': {
            'post': {
                'summary': 'Create an item',
                'tags': ['items'],
                'description': 'Creates a new item.',
                'requestBody': {
                    'content': {
                        'application/json': {
                            'schema': {'$ref': '#/components/schemas/Item'},
                        },
                    },
                },
                'responses': {
                    '201': {'description': 'Item created'},
                },
            },
        },
        '/internal/status': {
            'get': {
                'summary': 'Get internal status',
                'tags': ['internal'],
                'deprecated': True,
                'description': 'This is a deprecated endpoint.',
                'responses': {
                    '200': {'description': 'OK'},
                },
            },
        },
    },
    'components': {
        'schemas': {
            'User': {
                'type': 'object',
                'properties': {
                    'id': {'type': 'string', 'description': 'User ID', 'example': 'user-123'},
                    'name': {'type': 'string', 'description': 'User name', 'example': 'Jane Doe'},
                },
            },
            'Item': {
                'type': 'object',
                'properties': {
                    'sku': {'type': 'string'},
                    'price': {'type': 'number'},
                },
            },
            'UnusedSchema': {
                'type': 'object',
                'properties': {
                    'foo': {'type': 'string'},
                },
            },
        },
    },
}


@pytest.fixture
def sample_spec():
    """A fresh copy of the four-path sample specification."""
    return copy.deepcopy(SAMPLE_SPEC)


@pytest.fixture
def chained_spec():
    """A document where A -> B -> C through nested properties, plus unrelated D."""
    return {
        'openapi': '3.0.3',
        'info': {'title': 'Chain', 'version': '1'},
        'paths': {
            '/a': {
                'get': {
                    'tags': ['a'],
                    'responses': {
                        '200': {
                            'description': 'ok',
                            'content': {'application/json': {'schema': {'$ref': '#/components/schemas/A'}}},
                        },
                    },
                },
            },
            '/d': {
                'get': {
                    'tags': ['d'],
                    'parameters': [{'$ref': '#/components/parameters/Limit'}],
                    'responses': {'200': {'$ref': '#/components/responses/DResponse'}},
                },
            },
        },
        'components': {
            'schemas': {
                'A': {'type': 'object', 'properties': {'b': {'$ref': '#/components/schemas/B'}}},
                'B': {
                    'type': 'object',
                    'properties': {
                        'wrapper': {
                            'type': 'object',
                            'properties': {
                                'list': {'type': 'array', 'items': {'$ref': '#/components/schemas/C'}},
                            },
                        },
                    },
                },
                'C': {'type': 'string'},
                'D': {'type': 'object', 'properties': {'c': {'$ref': '#/components/schemas/C'}}},
            },
            'parameters': {
                'Limit': {'name': 'limit', 'in': 'query', 'schema': {'type': 'integer'}},
            },
            'responses': {
                'DResponse': {
                    'description': 'd',
                    'content': {'application/json': {'schema': {'$ref': '#/components/schemas/D'}}},
                },
            },
        },
    }
