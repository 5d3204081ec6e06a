import pytest

from openapi_condenser.filters import (
    filter_methods,
    filter_paths,
    matches_operation,
    matches_patterns,
    matches_tags,
)
from openapi_condenser.options import FilterOptions, FilterPatterns


@pytest.mark.parametrize('value, pattern, expected', [
    ('/users', '/users', True),
    ('/users/{userId}', '/users', False),
    ('/users/{userId}', '/users/*', True),
    ('/users/{userId}/posts', '/users/*', False),
    ('/users/{userId}/posts', '/users/**', True),
    ('/users/.hidden/x', '/users/**', True),
    ('/internal/status', '/**/status', True),
    ('/items', '{/users,/items}', True),
    ('/orders', '{/users,/items}', False),
    ('/users/{userId}', '/users/{userId}', True),
    ('/.well-known/health', '/*/health', True),
    ('/v1/items', '/v[0-9]/items', True),
    ('/vx/items', '/v[!0-9]/items', True),
    ('/v1/items', '/v?/items', True),
    ('items', 'item*', True),
    ('Items', 'item*', False),
])
def test_glob_semantics(value, pattern, expected):
    assert matches_patterns(value, [pattern]) is expected


def test_tags_without_patterns_always_match():
    assert matches_tags(['a'], FilterPatterns())
    assert matches_tags(None, FilterPatterns())


def test_untagged_operation_rejected_by_include_only():
    assert not matches_tags([], FilterPatterns(include=['users']))
    assert matches_tags([], FilterPatterns(exclude=['users']))


def test_exclude_wins_over_include():
    patterns = FilterPatterns(include=['users'], exclude=['users'])
    assert not matches_tags(['users'], patterns)
    patterns = FilterPatterns(include=['user*'], exclude=['*admin'])
    assert matches_tags(['users'], patterns)
    assert not matches_tags(['users', 'useradmin'], patterns)


def test_method_allow_list():
    options = FilterOptions(methods=['get'])
    assert matches_operation('get', {}, options)
    assert not matches_operation('post', {}, options)


def test_deprecated_default_and_opt_in():
    operation = {'deprecated': True}
    assert not matches_operation('get', operation, FilterOptions())
    assert matches_operation('get', operation, FilterOptions(include_deprecated=True))


def test_operation_id_patterns():
    options = FilterOptions(operation_ids=FilterPatterns(include=['list*'], exclude=['listSecret*']))
    assert matches_operation('get', {'operationId': 'listUsers'}, options)
    assert not matches_operation('get', {'operationId': 'listSecretKeys'}, options)
    assert not matches_operation('get', {'operationId': 'createUser'}, options)
    assert not matches_operation('get', {}, options)
    assert matches_operation('get', {}, FilterOptions(operation_ids=FilterPatterns(exclude=['x'])))


def test_filter_methods_drops_metadata_and_rejected_operations():
    path_item = {
        'summary': 'Users',
        'get': {'responses': {}},
        'post': {'responses': {}},
        'x-internal': True,
    }
    assert filter_methods(path_item, FilterOptions(methods=['post'])) == {'post': {'responses': {}}}


def test_include_then_exclude_paths(sample_spec):
    options = FilterOptions(
        paths=FilterPatterns(include=['/users', '/users/**', '/internal/**'], exclude=['/users/*']),
        include_deprecated=True,
    )
    result = filter_paths(sample_spec['paths'], options)
    assert list(result) == ['/users', '/internal/status']


def test_path_without_surviving_operations_is_dropped(sample_spec):
    result = filter_paths(sample_spec['paths'], FilterOptions(methods=['post']))
    assert list(result) == ['/items']


def test_path_metadata_is_reattached():
    paths = {
        '/pets': {
            'summary': 'Pets',
            'description': 'All pets',
            'parameters': [{'name': 'x', 'in': 'header'}],
            'servers': [{'url': 'https://pets'}],
            'x-vendor': 'dropped',
            'get': {'responses': {}},
            'delete': {'deprecated': True, 'responses': {}},
        },
    }
    result = filter_paths(paths, FilterOptions())
    assert result['/pets'] == {
        'get': {'responses': {}},
        'summary': 'Pets',
        'description': 'All pets',
        'parameters': [{'name': 'x', 'in': 'header'}],
        'servers': [{'url': 'https://pets'}],
    }


def test_filter_never_adds_operations(sample_spec):
    before = sum(len(item) for item in sample_spec['paths'].values())
    for options in (
        FilterOptions(),
        FilterOptions(include_deprecated=True),
        FilterOptions(tags=FilterPatterns(exclude=['*'])),
        FilterOptions(methods=['delete']),
    ):
        result = filter_paths(sample_spec['paths'], options)
        assert sum(len(item) for item in result.values()) <= before
