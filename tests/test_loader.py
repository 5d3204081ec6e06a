import json

import pytest
import yaml

from openapi_condenser.exceptions import SpecParseError, UnsupportedVersionError
from openapi_condenser.loader import (
    check_version,
    get_extension,
    load_from_string,
    load_openapi_spec,
    parse_content,
)


@pytest.mark.parametrize('source, expected', [
    ('spec.json', '.json'),
    ('https://example.com/api/spec.YAML?token=1', '.yaml'),
    ('/tmp/.env', ''),
    ('noext', ''),
    ('https://example.com/', ''),
])
def test_get_extension(source, expected):
    assert get_extension(source) == expected


def test_parse_by_content_type_and_extension(sample_spec):
    as_yaml = yaml.dump(sample_spec)
    as_json = json.dumps(sample_spec)
    assert parse_content(as_yaml, 'x', content_type='application/x-yaml') == sample_spec
    assert parse_content(as_json, 'x', content_type='application/json') == sample_spec
    assert parse_content(as_yaml, 'spec.yml') == sample_spec
    assert parse_content(as_json, 'spec.json') == sample_spec


def test_fallback_to_yaml_records_warning(sample_spec):
    warnings = []
    assert parse_content(yaml.dump(sample_spec), 'spec', warnings=warnings) == sample_spec
    assert len(warnings) == 1


def test_fallback_json_has_no_warning(sample_spec):
    warnings = []
    parse_content(json.dumps(sample_spec), '', warnings=warnings)
    assert warnings == []


def test_invalid_text_raises_parse_error():
    with pytest.raises(SpecParseError) as excinfo:
        parse_content('{"openapi": ', 'broken.json')
    assert excinfo.value.code == 'parse_error'
    assert "Not valid JSON or YAML" in excinfo.value.message


def test_scalar_document_is_rejected():
    with pytest.raises(SpecParseError):
        parse_content('just words', '')


def test_version_check():
    assert check_version({'openapi': '3.1.0'}) == '3.1.0'
    with pytest.raises(UnsupportedVersionError):
        check_version({'swagger': '2.0'})
    with pytest.raises(UnsupportedVersionError):
        check_version({'openapi': '2.0'})
    with pytest.raises(UnsupportedVersionError):
        check_version({'info': {}})


def test_load_from_string_checks_version():
    with pytest.raises(UnsupportedVersionError):
        load_from_string('{"swagger": "2.0", "paths": {}}', 'spec.json')


def test_load_openapi_spec_from_file(tmp_path, sample_spec):
    path = tmp_path / 'spec.yaml'
    path.write_text(yaml.dump(sample_spec), encoding='utf-8')
    assert load_openapi_spec(str(path)) == sample_spec


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_openapi_spec(str(tmp_path / 'missing.json'))


def test_load_non_utf8_file(tmp_path):
    path = tmp_path / 'spec.json'
    path.write_bytes(b'{"openapi": "3.0.0", "info": {"title": "\xff\xfe"}}')
    with pytest.raises(SpecParseError, match='UTF-8'):
        load_openapi_spec(str(path))
