from config import Config


def test_from_dict_reads_backend_location():
    config = Config.from_dict({
        'ST_PROTOCOL': 'https',
        'ST_HOST': 'tree.example.com',
        'ST_PORT': '443',
        'ST_CLIENT_ID': 'abc',
    })

    assert config.base_url == 'https://tree.example.com:443/smart_tree'
    assert config.client_id == 'abc'
    assert config.log_level == 'INFO'
    assert config.metrics_namespace is None


def test_from_dict_optional_settings():
    config = Config.from_dict({
        'LOG_LEVEL': 'debug',
        'ST_METRICS_NAMESPACE': 'SmartTree',
    })

    assert config.log_level == 'DEBUG'
    assert config.metrics_namespace == 'SmartTree'


def test_missing_location_yields_malformed_url():
    config = Config.from_dict({})
    assert config.base_url == '://:/smart_tree'


def test_from_env(monkeypatch):
    monkeypatch.setenv('ST_PROTOCOL', 'http')
    monkeypatch.setenv('ST_HOST', 'localhost')
    monkeypatch.setenv('ST_PORT', '9000')
    monkeypatch.setenv('ST_CLIENT_ID', 'env-client')

    config = Config.from_env()

    assert config.base_url == 'http://localhost:9000/smart_tree'
    assert config.client_id == 'env-client'
