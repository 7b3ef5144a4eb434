"""Tests for CLI configuration module."""

import json

from cli.config import Config


def test_config_creates_default_file(tmp_path, monkeypatch):
    """Test that config file is created with defaults if missing."""
    monkeypatch.setitem(Config.DEFAULT_CONFIG, 'identity', None)
    config_path = tmp_path / '.file-registry' / 'config.json'
    config = Config(config_path)

    assert config_path.exists()
    assert config.data['identity'] is None
    assert 'database_path' in config.data


def test_config_loads_existing_file(tmp_path):
    """Test loading existing config file."""
    config_path = tmp_path / '.file-registry' / 'config.json'
    config_path.parent.mkdir(parents=True)

    with open(config_path, 'w') as f:
        json.dump({'identity': 'carol', 'database_path': '/data/registry.db'}, f)

    config = Config(config_path)

    assert config.get_identity() == 'carol'
    assert config.get_database_path() == '/data/registry.db'


def test_config_identity_defaults_to_login_name(tmp_path, monkeypatch):
    monkeypatch.setitem(Config.DEFAULT_CONFIG, 'identity', None)
    monkeypatch.setattr('cli.config.default_identity', lambda: 'login-user')

    config = Config(tmp_path / 'config.json')

    assert config.get_identity() == 'login-user'


def test_config_save_and_set_identity(temp_config):
    """Test saving and retrieving identity."""
    temp_config.set_identity('bob')

    assert temp_config.get_identity() == 'bob'

    with open(temp_config.config_path, 'r') as f:
        data = json.load(f)
    assert data['identity'] == 'bob'


def test_config_handles_corrupted_file(tmp_path):
    """Test recovery from corrupted config file."""
    config_path = tmp_path / '.file-registry' / 'config.json'
    config_path.parent.mkdir(parents=True)

    with open(config_path, 'w') as f:
        f.write('{ invalid json content')

    config = Config(config_path)
    assert config.data == Config.DEFAULT_CONFIG

    backup_path = config_path.with_suffix('.json.bak')
    assert backup_path.exists()
