"""Tests for configuration loading."""
import json

import pytest
import yaml

from autogloss.core.exceptions import ConfigurationError
from autogloss.utils.config_manager import AppConfig, ConfigManager


def test_defaults(temp_dir):
    manager = ConfigManager(temp_dir / 'absent.yaml', use_env=False)
    assert manager.config == AppConfig()
    assert manager.get('glossary.source_dir') == 'public'
    assert not (temp_dir / 'absent.yaml').exists()


def test_load_yaml(temp_dir):
    path = temp_dir / 'autogloss.yaml'
    path.write_text(yaml.safe_dump({
        'glossary': {'source_dir': 'site/public', 'max_workers': 4},
        'messages': {'path': 'messages'},
    }), encoding='utf-8')
    config = ConfigManager(path, use_env=False).config
    assert config.glossary.source_dir == 'site/public'
    assert config.glossary.max_workers == 4
    assert config.glossary.default_lang == 'en'
    assert config.messages.path == 'messages'


def test_load_json(temp_dir):
    path = temp_dir / 'autogloss.json'
    path.write_text(json.dumps({'logging': {'log_level': 'DEBUG'}}), encoding='utf-8')
    assert ConfigManager(path, use_env=False).config.logging.log_level == 'DEBUG'


def test_env_overrides(temp_dir, monkeypatch):
    monkeypatch.setenv('GLOSSARY_DIR', '/srv/glossaries')
    monkeypatch.setenv('GLOSSARY_LANG', 'fr')
    monkeypatch.setenv('MESSAGES_PATH', '/srv/messages.yaml')
    config = ConfigManager(temp_dir / 'absent.yaml').config
    assert config.glossary.source_dir == '/srv/glossaries'
    assert config.glossary.default_lang == 'fr'
    assert config.messages.path == '/srv/messages.yaml'
    assert config.logging.log_level == 'WARNING'


@pytest.mark.parametrize('data', [
    {'engine': {'name': 'x'}},
    {'glossary': {'unknown': 1}},
])
def test_unknown_settings(temp_dir, data):
    path = temp_dir / 'autogloss.yaml'
    path.write_text(yaml.safe_dump(data), encoding='utf-8')
    with pytest.raises(ConfigurationError):
        ConfigManager(path, use_env=False)


@pytest.mark.parametrize('name, content, cause', [
    ('autogloss.yaml', 'glossary: [unclosed', yaml.YAMLError),
    ('autogloss.json', '{"glossary": ', json.JSONDecodeError),
])
def test_malformed_file(temp_dir, name, content, cause):
    path = temp_dir / name
    path.write_text(content, encoding='utf-8')
    with pytest.raises(ConfigurationError) as exc:
        ConfigManager(path, use_env=False)
    assert isinstance(exc.value.__cause__, cause)
    assert exc.value.component == 'config'


@pytest.mark.parametrize('section', [['a', 'b'], 'public', 3])
def test_section_must_be_mapping(temp_dir, section):
    path = temp_dir / 'autogloss.yaml'
    path.write_text(yaml.safe_dump({'glossary': section}), encoding='utf-8')
    with pytest.raises(ConfigurationError) as exc:
        ConfigManager(path, use_env=False)
    assert "must be a mapping" in str(exc.value)


def test_empty_section_uses_defaults(temp_dir):
    path = temp_dir / 'autogloss.yaml'
    path.write_text('glossary:\nlogging:\n  log_level: DEBUG\n', encoding='utf-8')
    config = ConfigManager(path, use_env=False).config
    assert config.glossary.source_dir == 'public'
    assert config.logging.log_level == 'DEBUG'


def test_unsupported_format(temp_dir):
    path = temp_dir / 'autogloss.toml'
    path.write_text('', encoding='utf-8')
    with pytest.raises(ConfigurationError):
        ConfigManager(path, use_env=False)


def test_get_set(temp_dir):
    manager = ConfigManager(temp_dir / 'absent.yaml', use_env=False)
    manager.set('glossary.default_lang', 'fr')
    assert manager.get('glossary.default_lang') == 'fr'
    assert manager.get('glossary.nope', 'default') == 'default'
    with pytest.raises(KeyError):
        manager.set('nope.key', 1)
    with pytest.raises(KeyError):
        manager.set('glossary.nope', 1)


def test_save_and_reload(temp_dir):
    path = temp_dir / 'out' / 'autogloss.yaml'
    manager = ConfigManager(path, use_env=False)
    manager.set('logging.file_logging', True)
    manager.save()
    assert ConfigManager(path, use_env=False).config.logging.file_logging is True


def test_template_is_loadable(temp_dir):
    path = temp_dir / 'template.yaml'
    ConfigManager(path, use_env=False).export_template(path)
    config = ConfigManager(path, use_env=False).config
    assert config == AppConfig()
