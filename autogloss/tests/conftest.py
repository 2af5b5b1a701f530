"""
Pytest configuration and fixtures.
"""
import json
import logging
import shutil
import tempfile
from pathlib import Path

import pytest
import yaml

from autogloss.glossary import GlossaryCompiler
from autogloss.i18n import MessageCatalog


@pytest.fixture
def temp_dir():
    """Create temporary directory."""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path)


@pytest.fixture
def en_source():
    """English glossary source in the raw source format."""
    return {
        'lang': 'en',
        'glossary_url': '/en/glossary',
        'entries': {
            'GLAAD': {'ruby': '/ɡlæd/'},
            'AMAB': {'short': 'assigned male at birth'},
            'transman': {
                'short': 'An AFAB person who identifies as a man.',
                'long': 'A person who was "born as a woman" but "became a man".',
                'variants': ['transmen', 'trans man'],
                'renderAs': {'transmen': 'trans·men'},
            },
            'LaTeX': {
                'long': 'A document preparation system.',
                'ruby': 'lah-tek',
            },
            'TeX': {
                'short': 'A typesetting system.',
                'show_in_print': False,
                'pronunciations': [{'IPA': '/tɛx/'}, {'note': 'informal'}, {'IPA': '/tɛk/'}],
                'pronunciations_to_include_in_short_form': 2,
            },
        },
    }


@pytest.fixture
def fr_source():
    return {
        'lang': 'fr',
        'entries': {
            'AMAB': {'short': 'assigné homme à la naissance', 'variants': ['AMABs']},
        },
    }


@pytest.fixture
def en_glossary(en_source):
    return GlossaryCompiler().compile_language('en', en_source)


@pytest.fixture
def catalog():
    return MessageCatalog({
        'en': {'GLOSSARY_READ_MORE': 'Read more', 'GLOSSARY_GO_TO_GLOSSARY': 'Go to glossary'},
        'fr': {'GLOSSARY_READ_MORE': 'Lire la suite'},
    })


@pytest.fixture
def glossary_tree(temp_dir, en_source, fr_source):
    """Glossary sources on disk: public/en/_glossary.yaml and public/fr/_glossary.json."""
    root = temp_dir / 'public'
    (root / 'en').mkdir(parents=True)
    (root / 'fr').mkdir(parents=True)
    with open(root / 'en' / '_glossary.yaml', 'w', encoding='utf-8') as f:
        yaml.safe_dump(en_source, f, allow_unicode=True)
    with open(root / 'fr' / '_glossary.json', 'w', encoding='utf-8') as f:
        json.dump(fr_source, f, ensure_ascii=False)
    return root


@pytest.fixture(autouse=True)
def setup_test_env(monkeypatch):
    """Setup test environment variables."""
    for var in ('GLOSSARY_DIR', 'GLOSSARY_LANG', 'MESSAGES_PATH'):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    yield
    logger = logging.getLogger("autogloss")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
