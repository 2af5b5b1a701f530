"""
Message lookup for the labels used in generated markup.

The annotator only needs two keys; the catalog is injected into it rather
than looked up from global state.
"""
import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Mapping, Optional, Union

import yaml

from ..core.exceptions import GlossaryReadError, MissingMessageError, error_context


logger = logging.getLogger(__name__)

READ_MORE_KEY = "GLOSSARY_READ_MORE"
GO_TO_GLOSSARY_KEY = "GLOSSARY_GO_TO_GLOSSARY"

DEFAULT_MESSAGES: Mapping[str, Mapping[str, str]] = {
    "en": {
        READ_MORE_KEY: "Read more",
        GO_TO_GLOSSARY_KEY: "Go to glossary",
    },
}


class ILocalizer(ABC):
    """Resolves a message key for a language."""

    @abstractmethod
    def lookup(self, lang: str, key: str) -> str:
        """Return the message text for ``key`` in ``lang``."""
        pass


class MessageCatalog(ILocalizer):
    """
    In-memory message table with a fallback language.

    Args:
        messages: ``{lang: {key: text}}``, merged over the built-in defaults
        fallback_lang: Language consulted when a key is missing; None disables it
        include_defaults: Start from DEFAULT_MESSAGES
    """

    def __init__(
        self,
        messages: Optional[Mapping[str, Mapping[str, str]]] = None,
        fallback_lang: Optional[str] = "en",
        include_defaults: bool = True
    ):
        self.fallback_lang = fallback_lang
        self._messages: Dict[str, Dict[str, str]] = {}

        if include_defaults:
            for lang, table in DEFAULT_MESSAGES.items():
                self.update(lang, table)
        for lang, table in (messages or {}).items():
            self.update(lang, table)

    def update(self, lang: str, messages: Mapping[str, str]) -> None:
        """Add or replace messages for ``lang``."""
        self._messages.setdefault(lang, {}).update(messages)

    @property
    def languages(self):
        return sorted(self._messages)

    def lookup(self, lang: str, key: str) -> str:
        table = self._messages.get(lang, {})
        if key in table:
            return table[key]

        if self.fallback_lang is not None and self.fallback_lang != lang:
            fallback = self._messages.get(self.fallback_lang, {})
            if key in fallback:
                logger.debug(f"Message {key} missing for '{lang}', using '{self.fallback_lang}'")
                return fallback[key]

        raise MissingMessageError(lang, key)

    @classmethod
    def from_file(cls, path: Union[str, Path], **kwargs) -> 'MessageCatalog':
        """Load ``{lang: {key: text}}`` from a YAML or JSON file."""
        path = Path(path)
        with error_context("reading messages", GlossaryReadError, logger, path=str(path)):
            with open(path, 'r', encoding='utf-8') as f:
                if path.suffix.lower() == '.json':
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f) or {}

        if not isinstance(data, dict) or not all(isinstance(v, dict) for v in data.values()):
            raise GlossaryReadError("Message file must map languages to tables", path=str(path))
        return cls(data, **kwargs)

    @classmethod
    def from_directory(cls, directory: Union[str, Path], **kwargs) -> 'MessageCatalog':
        """Load one ``<lang>.yaml`` (or ``.yml``/``.json``) table per language."""
        catalog = cls(**kwargs)
        for path in sorted(Path(directory).iterdir()):
            if path.suffix.lower() not in ('.yaml', '.yml', '.json'):
                continue
            with error_context("reading messages", GlossaryReadError, logger, path=str(path)):
                with open(path, 'r', encoding='utf-8') as f:
                    data = json.load(f) if path.suffix.lower() == '.json' else yaml.safe_load(f)
            if not isinstance(data, dict):
                raise GlossaryReadError("Message table must be a mapping", path=str(path))
            catalog.update(path.stem, data)
        return catalog

    @classmethod
    def load(cls, path: Union[str, Path], **kwargs) -> 'MessageCatalog':
        """Load from a directory or a single file."""
        path = Path(path)
        if path.is_dir():
            return cls.from_directory(path, **kwargs)
        return cls.from_file(path, **kwargs)
