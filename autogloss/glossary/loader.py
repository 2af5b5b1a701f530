"""
Glossary source discovery and parsing.

Sources live one per language directory, e.g.::

    public/en/_glossary.yaml
    public/fr/_glossary.json

The language code is the name of the directory holding the file.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

import yaml

from ..core.exceptions import ConfigurationError, GlossaryReadError, error_context
from ..core.models import Glossary
from .compiler import GlossaryCompiler


logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = ('.yaml', '.yml', '.json')
DEFAULT_PATTERN = "**/_glossary.*"


class GlossaryLoader:
    """Finds and parses glossary source files under a root directory."""

    def __init__(self, root: Union[str, Path], pattern: str = DEFAULT_PATTERN):
        self.root = Path(root)
        self.pattern = pattern

    def discover(self) -> List[Path]:
        """Return glossary source files, sorted by path."""
        if not self.root.is_dir():
            raise ConfigurationError(
                f"Glossary directory not found: {self.root}", component="glossary"
            )

        return sorted(
            path for path in self.root.glob(self.pattern)
            if path.is_file() and path.suffix.lower() in SUPPORTED_SUFFIXES
        )

    @staticmethod
    def load_file(path: Union[str, Path]) -> Dict[str, Any]:
        """
        Parse one glossary source file.

        Raises:
            GlossaryReadError: If the file cannot be read, parsed, or is not a mapping
        """
        path = Path(path)
        suffix = path.suffix.lower()
        if suffix not in SUPPORTED_SUFFIXES:
            raise GlossaryReadError(f"Unsupported glossary format: {suffix}", path=str(path))

        with error_context("reading glossary", GlossaryReadError, logger, path=str(path)):
            with open(path, 'r', encoding='utf-8') as f:
                if suffix == '.json':
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise GlossaryReadError("Glossary source must be a mapping", path=str(path))
        return data

    def load(self) -> Dict[str, Dict[str, Any]]:
        """Load every discovered source keyed by language code."""
        sources: Dict[str, Dict[str, Any]] = {}
        origins: Dict[str, Path] = {}

        for path in self.discover():
            lang = path.parent.name
            if lang in sources:
                raise ConfigurationError(
                    f"Several glossary sources for language '{lang}': "
                    f"{origins[lang]} and {path}",
                    component="glossary"
                )
            sources[lang] = self.load_file(path)
            origins[lang] = path
            logger.debug(f"Loaded glossary source {path}")

        if not sources:
            logger.warning(f"No files matching '{self.pattern}' found in {self.root}")
        return sources


def load_glossaries(
    root: Union[str, Path],
    pattern: str = DEFAULT_PATTERN,
    max_workers: int = 1,
    languages: Optional[List[str]] = None
) -> Dict[str, Glossary]:
    """
    Load and compile the glossaries found under ``root``.

    Args:
        root: Directory to search
        pattern: Glob pattern relative to ``root``
        max_workers: Languages compiled in parallel
        languages: Restrict to these language codes

    Returns:
        Compiled glossaries keyed by language code
    """
    logger.info(f"Loading glossaries from {root}")
    sources: Mapping[str, Dict[str, Any]] = GlossaryLoader(root, pattern).load()
    if languages is not None:
        missing = [lang for lang in languages if lang not in sources]
        if missing:
            raise ConfigurationError(
                f"No glossary for language(s): {', '.join(missing)}", component="glossary"
            )
        sources = {lang: sources[lang] for lang in languages}
    return GlossaryCompiler(max_workers=max_workers).compile(sources)
