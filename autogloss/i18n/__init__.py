"""Localized labels for generated markup."""
from .catalog import (
    ILocalizer,
    MessageCatalog,
    DEFAULT_MESSAGES,
    READ_MORE_KEY,
    GO_TO_GLOSSARY_KEY,
)

__all__ = [
    "ILocalizer", "MessageCatalog", "DEFAULT_MESSAGES",
    "READ_MORE_KEY", "GO_TO_GLOSSARY_KEY",
]
