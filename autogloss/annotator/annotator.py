"""
Glossary annotator: rewrites known terms in marked-up text.

Matching is exact and case-sensitive on whole word-boundary spans; there is
no stemming and no partial-word matching. Spans inside ``<!-- -->``
comments are left alone.
"""
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..core.models import Glossary
from ..i18n.catalog import ILocalizer, MessageCatalog
from .markup import render_gloss
from .tokenizer import iter_spans, split_spans


@dataclass
class AnnotationResult:
    """Result of annotating one document."""
    text: str
    replacements: int = 0
    terms_applied: List[str] = field(default_factory=list)


class Annotator:
    """
    Inserts gloss markup for every glossary term found in a text.

    Args:
        localizer: Message lookup for link labels (defaults to a MessageCatalog
            with the built-in English labels)
        logger: Logger to use instead of the module logger
    """

    def __init__(
        self,
        localizer: Optional[ILocalizer] = None,
        logger: Optional[logging.Logger] = None
    ):
        self.localizer = localizer or MessageCatalog()
        self.logger = logger or logging.getLogger(__name__)

    def render(self, surface_form: str, glossary: Glossary, next_span: Optional[str] = None) -> str:
        """Markup for a single matched span."""
        return render_gloss(surface_form, glossary, next_span, self.localizer)

    def annotate_with_stats(self, text: str, glossary: Glossary) -> AnnotationResult:
        spans = split_spans(text)
        replacements = 0
        applied: List[str] = []

        for i, span, next_span, in_comment in iter_spans(spans):
            if not in_comment and span in glossary.term_set:
                spans[i] = self.render(span, glossary, next_span)
                replacements += 1
                if span not in applied:
                    applied.append(span)

        self.logger.debug(
            f"Annotated {replacements} occurrences "
            f"({len(applied)} unique terms) for lang={glossary.lang}"
        )
        return AnnotationResult(
            text=''.join(spans),
            replacements=replacements,
            terms_applied=applied
        )

    def annotate(self, text: str, glossary: Glossary) -> str:
        """Return ``text`` with every uncommented glossary term annotated."""
        return self.annotate_with_stats(text, glossary).text


def annotate(text: str, glossary: Glossary, localizer: Optional[ILocalizer] = None) -> str:
    """Annotate ``text`` with a throwaway Annotator."""
    return Annotator(localizer).annotate(text, glossary)
