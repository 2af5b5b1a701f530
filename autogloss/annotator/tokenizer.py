"""
Word-boundary tokenizer and markup-comment tracking.

The comment tracker is a heuristic over spans, not a markup parser: it only
knows about ``<!--`` at the start of a span and ``-->`` at its end.
"""
import re
from enum import Enum
from typing import Iterator, List, Optional, Tuple


_WORD_BOUNDARY = re.compile(r'\b')

COMMENT_OPEN = '<!--'
COMMENT_CLOSE = '-->'


def split_spans(text: str) -> List[str]:
    """
    Split ``text`` at word boundaries, keeping separators as their own spans.

    ``''.join(split_spans(text)) == text`` holds for every input.
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text)}")
    return [span for span in _WORD_BOUNDARY.split(text) if span]


class CommentState(Enum):
    NORMAL = "normal"
    IN_COMMENT = "in_comment"


def opens_comment(span: str) -> bool:
    return span.strip().startswith(COMMENT_OPEN)


def closes_comment(span: str) -> bool:
    return span.strip().endswith(COMMENT_CLOSE)


class CommentTracker:
    """Two-state machine fed one span at a time."""

    def __init__(self):
        self.state = CommentState.NORMAL

    @property
    def in_comment(self) -> bool:
        return self.state is CommentState.IN_COMMENT

    def feed(self, span: str) -> CommentState:
        """Apply the open rule, then the close rule, and return the new state."""
        if self.state is CommentState.NORMAL and opens_comment(span):
            self.state = CommentState.IN_COMMENT
        if self.state is CommentState.IN_COMMENT and closes_comment(span):
            self.state = CommentState.NORMAL
        return self.state


def iter_spans(spans: List[str]) -> Iterator[Tuple[int, str, Optional[str], bool]]:
    """
    Yield ``(index, span, next_span, in_comment)`` for each span.

    ``in_comment`` is the tracker state after feeding the span.
    """
    tracker = CommentTracker()
    last = len(spans) - 1
    for i, span in enumerate(spans):
        tracker.feed(span)
        next_span = spans[i + 1] if i < last else None
        yield i, span, next_span, tracker.in_comment
