"""Term annotation: tokenizer, comment tracking and markup generation."""
from .annotator import Annotator, AnnotationResult, annotate
from .markup import render_gloss, is_first_punctuation, short_form
from .tokenizer import CommentState, CommentTracker, split_spans

__all__ = [
    "Annotator", "AnnotationResult", "annotate",
    "render_gloss", "is_first_punctuation", "short_form",
    "CommentState", "CommentTracker", "split_spans",
]
