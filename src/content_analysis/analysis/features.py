"""Stateless feature counters used by the engagement analyzer."""

import regex

from ..models.entities import ContentMetrics

_HASHTAG_RE = regex.compile(r"#[a-zA-Z0-9]+")
_MENTION_RE = regex.compile(r"@[a-zA-Z0-9]+")
_EMOJI_RE = regex.compile(r"\p{Emoji_Presentation}")


def count_words(text: str) -> int:
    return len(text.split())


def count_hashtags(text: str) -> int:
    return len(_HASHTAG_RE.findall(text))


def count_mentions(text: str) -> int:
    return len(_MENTION_RE.findall(text))


def count_questions(text: str) -> int:
    return text.count("?")


def count_emojis(text: str) -> int:
    """Count code points that render as emoji by default."""
    return len(_EMOJI_RE.findall(text))


def compute_metrics(text: str) -> ContentMetrics:
    return ContentMetrics(
        word_count=count_words(text),
        hashtag_count=count_hashtags(text),
        mention_count=count_mentions(text),
        question_count=count_questions(text),
        emoji_count=count_emojis(text),
    )
