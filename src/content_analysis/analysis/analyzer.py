"""Engagement scoring and improvement suggestions for social media text."""

from typing import List

from .features import compute_metrics
from ..errors import AnalysisError
from ..models.entities import AnalysisResult, ContentMetrics

BASE_SCORE = 50
MAX_SCORE = 100

# Word-count band that earns the length bonus
MIN_WORDS = 50
MAX_WORDS = 200
WORD_BAND_BONUS = 10

HASHTAG_POINTS = 5
MENTION_POINTS = 3
QUESTION_POINTS = 5
EMOJI_POINTS = 2
EMOJI_POINTS_CAP = 10

MAX_HASHTAGS = 5

SUGGEST_ADD_HASHTAGS = "Add relevant hashtags to increase visibility"
SUGGEST_FEWER_HASHTAGS = "Consider using fewer hashtags for better engagement"
SUGGEST_MORE_CONTENT = "Consider adding more content for better context"
SUGGEST_SHORTER_CONTENT = "Consider shortening the content for better engagement"
SUGGEST_ADD_QUESTIONS = "Add questions to encourage audience interaction"
SUGGEST_ADD_EMOJIS = "Add relevant emojis to make the content more engaging"
SUGGEST_ADD_MENTIONS = "Consider tagging relevant accounts to increase reach"


def score_metrics(metrics: ContentMetrics) -> int:
    """Base 50 plus per-feature bonuses, capped at 100."""
    score = BASE_SCORE
    if MIN_WORDS <= metrics.word_count <= MAX_WORDS:
        score += WORD_BAND_BONUS
    score += metrics.hashtag_count * HASHTAG_POINTS
    score += metrics.mention_count * MENTION_POINTS
    score += metrics.question_count * QUESTION_POINTS
    score += min(metrics.emoji_count * EMOJI_POINTS, EMOJI_POINTS_CAP)
    return min(score, MAX_SCORE)


def suggest(metrics: ContentMetrics) -> List[str]:
    """Suggestions in fixed order: hashtags, length, questions, emojis, mentions."""
    suggestions = []

    if metrics.hashtag_count == 0:
        suggestions.append(SUGGEST_ADD_HASHTAGS)
    elif metrics.hashtag_count > MAX_HASHTAGS:
        suggestions.append(SUGGEST_FEWER_HASHTAGS)

    if metrics.word_count < MIN_WORDS:
        suggestions.append(SUGGEST_MORE_CONTENT)
    elif metrics.word_count > MAX_WORDS:
        suggestions.append(SUGGEST_SHORTER_CONTENT)

    if metrics.question_count == 0:
        suggestions.append(SUGGEST_ADD_QUESTIONS)

    if metrics.emoji_count == 0:
        suggestions.append(SUGGEST_ADD_EMOJIS)

    if metrics.mention_count == 0:
        suggestions.append(SUGGEST_ADD_MENTIONS)

    return suggestions


def analyze_text(text: str) -> AnalysisResult:
    """
    Score text for engagement potential.

    Args:
        text: Any string, including the empty string.

    Returns:
        AnalysisResult with a score in [50, 100] and ordered suggestions.
    """
    if not isinstance(text, str):
        raise AnalysisError(f"Expected text, got {type(text).__name__}")
    metrics = compute_metrics(text)
    return AnalysisResult(
        score=score_metrics(metrics),
        suggestions=tuple(suggest(metrics)),
        metrics=metrics,
    )


class ContentAnalyzer:
    """Stateless wrapper so the analyzer can be injected like other components."""

    def analyze(self, text: str) -> AnalysisResult:
        return analyze_text(text)
