"""Text analysis: summarization, sentiment and tag generation."""

from campus_match.analysis.sentiment import analyze_sentiment, text_sentiment_score
from campus_match.analysis.summarization import split_sentences, summarize_text
from campus_match.analysis.tagging import generate_tags

__all__ = [
    "analyze_sentiment",
    "generate_tags",
    "split_sentences",
    "summarize_text",
    "text_sentiment_score",
]
