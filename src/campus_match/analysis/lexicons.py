"""Fixed word lists for sentiment scoring and tag generation."""

# Startup/product feedback vocabulary
POSITIVE_WORDS: frozenset[str] = frozenset(
    {
        "great",
        "excellent",
        "amazing",
        "wonderful",
        "fantastic",
        "love",
        "good",
        "best",
        "awesome",
        "brilliant",
        "outstanding",
        "perfect",
        "impressive",
        "innovative",
        "promising",
        "exciting",
        "solid",
        "strong",
        "successful",
        "valuable",
        "useful",
        "helpful",
        "recommend",
        "enjoy",
        "satisfied",
        "happy",
        "pleased",
        "impressed",
        "excited",
        "optimistic",
        "thank",
        "thanks",
        "thankful",
        "appreciate",
        "passed",
        "help",
    }
)

# Single tokens only: the tokenizer never yields phrases like "not good".
NEGATIVE_WORDS: frozenset[str] = frozenset(
    {
        "bad",
        "terrible",
        "awful",
        "horrible",
        "worst",
        "disappointing",
        "poor",
        "weak",
        "failing",
        "problem",
        "issue",
        "concern",
        "worry",
        "doubt",
        "skeptical",
        "risky",
        "uncertain",
        "unclear",
        "confused",
        "frustrated",
        "disappointed",
        "concerned",
        "worried",
        "broken",
        "failed",
        "failure",
        "improve",
    }
)

STOPWORDS: frozenset[str] = frozenset(
    {
        "the", "a", "an", "and", "or", "but", "in", "on", "at", "to",
        "for", "of", "with", "by", "from", "as", "is", "was", "are", "were",
        "been", "be", "have", "has", "had", "do", "does", "did", "will", "would",
        "could", "should", "may", "might", "must", "can", "this", "that", "these", "those",
        "i", "you", "he", "she", "it", "we", "they", "what", "which", "who",
        "when", "where", "why", "how", "all", "each", "every", "both", "few", "more",
        "most", "other", "some", "such", "no", "nor", "not", "only", "own", "same",
        "so", "than", "too", "very", "just", "also", "into", "their", "them", "our",
        "your", "its", "about", "over", "there", "then",
    }
)
