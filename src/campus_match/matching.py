"""Shared category/domain matching utilities for recommendation and scoring."""

import re

_CATEGORY_STRIP = re.compile(r"[\s/&]+")

# Domain families: (domain marker, category markers). "edtech" should match
# "education technology", "ai" should match "ai/ml" or "ml".
_FAMILIES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("ed", ("ed",)),
    ("fin", ("fin",)),
    ("health", ("health",)),
    ("ai", ("ai", "ml")),
)


def normalize_category(text: str | None) -> str:
    """Lowercase and drop whitespace, '/' and '&' ('AI / ML' -> 'aiml')."""
    return _CATEGORY_STRIP.sub("", (text or "").lower())


def domain_matches_category(domain: str | None, category: str | None) -> bool:
    """
    Loose match of an investor domain against a startup category.
    Equal, either contains the other, or both in the same domain family.
    """
    d = normalize_category(domain)
    c = normalize_category(category)
    if not d or not c:
        return False
    if d == c or d in c or c in d:
        return True
    return any(
        marker in d and any(m in c for m in cat_markers)
        for marker, cat_markers in _FAMILIES
    )


def domain_matches_exactly(domain: str | None, category: str | None) -> bool:
    """Strict variant without family matching (used for the category boost)."""
    d = normalize_category(domain)
    c = normalize_category(category)
    if not d or not c:
        return False
    return d == c or d in c or c in d


def any_domain_matches(domains: list[str], category: str | None, *, strict: bool = False) -> bool:
    """True if any of the investor's domains matches the category."""
    match = domain_matches_exactly if strict else domain_matches_category
    return any(match(d, category) for d in domains or [])
