"""Query patterns and category vocabulary for the chatbot. Matched against the lowercased query."""

import re

GREETING = re.compile(
    r"^(hi|hello|hey|greetings|good morning|good afternoon|good evening|sup|what's up|wassup)"
)

# Data-backed discovery
STARTUP_REQUEST = re.compile(
    r"(show|find|list|get|send|recommend|suggest|give|i want|i need).*(startup|startups|company|companies|business)"
)
STARTUP_CATEGORY_MENTION = re.compile(
    r"(startup|startups|company|companies).*(finance|fintech|health|edtech|ai|ml|blockchain|saas|ecommerce)"
)
# Only applies when a category keyword was found ("show me fintech")
CATEGORY_REQUEST = re.compile(r"(show|find|list|get|send|recommend|suggest|give|me|i want|i need)")
INVESTOR_REQUEST = re.compile(r"(show|find|list|get|send|recommend|suggest).*(investor|investors)")

# Canned categories
STARTUP_INFO = (
    re.compile(r"(find|search|look for|show me|discover|tell me about|what are|list|get).*(startup|company|business|companies)"),
    re.compile(r"(startup|startups|company|companies).*(what|how|tell|explain|about)"),
)
INVESTMENT = re.compile(
    r"(invest|investment|funding|fund|money|capital|how to invest|investing|investment strategy|"
    r"investment advice|investment tips|where to invest|what to invest|investment guide)"
)
INVESTMENT_HOW = re.compile(r"(how to invest|investment strategy|investment advice|investment tips|investment guide)")
INVESTMENT_WHERE = re.compile(r"(where to invest|what to invest|find investment|investment opportunities)")
PROFILE = re.compile(r"(profile|account|settings|edit|update)")

_CATEGORY_WORDS = r"(fintech|edtech|healthtech|ai|ml|blockchain|saas|ecommerce|agritech|iot|climatetech|proptech|foodtech|gaming)"
CATEGORY_QUESTION = (
    re.compile(_CATEGORY_WORDS + r".*(what|tell|explain|about|is)"),
    re.compile(r"(what is|tell me about|explain).*" + _CATEGORY_WORDS),
)
NAVIGATION = re.compile(
    r"(navigate|navigation|how to navigate|help me navigate|how do i navigate|where is|where can i find|"
    r"how to find|how to get to|how to access|where to go|show me where|direct me|guide me|how to use|"
    r"how to get started|getting started)"
)
HELP = re.compile(r"(help|how|what|explain|tell me|guide|how do|how can|what is|what are)")
HELP_HOW_TO = re.compile(r"(how do i|how can i|how to)")
HELP_FIND_STARTUP = re.compile(r"(find|search|discover|get).*(startup)")
HELP_INVEST = re.compile(r"(invest|make investment|commit investment)")
HELP_CREATE_STARTUP = re.compile(r"(create|add|submit|register).*(startup)")
FEATURES = re.compile(r"(feature|what can|capabilities|abilities|what does|what are the)")
_STAGE_WORDS = r"(pre-seed|seed|series a|series b|growth|early stage|late stage)"
STAGE_QUESTION = (
    re.compile(r"(pre-seed|seed|series a|series b|growth|early stage|late stage|stage).*(what|tell|explain|about|is)"),
    re.compile(r"(what is|tell me about|explain).*" + _STAGE_WORDS),
)
THANKS = re.compile(r"(thank|thanks|appreciate|grateful|awesome|great|good|nice|helpful)")
GOODBYE = re.compile(r"(bye|goodbye|see you|later|farewell|exit|quit)")

# Category keywords checked in order (first substring hit wins), with synonym folding.
CATEGORY_KEYWORDS: tuple[str, ...] = (
    "fintech",
    "finance",
    "healthtech",
    "health",
    "edtech",
    "education",
    "ai/ml",
    "ai",
    "ml",
    "blockchain",
    "saas",
    "e-commerce",
    "ecommerce",
    "agritech",
    "iot",
    "climatetech",
    "proptech",
    "foodtech",
    "gaming",
)
CATEGORY_SYNONYMS: dict[str, str] = {
    "finance": "fintech",
    "health": "healthtech",
    "education": "edtech",
    "ecommerce": "e-commerce",
    "ai": "ai/ml",
    "ml": "ai/ml",
}

# Suggested when a category search comes back empty
ALL_CATEGORIES: tuple[str, ...] = (
    "fintech",
    "healthtech",
    "edtech",
    "ai/ml",
    "blockchain",
    "saas",
    "e-commerce",
    "agritech",
    "iot",
    "climatetech",
    "proptech",
    "foodtech",
    "gaming",
)


def extract_category(lower_query: str) -> str:
    """Platform category mentioned in the query, or '' if none."""
    for keyword in CATEGORY_KEYWORDS:
        if keyword in lower_query:
            return CATEGORY_SYNONYMS.get(keyword, keyword)
    return ""


def is_startup_request(lower_query: str, category: str) -> bool:
    """True when the query asks for startup listings."""
    return bool(
        STARTUP_REQUEST.search(lower_query)
        or STARTUP_CATEGORY_MENTION.search(lower_query)
        or (category and CATEGORY_REQUEST.search(lower_query))
    )


def matches_any(patterns: tuple[re.Pattern, ...], lower_query: str) -> bool:
    return any(p.search(lower_query) for p in patterns)
