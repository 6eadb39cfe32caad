"""Rule-based chatbot: ordered pattern rules, first match answers."""

import logging
from typing import Callable, Optional

from campus_match.models.investor import InvestorProfile
from campus_match.models.results import ChatbotReply, ScoredStartup
from campus_match.scoring import (
    calculate_compatibility_score,
    find_similar_startups,
    recommend_startups_for_investor,
)
from campus_match.sources.base import RecordSource

from . import patterns, responses

logger = logging.getLogger(__name__)

RESULT_LIMIT = 10

RuleFn = Callable[[str, str, Optional[InvestorProfile]], Optional[ChatbotReply]]

# Fields exposed on investor cards
_INVESTOR_FIELDS = ("id", "username", "full_name", "bio", "location", "investment_domains", "firm", "investor_role")


class ChatbotRouter:
    """
    Classifies a free-text query into a fixed category, in priority order:
    greeting, startup discovery, investor discovery, then the canned topics
    (startup info, investment, profile, category, navigation, help, features,
    stages, thanks, goodbye) and a default answer.
    Discovery rules need a record source; without one they are skipped.
    """

    def __init__(self, source: Optional[RecordSource] = None):
        self.source = source
        self._rules: list[RuleFn] = [self._greeting]
        if source is not None:
            self._rules += [self._startup_discovery, self._investor_discovery]
        self._rules += [
            self._startup_info,
            self._investment,
            self._profile,
            self._category_question,
            self._navigation,
            self._help,
            self._features,
            self._stage_question,
            self._thanks,
            self._goodbye,
        ]

    def route(self, query: Optional[str], user: Optional[InvestorProfile] = None) -> ChatbotReply:
        """Answer one query; the first matching rule wins."""
        if not query or not query.strip():
            return ChatbotReply(response=responses.EMPTY_QUERY, type="greeting")

        lower_query = query.lower().strip()
        for rule_fn in self._rules:
            reply = rule_fn(lower_query, query, user)
            if reply is not None:
                return reply
        return ChatbotReply(response=responses.default(_name(user)), type="default")

    # --- rules ------------------------------------------------------------

    def _greeting(self, lower_query: str, query: str, user: Optional[InvestorProfile]) -> Optional[ChatbotReply]:
        if not patterns.GREETING.search(lower_query):
            return None
        return ChatbotReply(response=responses.greeting(lower_query, _name(user)), type="greeting")

    def _startup_discovery(
        self, lower_query: str, query: str, user: Optional[InvestorProfile]
    ) -> Optional[ChatbotReply]:
        category = patterns.extract_category(lower_query)
        if not patterns.is_startup_request(lower_query, category):
            return None

        startups = self.source.find_startups(category=category or None, limit=RESULT_LIMIT)
        results = [ScoredStartup(startup=s) for s in startups]

        if user is not None and user.is_investor:
            recommended = recommend_startups_for_investor(user, startups, RESULT_LIMIT, category_first=True)
            if recommended:
                results = [
                    ScoredStartup(startup=s, compatibility_score=calculate_compatibility_score(user, s))
                    for s in recommended
                ]

        if not results:
            logger.info("No %s startups listed; falling back to semantic search", category or "matching")
            similar = find_similar_startups(query, self.source.all_startups(), RESULT_LIMIT)
            if not similar:
                alternatives = ", ".join([c for c in patterns.ALL_CATEGORIES if c != category][:3])
                return ChatbotReply(response=responses.no_startups(category, alternatives), type="text")
            results = [ScoredStartup(startup=s) for s in similar]

        return ChatbotReply(
            response=responses.startups_found(len(results), category),
            type="startups",
            data=[r.to_summary() for r in results],
        )

    def _investor_discovery(
        self, lower_query: str, query: str, user: Optional[InvestorProfile]
    ) -> Optional[ChatbotReply]:
        if not patterns.INVESTOR_REQUEST.search(lower_query):
            return None
        investors = self.source.find_investors(limit=RESULT_LIMIT)
        if not investors:
            return ChatbotReply(response=responses.NO_INVESTORS, type="text")
        return ChatbotReply(
            response=responses.investors_found(len(investors)),
            type="investors",
            data=[i.model_dump(mode="json", by_alias=True, include=set(_INVESTOR_FIELDS)) for i in investors],
        )

    def _startup_info(self, lower_query: str, query: str, user: Optional[InvestorProfile]) -> Optional[ChatbotReply]:
        if not patterns.matches_any(patterns.STARTUP_INFO, lower_query):
            return None
        return ChatbotReply(response=responses.STARTUP_INFO, type="information")

    def _investment(self, lower_query: str, query: str, user: Optional[InvestorProfile]) -> Optional[ChatbotReply]:
        if not patterns.INVESTMENT.search(lower_query):
            return None
        if patterns.INVESTMENT_HOW.search(lower_query):
            text = responses.INVESTMENT_HOW
        elif patterns.INVESTMENT_WHERE.search(lower_query):
            text = responses.INVESTMENT_WHERE
        else:
            text = responses.investment_features(user)
        return ChatbotReply(response=text, type="information")

    def _profile(self, lower_query: str, query: str, user: Optional[InvestorProfile]) -> Optional[ChatbotReply]:
        if not patterns.PROFILE.search(lower_query):
            return None
        return ChatbotReply(response=responses.PROFILE, type="information")

    def _category_question(
        self, lower_query: str, query: str, user: Optional[InvestorProfile]
    ) -> Optional[ChatbotReply]:
        if not patterns.matches_any(patterns.CATEGORY_QUESTION, lower_query):
            return None
        for category in responses.CATEGORY_DESCRIPTIONS:
            if category in lower_query or category.replace("-", "") in lower_query:
                return ChatbotReply(response=responses.category_explanation(category), type="information")
        return None

    def _navigation(self, lower_query: str, query: str, user: Optional[InvestorProfile]) -> Optional[ChatbotReply]:
        if not patterns.NAVIGATION.search(lower_query):
            return None
        return ChatbotReply(response=responses.NAVIGATION, type="information")

    def _help(self, lower_query: str, query: str, user: Optional[InvestorProfile]) -> Optional[ChatbotReply]:
        if not patterns.HELP.search(lower_query):
            return None
        if patterns.HELP_HOW_TO.search(lower_query):
            if patterns.HELP_FIND_STARTUP.search(lower_query):
                return ChatbotReply(response=responses.HELP_FIND_STARTUPS, type="help")
            if patterns.HELP_INVEST.search(lower_query):
                return ChatbotReply(response=responses.HELP_INVEST, type="help")
            if patterns.HELP_CREATE_STARTUP.search(lower_query):
                return ChatbotReply(response=responses.HELP_CREATE_STARTUP, type="help")
        return ChatbotReply(response=responses.HELP_GENERAL, type="help")

    def _features(self, lower_query: str, query: str, user: Optional[InvestorProfile]) -> Optional[ChatbotReply]:
        if not patterns.FEATURES.search(lower_query):
            return None
        return ChatbotReply(response=responses.FEATURES, type="information")

    def _stage_question(self, lower_query: str, query: str, user: Optional[InvestorProfile]) -> Optional[ChatbotReply]:
        if not patterns.matches_any(patterns.STAGE_QUESTION, lower_query):
            return None
        return ChatbotReply(response=responses.STAGES, type="information")

    def _thanks(self, lower_query: str, query: str, user: Optional[InvestorProfile]) -> Optional[ChatbotReply]:
        if not patterns.THANKS.search(lower_query):
            return None
        return ChatbotReply(response=responses.thanks(_name(user)), type="greeting")

    def _goodbye(self, lower_query: str, query: str, user: Optional[InvestorProfile]) -> Optional[ChatbotReply]:
        if not patterns.GOODBYE.search(lower_query):
            return None
        return ChatbotReply(response=responses.goodbye(_name(user)), type="greeting")


def _name(user: Optional[InvestorProfile]) -> str:
    return user.display_name if user is not None else "there"


def route_query(
    query: Optional[str],
    user: Optional[InvestorProfile] = None,
    source: Optional[RecordSource] = None,
) -> ChatbotReply:
    """Answer a chatbot query, using source for startup/investor lookups when given."""
    return ChatbotRouter(source).route(query, user)
