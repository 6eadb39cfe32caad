"""Rule-based chatbot answering platform questions and startup/investor lookups."""

from campus_match.chatbot.patterns import extract_category
from campus_match.chatbot.router import ChatbotRouter, route_query

__all__ = ["ChatbotRouter", "extract_category", "route_query"]
