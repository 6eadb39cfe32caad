"""Main CLI entry point."""

import argparse
import json
import logging
import os
import sys
from pathlib import Path


def main() -> None:
    """Parse args and dispatch to subcommands."""
    parser = argparse.ArgumentParser(prog="campus-match", description="Startup/investor matching toolkit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument(
        "--source",
        default="sqlite",
        choices=["sqlite", "api"],
        help="Where startups and investors are read from",
    )
    parser.add_argument(
        "--db",
        type=Path,
        default=Path(os.environ.get("CAMPUS_MATCH_DB", "campus_match.db")),
        help="Path to SQLite database (sqlite source)",
    )
    parser.add_argument(
        "--api-url",
        type=str,
        default=None,
        help="Platform base URL (api source; default: CAMPUS_MATCH_API_URL)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # load
    load_parser = subparsers.add_parser("load", help="Import startups/users from a JSON file into the store")
    load_parser.add_argument("input", type=Path, help='JSON file: {"startups": [...], "users": [...]}')

    # moderate
    moderate_parser = subparsers.add_parser("moderate", help="Set a stored startup's approval status")
    moderate_parser.add_argument("startup_id", type=str)
    moderate_parser.add_argument("status", choices=["draft", "pending", "approved", "rejected"])

    # search
    search_parser = subparsers.add_parser("search", help="Semantic search over approved startups")
    search_parser.add_argument("query", type=str)
    search_parser.add_argument("--limit", type=int, default=20, help="Max results (default: 20)")
    _add_investor_args(search_parser)
    _add_output_arg(search_parser)

    # recommend
    recommend_parser = subparsers.add_parser("recommend", help="Recommend startups for an investor")
    _add_investor_args(recommend_parser, required=True)
    recommend_parser.add_argument("--limit", type=int, default=10, help="Max results (default: 10)")
    recommend_parser.add_argument(
        "--category-first",
        action="store_true",
        help="Rank startups in the investor's domains first",
    )
    _add_output_arg(recommend_parser)

    # compat
    compat_parser = subparsers.add_parser("compat", help="Compatibility score of one startup for an investor")
    compat_parser.add_argument("startup_id", type=str)
    _add_investor_args(compat_parser, required=True)

    # summarize
    summarize_parser = subparsers.add_parser("summarize", help="Summarize a startup or free text")
    _add_text_args(summarize_parser)
    summarize_parser.add_argument("--max-sentences", type=int, default=2)

    # potential
    potential_parser = subparsers.add_parser("potential", help="Investment potential of a stored startup")
    potential_parser.add_argument("startup_id", type=str)

    # sentiment
    sentiment_parser = subparsers.add_parser("sentiment", help="Sentiment of text")
    sentiment_parser.add_argument("text", type=str)
    sentiment_parser.add_argument("--rating", type=float, default=None, help="Optional 1-5 star rating")

    # review
    review_parser = subparsers.add_parser("review", help="Add or update a review of a stored startup")
    review_parser.add_argument("startup_id", type=str)
    review_parser.add_argument("--user-id", type=str, required=True)
    review_parser.add_argument("--rating", type=int, required=True)
    review_parser.add_argument("--comment", type=str, required=True)

    # tags
    tags_parser = subparsers.add_parser("tags", help="Generate tags from a startup or free text")
    _add_text_args(tags_parser)
    tags_parser.add_argument("--max-tags", type=int, default=5)

    # chat
    chat_parser = subparsers.add_parser("chat", help="Ask the chatbot")
    chat_parser.add_argument("query", type=str)
    _add_investor_args(chat_parser)

    args = parser.parse_args()
    _configure_logging(args.verbose)

    handlers = {
        "load": _run_load,
        "moderate": _run_moderate,
        "search": _run_search,
        "recommend": _run_recommend,
        "compat": _run_compat,
        "summarize": _run_summarize,
        "potential": _run_potential,
        "sentiment": _run_sentiment,
        "review": _run_review,
        "tags": _run_tags,
        "chat": _run_chat,
    }
    handler = handlers.get(args.command)
    if handler is None:
        parser.print_help()
        return
    handler(args)


def _add_investor_args(sub: argparse.ArgumentParser, required: bool = False) -> None:
    group = sub.add_mutually_exclusive_group(required=required)
    group.add_argument("--profile", type=Path, default=None, help="Investor profile YAML")
    group.add_argument("--user-id", type=str, default=None, help="Stored user id")


def _add_output_arg(sub: argparse.ArgumentParser) -> None:
    sub.add_argument("--output", type=Path, default=None, help="Write JSON results to file (default: stdout)")


def _add_text_args(sub: argparse.ArgumentParser) -> None:
    group = sub.add_mutually_exclusive_group(required=True)
    group.add_argument("--text", type=str, default=None)
    group.add_argument("--startup-id", type=str, default=None)


def _configure_logging(verbose: bool) -> None:
    level = "DEBUG" if verbose else os.environ.get("CAMPUS_MATCH_LOG_LEVEL", "WARNING")
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _emit(data, output: Path | None = None) -> None:
    text = json.dumps(data, indent=2, default=str, ensure_ascii=False)
    if output:
        output.write_text(text, encoding="utf-8")
        print(f"Wrote results to {output}")
    else:
        print(text)


def _open_store(args: argparse.Namespace):
    from campus_match.store import RecordStore

    return RecordStore(args.db)


def _open_source(args: argparse.Namespace):
    from campus_match.sources.registry import SourceRegistry

    if args.source == "api":
        return SourceRegistry.get("api", base_url=args.api_url)
    return SourceRegistry.get("sqlite", db_path=args.db)


def _load_investor(args: argparse.Namespace):
    """Investor from --profile YAML or --user-id in the store; None when neither given."""
    from campus_match.models.investor import InvestorProfile

    if getattr(args, "profile", None):
        return InvestorProfile.from_yaml(args.profile)
    if getattr(args, "user_id", None):
        user = _open_store(args).get_user(args.user_id)
        if user is None:
            raise SystemExit(f"User not found: {args.user_id}")
        return user
    return None


def _require_startup(args: argparse.Namespace, startup_id: str):
    startup = _open_store(args).get_startup(startup_id)
    if startup is None:
        raise SystemExit(f"Startup not found: {startup_id}")
    return startup


def _text_from_args(args: argparse.Namespace) -> str:
    if args.text is not None:
        return args.text
    startup = _require_startup(args, args.startup_id)
    return f"{startup.name}. {startup.tagline}. {startup.description}"


def _run_load(args: argparse.Namespace) -> None:
    """Run load command."""
    from campus_match.models import InvestorProfile, Startup

    data = json.loads(args.input.read_text(encoding="utf-8"))
    if isinstance(data, list):
        data = {"startups": data}
    store = _open_store(args)
    new_count = 0
    for item in data.get("startups", []):
        _, was_new = store.upsert_startup(Startup.model_validate(item))
        new_count += int(was_new)
    users = data.get("users", [])
    for item in users:
        store.upsert_user(InvestorProfile.model_validate(item))
    print(f"Loaded {len(data.get('startups', []))} startups ({new_count} new) and {len(users)} users into {args.db}")


def _run_moderate(args: argparse.Namespace) -> None:
    """Run moderate command."""
    if not _open_store(args).set_startup_status(args.startup_id, args.status):
        raise SystemExit(f"Startup not found: {args.startup_id}")
    print(f"Startup {args.startup_id} -> {args.status}")


def _run_search(args: argparse.Namespace) -> None:
    """Run search command. Approved investors also get compatibility scores."""
    from campus_match.scoring import annotate_compatibility, find_similar_startups

    if not args.query.strip():
        raise SystemExit("Search query is required")
    source = _open_source(args)
    try:
        startups = source.all_startups()
    finally:
        source.close()
    results = annotate_compatibility(_load_investor(args), find_similar_startups(args.query, startups, args.limit))
    _emit(
        {
            "query": args.query,
            "count": len(results),
            "results": [r.model_dump(mode="json", by_alias=True) for r in results],
        },
        args.output,
    )


def _run_recommend(args: argparse.Namespace) -> None:
    """Run recommend command."""
    from campus_match.scoring import recommend_for_investor

    investor = _load_investor(args)
    source = _open_source(args)
    try:
        startups = source.all_startups()
    finally:
        source.close()
    if not startups:
        print("No approved startups to recommend from.", file=sys.stderr)
        raise SystemExit(1)
    results = recommend_for_investor(investor, startups, args.limit, category_first=args.category_first)
    _emit({"recommendations": [r.model_dump(mode="json", by_alias=True) for r in results]}, args.output)


def _run_compat(args: argparse.Namespace) -> None:
    """Run compat command."""
    from campus_match.scoring import calculate_compatibility_score

    startup = _require_startup(args, args.startup_id)
    investor = _load_investor(args)
    _emit({"startupId": startup.id, "compatibilityScore": calculate_compatibility_score(investor, startup)})


def _run_summarize(args: argparse.Namespace) -> None:
    """Run summarize command."""
    from campus_match.analysis import summarize_text

    text = _text_from_args(args)
    summary = summarize_text(text, args.max_sentences)
    _emit({"summary": summary, "originalLength": len(text), "summaryLength": len(summary)})


def _run_potential(args: argparse.Namespace) -> None:
    """Run potential command."""
    from campus_match.scoring import predict_investment_potential

    startup = _require_startup(args, args.startup_id)
    prediction = predict_investment_potential(startup)
    _emit({"startupId": startup.id, "startupName": startup.name, **prediction.model_dump()})


def _run_sentiment(args: argparse.Namespace) -> None:
    """Run sentiment command."""
    from campus_match.analysis import analyze_sentiment

    if not args.text.strip():
        raise SystemExit("Text is required")
    result = analyze_sentiment(args.text, args.rating)
    _emit({"text": args.text, "sentiment": result.label, "score": result.score})


def _run_review(args: argparse.Namespace) -> None:
    """Run review command."""
    try:
        review, was_new = _open_store(args).add_review(args.startup_id, args.user_id, args.rating, args.comment)
    except ValueError as e:
        raise SystemExit(str(e))
    _emit({"message": "Review added" if was_new else "Review updated", "review": review.model_dump(mode="json")})


def _run_tags(args: argparse.Namespace) -> None:
    """Run tags command."""
    from campus_match.analysis import generate_tags

    _emit({"tags": generate_tags(_text_from_args(args), args.max_tags)})


def _run_chat(args: argparse.Namespace) -> None:
    """Run chat command."""
    from campus_match.chatbot import route_query

    if not args.query.strip():
        raise SystemExit("Query is required")
    investor = _load_investor(args)
    source = _open_source(args)
    try:
        reply = route_query(args.query, investor, source)
    finally:
        source.close()
    _emit(reply.model_dump(mode="json"))


if __name__ == "__main__":
    main()
