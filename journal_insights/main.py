import argparse
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from .analyzer import JournalAnalyzer
from .config import LOG_FORMAT, LOG_LEVEL, AnalyzerConfig
from .services.key_value_store import FileKeyValueStore, InMemoryKeyValueStore

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="journal-insights",
        description="Classify business journal entries by category, mood and energy.",
    )
    parser.add_argument("text", nargs="?", help="Entry text (read from stdin if omitted)")
    parser.add_argument("--user-id", help="Apply this user's stored corrections")
    parser.add_argument(
        "--store-dir", type=Path, help="Directory holding persisted user corrections"
    )
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument(
        "--explain", action="store_true", help="Show nearest examples and key terms"
    )
    parser.add_argument(
        "--self-check", action="store_true", help="Verify reference entries and exit"
    )
    parser.add_argument("--log-level", default=LOG_LEVEL, help="Logging level")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the journal-insights command line tool."""
    # Load environment variables from .env file
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(env_path)

    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )

    store = FileKeyValueStore(args.store_dir) if args.store_dir else InMemoryKeyValueStore()
    analyzer = JournalAnalyzer(store=store, config=AnalyzerConfig.from_env())

    if args.self_check:
        passed = analyzer.self_check()
        print("Self-check passed" if passed else "Self-check failed")
        return 0 if passed else 1

    text = args.text if args.text is not None else sys.stdin.read()
    if not text.strip():
        logger.error("No entry text provided")
        return 2

    if args.explain:
        print(json.dumps(analyzer.explain(text), indent=2))
        return 0

    result = analyzer.classify_entry(text, user_id=args.user_id)
    if args.json:
        print(result.model_dump_json(indent=2))
    else:
        print(
            f"{result.business_category} | {result.primary_mood} "
            f"({result.mood_polarity}, {result.energy} energy) | "
            f"{result.confidence}% | {result.rationale}"
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
