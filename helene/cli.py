#!/usr/bin/env python3
"""Command-line interface for running the analytics over an entry export.

Usage:
    python -m helene.cli --help
    python -m helene.cli report --input entries.json --locale en
    python -m helene.cli sentiment "Je me sens bien aujourd'hui"
    python -m helene.cli backfill --input entries.json --output entries_scored.json
    python -m helene.cli list --symptoms
"""
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from helene.shared.models import DailyLogEntry, SymptomCatalog, entries_from_dicts

logger = logging.getLogger(__name__)


def setup_parser() -> argparse.ArgumentParser:
    """Set up argument parser."""
    parser = argparse.ArgumentParser(
        description="Helene health-log analytics CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level"
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Report command
    report_parser = subparsers.add_parser("report", help="Run every analysis over an export")
    report_parser.add_argument(
        "--input", required=True, type=Path,
        help="JSON file: a list of entries or {\"entries\": [...]}"
    )
    report_parser.add_argument(
        "--locale", default="fr",
        help="Locale tag for the wording (default fr)"
    )
    report_parser.add_argument(
        "--output", type=Path,
        help="Write the report here instead of stdout"
    )

    # Sentiment command
    sentiment_parser = subparsers.add_parser("sentiment", help="Classify one note")
    sentiment_parser.add_argument("text", help="Note text")
    sentiment_parser.add_argument("--locale", default="fr", help="Locale tag")

    # Backfill command
    backfill_parser = subparsers.add_parser("backfill", help="Add missing sentiment snapshots")
    backfill_parser.add_argument("--input", required=True, type=Path, help="Entry export")
    backfill_parser.add_argument("--output", required=True, type=Path, help="Destination file")
    backfill_parser.add_argument("--locale", default="fr", help="Lexicon locale")
    backfill_parser.add_argument(
        "--force", action="store_true",
        help="Recompute snapshots that already exist"
    )

    # List command
    list_parser = subparsers.add_parser("list", help="List catalog contents")
    list_parser.add_argument(
        "--symptoms", action="store_true",
        help="List tracked symptoms with scale and domain"
    )

    return parser


def load_entries(path: Path) -> List[DailyLogEntry]:
    """Read an entry export.

    Raises:
        ValueError: If the file is not a list of entry objects
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    rows = data.get("entries") if isinstance(data, dict) else data
    if not isinstance(rows, list) or not all(isinstance(row, dict) for row in rows):
        raise ValueError(f"{path} must hold a list of entry objects")
    return entries_from_dicts(rows)


def build_report(entries: Sequence[DailyLogEntry], locale: str) -> Dict[str, Any]:
    """Every analysis over one window, as JSON-ready data."""
    from helene.services.insight_service import InsightGenerator
    from helene.services.qol_service import QualityOfLifeScorer, summarize_report
    from helene.services.safety_service import RedFlagDetector
    from helene.services.trend_service import TrendAggregator, build_assistant_digest

    quality_of_life = QualityOfLifeScorer().score(entries, locale)
    insight_generator = InsightGenerator()
    trend = TrendAggregator().summarize(entries)

    return {
        "locale": locale,
        "entries": len(entries),
        "qualityOfLife": dict(quality_of_life.to_dict(), summary=summarize_report(quality_of_life)),
        "weeklyInsights": [i.to_dict() for i in insight_generator.weekly(entries, locale)],
        "monthlyInsights": [i.to_dict() for i in insight_generator.monthly(entries, locale)],
        "redFlags": [a.to_dict() for a in RedFlagDetector().detect(entries, locale)],
        "trend": {
            "summary": trend.to_dict(),
            "digest": build_assistant_digest(trend, entries, locale),
        },
    }


def _write_json(data: Any, output: Optional[Path]) -> None:
    text = json.dumps(data, ensure_ascii=False, indent=2)
    if output is None:
        print(text)
    else:
        output.write_text(text + "\n", encoding="utf-8")
        print(f"✅ Written to {output}")


def cmd_report(args) -> int:
    """Full report command."""
    try:
        entries = load_entries(args.input)
    except (OSError, ValueError) as e:
        print(f"❌ Cannot read {args.input}: {e}", file=sys.stderr)
        return 1

    report = build_report(entries, args.locale)
    _write_json(report, args.output)

    if any(alert["severity"] == "critical" for alert in report["redFlags"]):
        logger.critical(
            "CLI_REPORT_CRITICAL_ALERTS",
            extra={"alerts": [a["id"] for a in report["redFlags"] if a["severity"] == "critical"]}
        )
    return 0


def cmd_sentiment(args) -> int:
    """Single note classification command."""
    from helene.services.sentiment_service import SentimentClassifier

    result = SentimentClassifier(locale=args.locale).analyze(args.text)
    _write_json(result.to_dict(), None)
    return 0


def cmd_backfill(args) -> int:
    """Sentiment backfill command."""
    from helene.services.sentiment_service import SentimentClassifier, backfill_sentiment

    try:
        entries = load_entries(args.input)
    except (OSError, ValueError) as e:
        print(f"❌ Cannot read {args.input}: {e}", file=sys.stderr)
        return 1

    updated = backfill_sentiment(entries, SentimentClassifier(locale=args.locale), force=args.force)
    _write_json([entry.to_dict() for entry in updated], args.output)
    return 0


def cmd_list(args) -> int:
    """List catalog command."""
    if args.symptoms:
        print("\nTracked Symptoms:")
        print("-" * 40)
        for spec in SymptomCatalog.SYMPTOMS:
            print(f"  {spec.symptom.value}: 0-{spec.max_intensity} ({spec.domain.value})")
        for spec in SymptomCatalog.SIGNALS:
            print(f"  {spec.signal.value}: {spec.min_value}-{spec.max_value} inverted ({spec.domain.value})")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    parser = setup_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.command == "report":
        return cmd_report(args)
    elif args.command == "sentiment":
        return cmd_sentiment(args)
    elif args.command == "backfill":
        return cmd_backfill(args)
    elif args.command == "list":
        return cmd_list(args)
    else:
        parser.print_help()
        return 0


if __name__ == "__main__":
    sys.exit(main())
