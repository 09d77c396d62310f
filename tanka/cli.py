"""
Command line interface for the tanka mora counter.

Usage:
    tanka-count "たんぽぽのわたげがとんだはるのそらまいあがるようにこどものこえ"
    tanka-count --json "..."           # full analysis as JSON
    tanka-count --reading "蒲公英の..."  # count a kanji poem by its reading
    tanka-count -f poem.txt
    tanka-count --example
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from tanka import TANKA_PATTERN
from tanka.analysis import EXAMPLE_POEM, analyze
from tanka.config import ConfigError, get_ruleset_name, get_warning_threshold, parse_threshold
from tanka.logger import configure_level, logger
from tanka.nlp import UnknownRulesetError, get_reading_converter
from tanka.nlp.japanese import RULESETS
from tanka.schema import LineStatus, TankaAnalysis

STATUS_LABELS = {
    LineStatus.empty: "-",
    LineStatus.match: "✓",
    LineStatus.mismatch: "✗",
}


def format_analysis_text(analysis: TankaAnalysis) -> str:
    """Format an analysis as the plain-text report."""
    lines = [f"{analysis.total_mora} 音 / {analysis.expected_total} 音"]

    for line in analysis.lines:
        if line.is_overflow:
            lines.append(f"{line.display}  (+{line.mora}音)")
        else:
            label = STATUS_LABELS[line.status]
            lines.append(f"{line.display}  [{line.target}音 {label} {line.mora}]")

    return '\n'.join(lines)


def non_negative_int(raw: str) -> int:
    """argparse type for --threshold, same rules as TANKA_WARNING_THRESHOLD."""
    try:
        return parse_threshold("--threshold", raw)
    except ConfigError as e:
        raise argparse.ArgumentTypeError(e.reason)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tanka-count",
        description="Count mora in a tanka and split it into 5-7-5-7-7 lines",
    )
    parser.add_argument("text", nargs="?", help="Poem text (read from stdin when omitted)")
    parser.add_argument("-f", "--file", help="Read the poem from a UTF-8 text file")
    parser.add_argument("--ruleset", choices=sorted(RULESETS.keys()),
                        help="Character classification rule set (default: TANKA_RULESET or 'standard')")
    parser.add_argument("--threshold", type=non_negative_int,
                        help="Allowed distance from 31 mora before warning (default: TANKA_WARNING_THRESHOLD or 5)")
    parser.add_argument("--reading", action="store_true",
                        help="Convert kanji to their hiragana reading before counting")
    parser.add_argument("--json", action="store_true", help="Print the full analysis as JSON")
    parser.add_argument("--example", action="store_true", help="Analyze the bundled example poem")
    return parser


def read_input(args) -> str:
    if args.example:
        return EXAMPLE_POEM
    if args.file:
        return Path(args.file).read_text(encoding="utf-8")
    if args.text is not None:
        return args.text
    return sys.stdin.read()


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    load_dotenv()
    configure_level()

    ruleset = args.ruleset or get_ruleset_name()
    threshold = args.threshold
    if threshold is None:
        try:
            threshold = get_warning_threshold()
        except ConfigError as e:
            logger.error(str(e))
            return 1

    try:
        text = read_input(args)
    except OSError as e:
        logger.error(f"Could not read {args.file}: {e}")
        return 1

    # Trailing newline from files / stdin is not part of the poem
    text = text.rstrip("\r\n")

    if args.reading:
        text = get_reading_converter().to_hiragana(text)

    try:
        analysis = analyze(
            text,
            TANKA_PATTERN,
            ruleset=ruleset,
            warning_threshold=threshold,
        )
    except UnknownRulesetError as e:
        logger.error(str(e))
        return 1

    if analysis.warning:
        logger.warning(analysis.warning)

    if args.json:
        print(json.dumps(analysis.model_dump(mode="json"), ensure_ascii=False, indent=2))
    else:
        print(format_analysis_text(analysis))

    return 0


if __name__ == "__main__":
    sys.exit(main())
