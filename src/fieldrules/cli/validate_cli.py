"""
Command-line interface for validating JSON requests against a YAML rule file.

Usage:
    fieldrules-validate validate --rules <rules.yaml> --input <request.json>
    fieldrules-validate summary --rules <rules.yaml>
"""

import argparse
import json
import sys
from pathlib import Path

from fieldrules.core.models import ValidationReport
from fieldrules.core.rules import RuleEngine
from fieldrules.observability.logger import get_logger, log_operation, setup_logger

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_USAGE = 2


def _load_engine(rules_path: str) -> RuleEngine | None:
    try:
        return RuleEngine.from_config(rules_path)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Could not load rules: {e}")
        return None


def validate_command(args) -> int:
    """
    Execute the validate command.

    The input file holds one JSON object or a list of objects; the outcome of
    each is printed as JSON on stdout.

    Args:
        args: Command-line arguments

    Returns:
        Process exit code
    """
    engine = _load_engine(args.rules)
    if engine is None:
        return EXIT_USAGE

    input_path = Path(args.input)
    if not input_path.exists():
        logger.error(f"Input file not found: {args.input}")
        return EXIT_USAGE

    try:
        payload = json.loads(input_path.read_text())
    except ValueError as e:
        logger.error(f"Input file is not valid JSON: {e}")
        return EXIT_USAGE

    requests = payload if isinstance(payload, list) else [payload]
    with log_operation("Validating requests", logger=logger, requests=len(requests)):
        outcomes = engine.validate_batch(requests)

    documents = [outcome.model_dump() for outcome in outcomes]
    print(json.dumps(documents if isinstance(payload, list) else documents[0], indent=args.indent))

    if all(isinstance(outcome, ValidationReport) and outcome.ok for outcome in outcomes):
        return EXIT_OK
    return EXIT_INVALID


def summary_command(args) -> int:
    """Print a summary of the rule file, failing when it names unknown rules."""
    engine = _load_engine(args.rules)
    if engine is None:
        return EXIT_USAGE

    summary = engine.get_rule_summary()
    print(json.dumps(summary, indent=args.indent))
    return EXIT_INVALID if summary["unknown_rules"] else EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fieldrules-validate",
        description="Validate request fields against declarative rules",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Validate one request
  fieldrules-validate validate --rules config/rules.yaml --input request.json

  # Validate a list of requests with compact output
  fieldrules-validate validate --rules config/rules.yaml --input requests.json --indent 0

  # Check a rule file for unknown rule names
  fieldrules-validate summary --rules config/rules.yaml
        """
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (default: LOG_LEVEL env or INFO)"
    )
    parser.add_argument(
        "--log-format",
        default=None,
        choices=["json", "text"],
        help="Log format (default: LOG_FORMAT env or json)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    validate_parser = subparsers.add_parser("validate", help="Validate JSON requests")
    validate_parser.add_argument("--rules", required=True, help="Path to rules YAML file")
    validate_parser.add_argument("--input", required=True, help="Path to JSON request file")
    validate_parser.add_argument("--indent", type=int, default=2, help="JSON output indent (default: 2)")

    summary_parser = subparsers.add_parser("summary", help="Summarize a rule file")
    summary_parser.add_argument("--rules", required=True, help="Path to rules YAML file")
    summary_parser.add_argument("--indent", type=int, default=2, help="JSON output indent (default: 2)")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.log_level or args.log_format:
        setup_logger(level=args.log_level, format_type=args.log_format)

    if not args.command:
        parser.print_help()
        return EXIT_USAGE

    if args.command == "validate":
        return validate_command(args)
    return summary_command(args)


if __name__ == "__main__":
    sys.exit(main())
