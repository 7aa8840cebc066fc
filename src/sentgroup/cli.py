"""Command-line interface for sentence grouping and boundary rules management."""

import argparse
import sys
import json
from pathlib import Path
from typing import List, Optional, TextIO

from sentgroup.boundaries.config import BoundaryConfig, WHITESPACE_NEWLINE, PTB_NEWLINE_TOKEN
from sentgroup.boundaries.loader import load_rules, RulesLoadError
from sentgroup.segmenters.sentence import SentenceSegmenter


def newline_token_for(config: BoundaryConfig) -> Optional[str]:
    """Pick a newline marker the config discards, or None if it discards neither."""
    for token in (WHITESPACE_NEWLINE, PTB_NEWLINE_TOKEN):
        if config.is_discard(token):
            return token
    return None


def read_tokens(stream: TextIO, newline_token: Optional[str] = WHITESPACE_NEWLINE) -> List[str]:
    """
    Read pre-tokenized text: tokens are separated by whitespace.

    Every line break becomes newline_token, unless it is None.
    """
    tokens: List[str] = []
    for line in stream:
        tokens.extend(line.split())
        if newline_token is not None and line.endswith("\n"):
            tokens.append(newline_token)
    return tokens


def validate_rules_command(args):
    """Validate a boundary rules file."""
    try:
        rules_path = Path(args.rules_file)
        if not rules_path.exists():
            print(f"Error: Rules file not found: {rules_path}")
            return 1

        print(f"Validating rules: {rules_path}")
        rules = load_rules(rules_path)
        rules.to_config()

        print("✅ Rules validation successful!")
        print(f"   Version: {rules.version}")
        print(f"   Boundary pattern: {rules.boundary_pattern}")
        print(f"   Followers: {len(rules.followers)}")
        print(f"   Discard: {len(rules.discard)} literal, {len(rules.discard_patterns)} regex, "
              f"{len(rules.html_discard_tags)} html tags")
        if rules.region_begin_pattern:
            print(f"   Region: {rules.region_begin_pattern} .. {rules.region_end_pattern or 'end of input'}")

        if args.verbose:
            print("\nFollowers:")
            for follower in rules.followers:
                print(f"   {follower!r}")
            print("\nDiscard:")
            for token in rules.discard:
                print(f"   {token!r}")
            for pattern in rules.discard_patterns:
                print(f"   /{pattern}/")
            for tag in rules.html_discard_tags:
                print(f"   <{tag}>")

        return 0

    except RulesLoadError as e:
        print(f"❌ Rules validation failed: {e}")
        return 1


def split_command(args):
    """Group pre-tokenized text into sentences."""
    try:
        if args.rules:
            config = load_rules(args.rules).to_config()
        else:
            config = BoundaryConfig.default()
        if args.one_sentence:
            config = config.with_one_sentence_mode()
        newline_token = None if args.keep_newlines else newline_token_for(config)

        if args.input_file:
            with open(args.input_file, "r", encoding="utf-8") as f:
                tokens = read_tokens(f, newline_token)
        else:
            tokens = read_tokens(sys.stdin, newline_token)

        sentences = SentenceSegmenter(config).segment(tokens)

        if args.json:
            print(json.dumps(sentences, ensure_ascii=False))
        else:
            for sentence in sentences:
                print(" ".join(sentence))

        return 0

    except RulesLoadError as e:
        print(f"❌ Cannot load rules: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"❌ Cannot read input: {e}", file=sys.stderr)
        return 1
    except UnicodeDecodeError as e:
        print(f"❌ Input is not valid UTF-8: {e}", file=sys.stderr)
        return 1


def info_command(args):
    """Display sentgroup version and system information."""
    print("sentgroup CLI")
    print("=" * 50)

    try:
        import importlib.metadata
        version = importlib.metadata.version("sentgroup")
        print(f"Version: {version}")
    except Exception:
        print("Version: development")

    print(f"Python: {sys.version.split()[0]}")

    print("\nOptional dependencies:")

    try:
        import langchain_core
        print(f"   ✅ langchain-core: {langchain_core.__version__}")
    except ImportError:
        print("   ❌ langchain-core: not installed")

    return 0


def create_parser():
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="sentgroup",
        description="Group tokenized text into sentences"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Validate command
    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate a boundary rules file"
    )
    validate_parser.add_argument(
        "rules_file",
        help="Path to the rules YAML file"
    )
    validate_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="List followers and discard entries"
    )

    # Split command
    split_parser = subparsers.add_parser(
        "split",
        help="Split whitespace-tokenized text into sentences"
    )
    split_parser.add_argument(
        "input_file",
        nargs="?",
        help="Tokenized text file (default: stdin)"
    )
    split_parser.add_argument(
        "-r", "--rules",
        help="Boundary rules YAML file (default: built-in English rules)"
    )
    split_parser.add_argument(
        "--one-sentence",
        action="store_true",
        help="Treat the whole input as one sentence"
    )
    split_parser.add_argument(
        "--keep-newlines",
        action="store_true",
        help="Do not turn line breaks into sentence breaks"
    )
    split_parser.add_argument(
        "--json",
        action="store_true",
        help="Print a JSON list of token lists"
    )

    # Info command
    subparsers.add_parser(
        "info",
        help="Display version and system information"
    )

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "validate":
        return validate_rules_command(args)
    elif args.command == "split":
        return split_command(args)
    elif args.command == "info":
        return info_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
