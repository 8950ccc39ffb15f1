#!/usr/bin/env python3
"""
validate_lexicon.py - Sanity-check a morpheme dictionary file.

Checks:
- Every entry parses (difficulty range, required fields, unique tokens)
- unlocked_by points at an existing morpheme
- No prerequisite cycles (morphemes that could never be unlocked)
- Every example expression only uses known morphemes

Usage:
  python scripts/validate_lexicon.py
  python scripts/validate_lexicon.py --dictionary data/custom_morphemes.yaml
  python scripts/validate_lexicon.py --strict   # invalid example loops are problems too
"""

import argparse
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from dotenv import load_dotenv
load_dotenv(PROJECT_ROOT / ".env")

from pydantic import ValidationError

from extropialingo.engine import validate_expression
from extropialingo.lexicon import (
    MorphemeDictionary,
    load_dictionary,
    find_dangling_prerequisites,
    find_prerequisite_cycles,
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def check_dictionary(dictionary: MorphemeDictionary, strict: bool = False) -> list[str]:
    """
    Run all static checks on a loaded dictionary.

    Args:
        dictionary: Loaded morpheme dictionary
        strict: Also report examples that are not valid loops

    Returns:
        List of problem descriptions (empty if the dictionary is clean)
    """
    problems = []

    for token, prerequisite in find_dangling_prerequisites(dictionary).items():
        problems.append(f"{token}: unlocked_by '{prerequisite}' is not in the dictionary")

    for cycle in find_prerequisite_cycles(dictionary):
        problems.append(f"Prerequisite cycle: {' -> '.join(cycle + cycle[:1])}")

    for token, morpheme in dictionary.morphemes.items():
        for example in morpheme.examples:
            verdict = validate_expression(example, dictionary)
            if verdict.unknown_tokens:
                problems.append(
                    f"{token}: example '{example}' uses unknown morphemes "
                    f"{', '.join(verdict.unknown_tokens)}"
                )
            elif strict and not verdict.valid:
                problems.append(f"{token}: example '{example}' is not a valid loop: {' '.join(verdict.errors)}")

    return problems


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Validate a morpheme dictionary file")
    parser.add_argument(
        "--dictionary",
        type=Path,
        default=None,
        help="Dictionary YAML (default: $EXTROPIA_MORPHEMES_PATH or the packaged file)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Report example expressions that fail loop validation",
    )
    args = parser.parse_args(argv)

    try:
        dictionary = load_dictionary(args.dictionary)
    except (FileNotFoundError, ValueError, ValidationError) as e:
        logger.error(f"Failed to load dictionary: {e}")
        return 1

    logger.info(f"Checking {len(dictionary)} morphemes...")
    for category in dictionary.categories:
        logger.info(f"  {category}: {len(dictionary.by_category(category))}")

    problems = check_dictionary(dictionary, strict=args.strict)
    if problems:
        logger.warning(f"Found {len(problems)} problems:")
        for problem in problems:
            logger.warning(f"  - {problem}")
        return 1

    logger.info("Dictionary OK")
    return 0


if __name__ == '__main__':
    sys.exit(main())
