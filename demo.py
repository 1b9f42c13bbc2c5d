"""
demo.py

Minimal CLI demo for fncontract.
- Satisfies each standard capability with a lambda, a function or a bound method
- Prints the results to standard output
- Exits with status 1 and a readable diagnostic when parsing fails
"""

import argparse
import logging
import random
import sys
from typing import List, Optional

from fncontract import (
    BiConsumer,
    BinaryChooser,
    ContractError,
    Printer,
    Student,
    Supplier,
    Transformer,
    format_error_for_user,
    parse_decimal,
    random_choice,
)

logger = logging.getLogger("demo")

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

FAANG = ["Meta", "Amazon", "Netflix", "Google", "Apple"]


class NamePrinter:
    def print_two_names(self, name1: str, name2: str) -> None:
        print("name1 " + name1)
        print("name2 " + name2)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="fncontract callable contract demo")
    parser.add_argument(
        "--text",
        default="123.45",
        help="Decimal text to transform (default: 123.45). "
             "Pass negative values as --text=VALUE, e.g. --text=-2.5e1",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random chooser")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: WARNING)",
    )
    return parser


def run(text: str, seed: Optional[int] = None) -> None:
    """Run every demonstration in order. ParseError propagates."""
    printer = Printer(lambda n: print(n))
    printer.print("Hello World")

    processor = Transformer(parse_decimal)
    print(processor.transform(text))

    eat = Supplier(lambda: "Eating a burger")
    print(eat.get())

    rng = random.Random(seed) if seed is not None else None
    game = BinaryChooser(random_choice(rng))
    print(game.choose(FAANG[0], FAANG[3]))
    game.no_show()

    print(FAANG)

    consumer = BiConsumer(NamePrinter().print_two_names)
    consumer.consume("Alice", "Bob")

    print(Student(1, "Ada Lovelace", "ada@example.org", "Mathematics"))


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Running demo with text=%r seed=%r", args.text, args.seed)

    try:
        run(args.text, args.seed)
    except ContractError as e:
        logger.debug("Demo failed: %s", e.format_short())
        print(format_error_for_user(e), file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
