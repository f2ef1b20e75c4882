import argparse
import logging
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

from safecalc.adapters.console import StreamConsoleAdapter
from safecalc.components.arithmetic import (
    char_at,
    circle_area,
    difference,
    safe_divide,
    safe_percent,
    safe_sqrt,
)
from safecalc.components.parsing import parse_int, parse_number
from safecalc.components.recovery import ConsolePort, prompt_int
from safecalc.domain.errors import CalcError
from safecalc.rules import Rules, default_rules, load_rules, resolve_rules_path

logger = logging.getLogger("cli")


def get_rules(explicit_path: str | None) -> Rules:
    path = resolve_rules_path(explicit_path)
    if not path.exists():
        if explicit_path is not None:
            logger.error(f"Rules file {path} not found.")
            sys.exit(1)
        return default_rules()

    try:
        return load_rules(Path(path))
    except ValueError as e:
        logger.error(f"Invalid rules file {path}: {e}")
        sys.exit(1)


def configure_logging(rules: Rules) -> None:
    logging.basicConfig(level=rules.logging.level, format=rules.logging.format)
    logging.getLogger("safecalc").setLevel(rules.logging.level)
    logger.setLevel(rules.logging.level)


# --- Command handlers ---


def handle_percent(args: argparse.Namespace) -> int:
    return safe_percent(parse_int(args.part), parse_int(args.whole))


def handle_difference(args: argparse.Namespace) -> int:
    return difference(parse_int(args.a), parse_int(args.b))


def handle_divide(args: argparse.Namespace) -> int:
    return safe_divide(parse_int(args.dividend), parse_int(args.divisor))


def handle_sqrt(args: argparse.Namespace) -> float:
    return safe_sqrt(parse_number(args.x))


def handle_area(args: argparse.Namespace) -> float:
    return circle_area(parse_number(args.radius))


def handle_char(args: argparse.Namespace) -> str:
    return char_at(args.text, parse_int(args.index))


HANDLERS: dict[str, Callable[[argparse.Namespace], Any]] = {
    "percent": handle_percent,
    "difference": handle_difference,
    "divide": handle_divide,
    "sqrt": handle_sqrt,
    "area": handle_area,
    "char": handle_char,
}


def handle_interactive(rules: Rules, console: ConsolePort) -> None:
    attempts = rules.prompt.max_attempts
    part = prompt_int("part: ", console=console, max_attempts=attempts)
    whole = prompt_int("whole: ", console=console, max_attempts=attempts)
    result = safe_percent(part, whole)
    console.write(f"{part}/{whole} = {result}%\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="safecalc", description="Validated arithmetic from the command line"
    )
    parser.add_argument("--rules", help="Path to rules.yaml (default: $SAFECALC_RULES_PATH)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    percent_parser = subparsers.add_parser("percent", help="Percentage of WHOLE that PART is")
    percent_parser.add_argument("part")
    percent_parser.add_argument("whole")

    diff_parser = subparsers.add_parser("difference", help="A - B, requires A >= B")
    diff_parser.add_argument("a")
    diff_parser.add_argument("b")

    divide_parser = subparsers.add_parser("divide", help="Integer division, truncated")
    divide_parser.add_argument("dividend")
    divide_parser.add_argument("divisor")

    sqrt_parser = subparsers.add_parser("sqrt", help="Square root of a non-negative number")
    sqrt_parser.add_argument("x")

    area_parser = subparsers.add_parser("area", help="Area of a circle")
    area_parser.add_argument("radius")

    char_parser = subparsers.add_parser("char", help="Character of TEXT at INDEX")
    char_parser.add_argument("text")
    char_parser.add_argument("index")

    # interactive
    subparsers.add_parser("interactive", help="Prompt for part and whole, print the percent")

    return parser


def main(argv: list[str] | None = None, console: ConsolePort | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    rules = get_rules(args.rules)
    configure_logging(rules)

    try:
        if args.command == "interactive":
            handle_interactive(rules, console or StreamConsoleAdapter())
            return

        result = HANDLERS[args.command](args)
    except CalcError as e:
        logger.error(f"{args.command}: {e.message}")
        sys.exit(1)

    logger.debug(f"{args.command} -> {result!r}")
    print(result)


if __name__ == "__main__":
    main()
