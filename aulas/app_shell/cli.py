import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

from aulas.adapters.clock import SystemClock
from aulas.components.cpf import ValidateCpfInput, format_cpf, run_validate
from aulas.components.numeric import NumericInput, run
from aulas.components.weekday import WeekdayInput, run_weekday
from aulas.rules.loader import load_rules
from aulas.rules.models import Rules

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("cli")

RULES_PATH = "rules.yaml"
EXIT_INVALID = 2


def get_rules() -> Rules:
    path = Path(RULES_PATH)
    if not path.exists():
        logger.info(f"Rules file {RULES_PATH} not found, using defaults.")
        return Rules()
    return load_rules(path)


def fail(message: str) -> None:
    logger.error(message)
    sys.exit(EXIT_INVALID)


def handle_cpf(rules: Rules, args: argparse.Namespace) -> None:
    result = run_validate(ValidateCpfInput(cpf=args.number))
    if not result.success:
        fail(result.errors[0].message)

    verdict = "valid" if result.valid else "invalid"
    print(f"{format_cpf(result.cpf)}: {verdict}")


def handle_weekday(rules: Rules, args: argparse.Namespace) -> None:
    if args.date:
        try:
            day = datetime.strptime(args.date, rules.api.date_format).date()
        except ValueError:
            fail(f"Invalid date {args.date!r}, expected dd-mm-yyyy.")
    else:
        day = SystemClock().today()

    result = run_weekday(
        WeekdayInput(day=day.day, month=day.month, year=day.year),
        rules=rules.calendar,
    )
    if not result.success:
        fail(result.errors[0].message)

    print(f"{day.strftime(rules.api.date_format)}: {result.name}")


def handle_primes(rules: Rules, args: argparse.Namespace) -> None:
    if args.limit < 1:
        fail(f"Invalid limit: {args.limit}")

    sieve = run(NumericInput("sieve_of_eratosthenes", ([0] * (args.limit + 1),)))
    primes = run(NumericInput("primes_from_sieve", (sieve.value,)))
    print(" ".join(str(p) for p in primes.value))


def handle_fibonacci(rules: Rules, args: argparse.Namespace) -> None:
    result = run(NumericInput("nth_fibonacci", (args.n,)))
    if not result.success:
        fail(result.errors[0].message)

    print(result.value)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="CS Aulas CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # cpf
    cpf_parser = subparsers.add_parser("cpf", help="Validate CPF check digits")
    cpf_parser.add_argument("number", help="CPF, digits only or 111.444.777-35")

    # dia-da-semana
    weekday_parser = subparsers.add_parser("dia-da-semana", help="Day of week of a date")
    weekday_parser.add_argument("date", nargs="?", help="Date as dd-mm-yyyy (default: today)")

    # primos
    primes_parser = subparsers.add_parser("primos", help="Primes up to N (sieve)")
    primes_parser.add_argument("limit", type=int, help="Upper bound, inclusive")

    # fibonacci
    fib_parser = subparsers.add_parser("fibonacci", help="N-th Fibonacci number")
    fib_parser.add_argument("n", type=int, help="Index, starting at 0")

    args = parser.parse_args(argv)

    rules = get_rules()

    if args.command == "cpf":
        handle_cpf(rules, args)
    elif args.command == "dia-da-semana":
        handle_weekday(rules, args)
    elif args.command == "primos":
        handle_primes(rules, args)
    elif args.command == "fibonacci":
        handle_fibonacci(rules, args)


if __name__ == "__main__":
    main()
