"""Command-line entrypoint: collect personal data and report the verdict.

Usage:
    cadastro                                  # prompts for every field
    cadastro --name "Nathan Almeida" --email nathan@email.com \
        --cpf 529.982.247-25 --birth-date 30/09/2000
"""

from __future__ import annotations

import argparse
import logging
import sys

from cadastro.clock import SystemClock
from cadastro.core.config import AppSettings
from cadastro.models.user import UserInput
from cadastro.validators.birth_date import describe_formats, formats_named
from cadastro.validators.user_validator import UserValidatorService

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Validate name, email, CPF and birth date")
    parser.add_argument("--name", default=None, help="Full name (letters and single spaces)")
    parser.add_argument("--email", default=None, help="Email address")
    parser.add_argument("--cpf", default=None, help="CPF, with or without punctuation")
    parser.add_argument("--birth-date", default=None, help="Birth date (dd/MM/yyyy, ddMMyyyy or ddMMyy)")
    parser.add_argument(
        "--lenient-names", action="store_true", help="Accept repeated spaces inside names"
    )
    parser.add_argument(
        "--strict-cpf", action="store_true", help="Only accept 00000000000 or 000.000.000-00"
    )
    parser.add_argument("--log-level", choices=LOG_LEVELS, default=None, help="Log verbosity (stderr)")
    return parser.parse_args(argv)


def apply_overrides(settings: AppSettings, args: argparse.Namespace) -> AppSettings:
    """Layer command-line switches over the environment-derived settings."""
    update: dict[str, object] = {}
    if args.lenient_names:
        update["reject_double_spaces"] = False
    if args.strict_cpf:
        update["strict_id_format"] = True
    if args.log_level:
        settings = settings.model_copy(update={"log_level": args.log_level})
    if update:
        validation = settings.validation.model_copy(update=update)
        settings = settings.model_copy(update={"validation": validation})
    return settings


def ask(prompt: str) -> str:
    """Print ``prompt`` and read one line; end of input reads as blank."""
    print(prompt)
    try:
        return input()
    except EOFError:
        return ""


def collect(args: argparse.Namespace, settings: AppSettings) -> UserInput:
    formats = describe_formats(formats_named(settings.validation.date_formats)).replace("'", "")
    name = args.name if args.name is not None else ask("Digite seu nome: ")
    email = args.email if args.email is not None else ask("Digite seu email: ")
    cpf = args.cpf if args.cpf is not None else ask("Digite seu CPF: ")
    birth_date = (
        args.birth_date
        if args.birth_date is not None
        else ask(f"Digite sua data de nascimento ({formats}): ")
    )
    return UserInput(name=name, email=email, id_number=cpf, birth_date=birth_date)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    settings = apply_overrides(AppSettings(), args)
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.debug("environment=%s", settings.environment)

    user = collect(args, settings)
    outcome = UserValidatorService(settings=settings, clock=SystemClock()).validate(user)

    if outcome.ok:
        print("Dados do usuário:")
        for line in outcome.unwrap().display_lines():
            print(line)
        return 0

    print("Erros encontrados:")
    for message in outcome.messages:
        print(f"- {message}")
    return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
