from typing import List

import typer

from .config import Settings
from .field import FieldPath, ValidationErrorList
from .intorpercent import INT_PATTERN, IntOrPercent, get_int_or_percent_value, get_percent_value
from .logging import get_logger
from .validation import FieldSyntaxValidator, should_enforce_immutability

app = typer.Typer(help="fieldguard – field syntax and append-only policy checks", no_args_is_help=True)


def safe_echo(message: str) -> None:
    """Echo message with an ASCII fallback for consoles that cannot encode it."""
    try:
        typer.echo(message)
    except UnicodeEncodeError:
        typer.echo(message.replace("✅", "[OK]").replace("❌", "[FAIL]").replace("–", "-"))


def _parse_path(path: str) -> FieldPath:
    return FieldPath.new(*path.split("."))


def _validator(subdomain_max_length: int, label_max_length: int) -> FieldSyntaxValidator:
    return FieldSyntaxValidator.from_settings(
        Settings(
            dns1123_subdomain_max_length=subdomain_max_length,
            dns1123_label_max_length=label_max_length,
        )
    )


def _report(errors: ValidationErrorList) -> None:
    if not errors:
        safe_echo("✅ valid")
        return
    for error in errors:
        safe_echo(f"❌ {error}")
    raise typer.Exit(code=1)


@app.command()
def name(
    value: str = typer.Argument(..., help="Object name to validate"),
    prefix: bool = typer.Option(False, "--prefix/--no-prefix", help="Treat the name as a generate-name prefix"),
) -> None:
    """Validate an object name as a DNS subdomain."""
    logger = get_logger(__name__)
    messages = FieldSyntaxValidator.from_settings().validate_name(value, prefix)
    logger.info(f"Checked name {value!r} (prefix={prefix}): {len(messages)} violation(s)")
    if not messages:
        safe_echo("✅ valid")
        return
    for message in messages:
        safe_echo(f"❌ {message}")
    raise typer.Exit(code=1)


@app.command()
def subdomain(
    value: str = typer.Argument(..., help="Value to check"),
    path: str = typer.Option("metadata.name", "--path", "-p", help="Dotted field path used in messages"),
    max_length: int = typer.Option(Settings.dns1123_subdomain_max_length, help="Maximum subdomain length"),
) -> None:
    """Validate a value as an RFC 1123 DNS subdomain."""
    validator = _validator(max_length, Settings.dns1123_label_max_length)
    _report(validator.validate_dns1123_subdomain(value, _parse_path(path)))


@app.command()
def label(
    value: str = typer.Argument(..., help="Value to check"),
    path: str = typer.Option("metadata.name", "--path", "-p", help="Dotted field path used in messages"),
    max_length: int = typer.Option(Settings.dns1123_label_max_length, help="Maximum label length"),
) -> None:
    """Validate a value as an RFC 1123 DNS label."""
    validator = _validator(Settings.dns1123_subdomain_max_length, max_length)
    _report(validator.validate_dns1123_label(value, _parse_path(path)))


@app.command()
def hyphens(
    value: str = typer.Argument(..., help="Name to check"),
    path: str = typer.Option("metadata.name", "--path", "-p", help="Dotted field path used in messages"),
) -> None:
    """Reject names containing two consecutive hyphens."""
    _report(FieldSyntaxValidator().validate_name_consecutive_hyphens(value, _parse_path(path)))


@app.command("append-check")
def append_check(
    old: List[str] = typer.Option([], "--old", help="Current list entry (repeat in order)"),
    new: List[str] = typer.Option([], "--new", help="Updated list entry (repeat in order)"),
) -> None:
    """
    Decide whether a list update is a pure trailing append.

    Prints 'allowed' and exits 0 for an append, prints 'enforce' and exits 1
    for anything else.
    """
    logger = get_logger(__name__)
    enforce = should_enforce_immutability(new, old)
    logger.info(f"Compared {len(old)} old against {len(new)} new entries")
    if enforce:
        safe_echo("enforce")
        raise typer.Exit(code=1)
    safe_echo("allowed")


@app.command()
def percent(
    value: str = typer.Argument(..., help="An integer like '3' or a percentage like '25%'"),
) -> None:
    """Resolve an integer-or-percentage value."""
    if INT_PATTERN.fullmatch(value):
        parsed = IntOrPercent.from_int(int(value))
    else:
        parsed = IntOrPercent.from_str(value)
    _, is_percent = get_percent_value(parsed)
    safe_echo(f"value: {get_int_or_percent_value(parsed)}")
    safe_echo(f"percent: {'yes' if is_percent else 'no'}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
