"""
CLI interface for SecurePass.
"""

import logging
import sys
from typing import List

import click

from . import __version__
from .clipboard import get_clipboard_manager
from .config import DEFAULT_LENGTH, GenerationOptions
from .exceptions import ClipboardError
from .utils.entropy import character_classes, estimate_entropy, rate_strength
from .utils.password_generator import build_charset, try_generate_password

logger = logging.getLogger(__name__)


def configure_logging(debug: bool) -> None:
    """Send log records to stderr; debug output only when requested."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def yes_no(value: bool) -> str:
    return "Yes" if value else "No"


def display_password(password: str, charset_size: int, verbose: bool) -> None:
    """
    Print a generated password, with statistics in verbose mode.

    Args:
        password: The generated password
        charset_size: Size of the effective charset it was drawn from
        verbose: Show character classes, entropy and strength rating
    """
    click.secho("✅ Generated Password:", fg="green")
    click.secho(password, bold=True)

    if not verbose:
        return

    classes = character_classes(password)
    entropy = estimate_entropy(len(password), charset_size)
    rating = rate_strength(entropy)

    click.secho("\n📊 Password Details:", fg="cyan")
    click.secho(f"   Length: {len(password)} characters", fg="cyan")
    click.secho(f"   Charset size: {charset_size} characters", fg="cyan")
    click.secho(f"   Contains symbols: {yes_no(classes['symbols'])}", fg="cyan")
    click.secho(f"   Contains numbers: {yes_no(classes['numbers'])}", fg="cyan")
    click.secho(f"   Contains uppercase: {yes_no(classes['uppercase'])}", fg="cyan")
    click.secho(f"   Contains lowercase: {yes_no(classes['lowercase'])}", fg="cyan")
    click.secho(f"   Estimated entropy: {entropy:.1f} bits", fg="cyan")
    click.secho(f"   Security: {rating.label} ({rating.description})", fg=rating.color)


def parse_length(ctx: click.Context, param: click.Parameter, value: str) -> int:
    """Convert --length to an integer, exiting with status 1 when it is not one."""
    try:
        return int(value)
    except ValueError:
        click.secho("❌ Error generating password:", fg="red", err=True)
        click.secho(f"Length must be an integer, got {value!r}", fg="red", err=True)
        ctx.exit(1)


@click.command(context_settings={"auto_envvar_prefix": "SECUREPASS"})
@click.option("--length", "-l", default=str(DEFAULT_LENGTH), show_default=True,
              callback=parse_length,
              help="Length of the password (1-1000)")
@click.option("--symbols/--no-symbols", "-s/-S", default=False, show_default=True,
              help="Include special symbols (!@#$%^&* etc.)")
@click.option("--readable", "-r", is_flag=True,
              help="Exclude confusing characters (O, 0, I, l, 1, |)")
@click.option("--verbose", "-v", is_flag=True,
              help="Show detailed information about the generated password")
@click.option("--count", "-n", default=1, type=click.IntRange(1, 100), show_default=True,
              help="Number of passwords to generate")
@click.option("--copy", "-c", is_flag=True, help="Copy the password to the clipboard")
@click.option("--clear-after", default=60, type=click.IntRange(min=0), show_default=True,
              help="Seconds before the copied password is cleared (0 keeps it)")
@click.option("--unbiased", is_flag=True,
              help="Use rejection sampling for exactly uniform character selection")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.version_option(__version__, prog_name="securepass")
def cli(length: int, symbols: bool, readable: bool, verbose: bool, count: int,
        copy: bool, clear_after: int, unbiased: bool, debug: bool) -> None:
    """SecurePass - Generate secure passwords with customizable options."""
    configure_logging(debug)

    options = GenerationOptions(length=length, include_symbols=symbols, readable_only=readable)
    logger.debug(f"Generating {count} password(s) with {options}")

    passwords: List[str] = []
    for _ in range(count):
        result = try_generate_password(options, unbiased=unbiased)
        if not result.ok:
            logger.debug(f"Generation failed with {result.error.kind}")
            click.secho("❌ Error generating password:", fg="red", err=True)
            click.secho(str(result.error), fg="red", err=True)
            sys.exit(1)
        passwords.append(result.unwrap())

    charset_size = len(build_charset(symbols, readable))
    for password in passwords:
        display_password(password, charset_size, verbose)

    click.secho("\n💡 Tip: Use --help to see all available options", fg="bright_black")

    if copy:
        copy_to_clipboard("\n".join(passwords), clear_after)


def copy_to_clipboard(value: str, clear_after: int) -> None:
    """Copy to the clipboard and stay alive until it has been cleared."""
    try:
        clear_thread = get_clipboard_manager(clear_after).copy(value)
    except ClipboardError as e:
        click.echo(f"{e}", err=True)
        return

    click.secho("📋 Copied to clipboard!", fg="yellow")

    if clear_thread is None:
        return

    click.echo(f"   Clipboard will be cleared in {clear_after} seconds (Ctrl+C to keep it).")
    try:
        clear_thread.join()
    except KeyboardInterrupt:
        click.echo("\nClipboard left unchanged.")


def main() -> None:
    """Main entry point for the CLI application."""
    cli()


if __name__ == "__main__":
    main()
