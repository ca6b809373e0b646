"""
Vowels CLI - Command line interface for the vowel catalog.

Run without a command to print every vowel, one per line.

Commands:
- list: Print vowels, optionally filtered by classification
- show: Print a single vowel as JSON
- validate: Check the integrity of the catalog
"""

import json
import logging
import sys
from typing import List, Optional

import click
from pydantic import ValidationError

from vowels import __version__
from vowels.config import VowelsConfig
from vowels.models.vowel import Vowel, Height, Backness, Rounding
from vowels.store.catalog import catalog

logger = logging.getLogger(__name__)


def choices(enum_cls) -> click.Choice:
    """click.Choice over the values of an enumeration."""
    return click.Choice([member.value for member in enum_cls])


def describe_errors(error: ValidationError) -> str:
    """One line per invalid setting, e.g. 'output_format: Value error, ...'."""
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in error.errors()
    )


def print_vowels(vowels: List[Vowel], output_format: str) -> None:
    """Print vowels one per line, or as a JSON array."""
    if output_format == 'json':
        click.echo(json.dumps([v.model_dump(mode='json') for v in vowels], indent=2, ensure_ascii=False))
    else:
        for vowel in vowels:
            click.echo(str(vowel))


@click.group(invoke_without_command=True)
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Write debug logging to stderr')
@click.pass_context
def cli(ctx: click.Context, verbose: bool):
    """Vowels - the IPA vowel catalog"""
    settings_error = None
    try:
        ctx.obj = VowelsConfig()
    except ValidationError as e:
        settings_error = describe_errors(e)

    if verbose:
        level = logging.DEBUG
    elif ctx.obj is not None:
        level = ctx.obj.log_level
    else:
        level = logging.WARNING
    logging.getLogger('vowels').setLevel(level)

    if ctx.invoked_subcommand is None:
        # Settings never change the listing itself
        if settings_error:
            logger.warning("Ignoring invalid settings: %s", settings_error)
        logger.debug("No command given, printing the whole catalog")
        for vowel in catalog:
            click.echo(str(vowel))
    elif settings_error:
        raise click.UsageError(f"Invalid settings: {settings_error}")


@cli.command(name='list')
@click.option('--height', '-h', type=choices(Height), help='Only vowels of this height')
@click.option('--backness', '-b', type=choices(Backness), help='Only vowels of this backness')
@click.option('--rounding', '-r', type=choices(Rounding), help='Only vowels of this rounding')
@click.option('--format', '-f', 'output_format', type=click.Choice(['text', 'json']), default=None,
              help='Output format (defaults to VOWELS_OUTPUT_FORMAT, else text)')
@click.pass_obj
def list_vowels(settings: VowelsConfig, height: Optional[str], backness: Optional[str],
                rounding: Optional[str], output_format: Optional[str]):
    """
    List vowels in chart order
    """
    vowels = catalog.filter(height=height, backness=backness, rounding=rounding)
    logger.debug("%d vowels match height=%s backness=%s rounding=%s",
                 len(vowels), height, backness, rounding)

    if not vowels:
        click.echo("No vowels match the given classification", err=True)
        return

    print_vowels(vowels, output_format or settings.output_format)


@cli.command()
@click.argument('symbol')
def show(symbol: str):
    """
    Show a vowel as JSON

    SYMBOL: IPA vowel symbol (e.g. ɒ)
    """
    vowel = catalog.get(symbol)

    if not vowel:
        click.echo(f"Error: vowel {symbol} is not in the catalog", err=True)
        sys.exit(1)

    click.echo(json.dumps(vowel.model_dump(mode='json'), indent=2, ensure_ascii=False))


@cli.command()
def validate():
    """
    Check the integrity of the vowel catalog
    """
    problems = catalog.integrity_problems()

    click.echo("\n=== Catalog integrity ===")
    click.echo(f"Vowels: {len(catalog)}")
    click.echo(f"Rounded: {sum(1 for v in catalog if v.is_rounded)}")

    if problems:
        for problem in problems:
            click.echo(f"  ✗ {problem}", err=True)
        sys.exit(1)

    click.echo("✓ PASS")


def main():
    """Main entry point."""
    logging.basicConfig(format='%(name)s - %(levelname)s:%(message)s', level=logging.WARNING)
    cli()


if __name__ == '__main__':
    main()
