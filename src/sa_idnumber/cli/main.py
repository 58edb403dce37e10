"""Main CLI entry point for SA ID Number.

This module provides the main Click command group for the sa-idnumber CLI.
"""

from pathlib import Path
from typing import Optional

import click

from sa_idnumber import __version__
from sa_idnumber.cli.id_commands import build, explain, generate, validate
from sa_idnumber.config import load_config
from sa_idnumber.logging_audit import configure_logging
from sa_idnumber.utils.exceptions import ConfigurationError


@click.group()
@click.version_option(version=__version__, prog_name="sa-idnumber")
@click.option(
    "--config",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: ./config/config.json)",
)
@click.option("--verbose", is_flag=True, help="Enable verbose logging (DEBUG level)")
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to log file (overrides config file)",
)
@click.option(
    "--redact-ids",
    is_flag=True,
    help="Redact ID numbers and birth dates from logs",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[Path],
    verbose: bool,
    log_file: Optional[Path],
    redact_ids: bool,
) -> None:
    """SA ID Number - build, validate and generate South African ID numbers.

    Common usage:

        # Build the ID number for a male citizen born 9 July 1981
        sa-idnumber build 9 7 1981 --gender 5005

        # Check one or more ID numbers
        sa-idnumber validate 8107095005083

        # Generate ten random ID numbers, reproducibly
        sa-idnumber generate --count 10 --seed 42

    Use --help with any command for more information.
    """
    ctx.ensure_object(dict)

    try:
        config_obj = load_config(config)
        ctx.obj["config"] = config_obj
    except ConfigurationError as e:
        click.echo(f"Error loading configuration: {e}", err=True)
        ctx.exit(1)

    ctx.obj["verbose"] = verbose

    # Precedence: CLI flags > config file > defaults
    log_level = "DEBUG" if verbose else config_obj.logging.level
    log_file_path = log_file if log_file else config_obj.logging.log_file
    redact_ids_setting = redact_ids if redact_ids else config_obj.logging.redact_ids

    configure_logging(
        level=log_level, log_file=log_file_path, redact_ids=redact_ids_setting
    )


cli.add_command(build)
cli.add_command(validate)
cli.add_command(explain)
cli.add_command(generate)


@cli.group()
def config() -> None:
    """Configuration management commands."""
    pass


@config.command("validate")
@click.argument("config_file", type=click.Path(exists=True, path_type=Path))
def validate_config(config_file: Path) -> None:
    """Validate a configuration file.

    Example:
        sa-idnumber config validate config/config.json
    """
    try:
        config_obj = load_config(config_file)

        click.echo(click.style("✓", fg="green", bold=True) + " Configuration is valid")
        click.echo(f"\nConfiguration file: {config_file}")
        click.echo("\nCodec:")
        click.echo(f"  Century pivot: {config_obj.codec.century_pivot}")

        click.echo("\nGenerator:")
        click.echo(f"  Start date:  {config_obj.generator.start_date.isoformat()}")
        click.echo(f"  End date:    {config_obj.generator.end_date.isoformat()}")
        click.echo(f"  Seed:        {config_obj.generator.seed if config_obj.generator.seed is not None else 'Not set'}")

        click.echo("\nLogging:")
        click.echo(f"  Level:       {config_obj.logging.level}")
        click.echo(f"  Log file:    {config_obj.logging.log_file}")
        click.echo(f"  Redact IDs:  {config_obj.logging.redact_ids}")

    except ConfigurationError as e:
        click.echo(click.style("✗", fg="red", bold=True) + " Configuration validation failed")
        click.echo(f"\n{e}", err=True)
        raise click.exceptions.Exit(1)


@cli.command()
def version() -> None:
    """Display version information."""
    click.echo(f"sa-idnumber version {__version__}")


if __name__ == "__main__":
    cli()
