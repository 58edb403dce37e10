"""ID number CLI commands for SA ID Number.

This module provides CLI commands to build, validate, explain and generate
South African ID numbers.
"""

import json as json_lib
import logging
import random
import sys
from itertools import islice
from typing import Optional

import click

from sa_idnumber.config import Config
from sa_idnumber.core import (
    from_string,
    iter_random_id_numbers,
    new_id_number,
    set_citizen,
    set_date,
    set_gender,
    set_random_female,
    set_random_male,
    set_resident,
)
from sa_idnumber.utils.exceptions import IDNumberError

logger = logging.getLogger(__name__)


def _get_config(ctx: click.Context) -> Config:
    """Return the loaded configuration, or defaults when run standalone."""
    obj = ctx.obj or {}
    return obj.get("config") or Config()


@click.command("build")
@click.argument("day", type=int)
@click.argument("month", type=click.IntRange(1, 12))
@click.argument("year", type=int)
@click.option("--gender", "gender_code", type=int, help="Explicit gender code (0-9999)")
@click.option("--male", is_flag=True, help="Use a random male gender code")
@click.option("--female", is_flag=True, help="Use a random female gender code")
@click.option("--resident", is_flag=True, help="Permanent resident instead of citizen")
@click.option("--seed", type=int, default=None, help="Seed for the random gender code")
@click.option("--explain", "show_explanation", is_flag=True, help="Also print the meaning")
@click.pass_context
def build(
    ctx: click.Context,
    day: int,
    month: int,
    year: int,
    gender_code: Optional[int],
    male: bool,
    female: bool,
    resident: bool,
    seed: Optional[int],
    show_explanation: bool,
) -> None:
    """Build an ID number from a birth date, gender and citizenship.

    Exactly one of --gender, --male or --female is required.

    Examples:

        # Male citizen with an explicit gender code
        sa-idnumber build 9 7 1981 --gender 5005

        # Female permanent resident with a random gender code
        sa-idnumber build 1 1 2001 --female --resident
    """
    if sum([gender_code is not None, male, female]) != 1:
        raise click.UsageError("Specify exactly one of --gender, --male or --female")

    rng = random.Random(seed) if seed is not None else None
    if gender_code is not None:
        gender_option = set_gender(gender_code)
    elif male:
        gender_option = set_random_male(rng)
    else:
        gender_option = set_random_female(rng)

    try:
        id_number = new_id_number(
            set_date(day, month, year),
            gender_option,
            set_resident() if resident else set_citizen(),
            pivot=_get_config(ctx).codec.century_pivot,
        )
    except IDNumberError as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        logger.error(f"Build failed: {e}")
        sys.exit(1)

    click.echo(str(id_number))
    if show_explanation:
        click.echo(id_number.explain())


@click.command("validate")
@click.argument("id_strings", nargs=-1, required=True)
@click.option("--json", "json_output", is_flag=True, help="Output results as JSON")
@click.pass_context
def validate(ctx: click.Context, id_strings: tuple[str, ...], json_output: bool) -> None:
    """Validate one or more ID numbers.

    Exits with code 0 when every ID number is valid, code 1 otherwise.

    Examples:

        sa-idnumber validate 8107095005083

        sa-idnumber validate 8107095005083 8107095005084 --json
    """
    pivot = _get_config(ctx).codec.century_pivot
    results = []

    for id_string in id_strings:
        try:
            id_number = from_string(id_string, pivot)
            results.append({
                "id_number": id_string,
                "valid": True,
                "birth_date": id_number.birth_date.isoformat(),
                "explanation": id_number.explain(),
            })
        except IDNumberError as e:
            results.append({
                "id_number": id_string,
                "valid": False,
                "error_type": type(e).__name__,
                "error": str(e),
            })

    invalid_count = sum(1 for result in results if not result["valid"])

    if json_output:
        click.echo(json_lib.dumps(results, indent=2))
    else:
        for result in results:
            if result["valid"]:
                click.secho(f"{result['id_number']}: VALID", fg="green")
            else:
                click.secho(
                    f"{result['id_number']}: INVALID: {result['error']}", fg="red"
                )

    logger.info(f"Validated {len(results)} ID numbers, {invalid_count} invalid")
    sys.exit(1 if invalid_count else 0)


@click.command("explain")
@click.argument("id_string")
@click.pass_context
def explain(ctx: click.Context, id_string: str) -> None:
    """Explain what an ID number means.

    Example:

        sa-idnumber explain 8107095005083
    """
    pivot = _get_config(ctx).codec.century_pivot
    try:
        id_number = from_string(id_string, pivot)
    except IDNumberError as e:
        click.secho(f"Invalid ID number: {e}", fg="red", err=True)
        sys.exit(1)

    click.echo(id_number.explain())


@click.command("generate")
@click.option("--count", type=click.IntRange(min=1), default=1, show_default=True,
              help="Number of ID numbers to generate")
@click.option("--seed", type=int, default=None,
              help="Random seed (overrides the configured seed)")
@click.option("--explain", "show_explanation", is_flag=True,
              help="Print the meaning next to each ID number")
@click.pass_context
def generate(
    ctx: click.Context, count: int, seed: Optional[int], show_explanation: bool
) -> None:
    """Generate random valid ID numbers.

    Examples:

        # Five random ID numbers
        sa-idnumber generate --count 5

        # Reproducible output
        sa-idnumber generate --count 5 --seed 42
    """
    config = _get_config(ctx)
    generator_config = config.generator
    if seed is None:
        seed = generator_config.seed
    rng = random.Random(seed) if seed is not None else None

    id_numbers = iter_random_id_numbers(
        rng,
        generator_config.start_date,
        generator_config.end_date,
        config.codec.century_pivot,
    )
    for id_number in islice(id_numbers, count):
        if show_explanation:
            click.echo(f"{id_number} {id_number.explain()}")
        else:
            click.echo(str(id_number))

    logger.info(f"Generated {count} random ID numbers")
