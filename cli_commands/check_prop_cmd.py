import click
from user_input_parser import FunctionParser, parse_verbose_flag
from properties import compute_all_properties
from computations.combinatorics.weight_classes import create_indices
from computations import default_settings
from cli_commands.cli_utils import (
    format_anf,
    format_crypto_properties,
    format_function_numbers,
    format_function_tables,
)
from errors import BoolFunError

USAGE_TEXT = """
check-prop

Description: Computes various cryptographic properties of a Boolean function passed
as a command line argument and prints them.

Usage: check-prop NVAR MODE FUNC_CODE VERBOSE

where:
- NVAR is the number of variables of the function
- MODE is the encoding of the truth table (bin: binary, dec: decimal, hex: hexadecimal)
- FUNC_CODE is the truth table of the function, encoded according to MODE
- VERBOSE is a boolean flag. If equal to true, the truth table, Walsh coefficients and
  autocorrelation coefficients are printed along with the cryptographic properties

Example: check-prop 3 dec 150 true
"""


@click.command("check-prop", context_settings={"ignore_unknown_options": True})
@click.argument("arguments", nargs=-1)
@click.pass_context
def check_prop_cli(ctx, arguments):
    """
    Computes and prints the cryptographic properties of a single Boolean function.

    Arguments: NVAR MODE FUNC_CODE VERBOSE (e.g. "3 dec 150 true").
    Exits with status 1 on a wrong number of arguments and 2 on an unknown MODE.
    """
    if len(arguments) != 4:
        click.echo(USAGE_TEXT, err=True)
        ctx.exit(1)

    nvar_str, mode, func_code, verbose_str = arguments

    try:
        nvar = int(nvar_str)
    except ValueError:
        raise click.ClickException(f"NVAR must be an integer, got '{nvar_str}'.")

    if mode not in default_settings.ENCODING_MODES:
        click.echo(f"Error: {mode} does not correspond to any valid encoding mode "
                   f"(use only bin, dec or hex!)", err=True)
        ctx.exit(2)

    verbose = parse_verbose_flag(verbose_str)

    try:
        boolfun = FunctionParser().parse_encoded_function(mode, func_code, nvar)
        # Weight classes 1..nvar, to check every order of CI and PC.
        indices = create_indices(nvar)
        compute_all_properties(boolfun, indices)
    except BoolFunError as exc:
        raise click.ClickException(str(exc))

    click.echo("")
    click.echo(format_function_numbers(boolfun))
    if verbose:
        click.echo("")
        click.echo(format_function_tables(boolfun))
    click.echo("")
    click.echo(format_anf(boolfun))
    click.echo("")
    click.echo(format_crypto_properties(boolfun, nvar))
    click.echo("")
