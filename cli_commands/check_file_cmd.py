import click
from pathlib import Path
from user_input_parser import FunctionParser
from boolfun_object import check_nvar
from properties import compute_all_properties
from computations.combinatorics.weight_classes import create_indices
from computations import default_settings
from cli_commands.cli_utils import build_summary_frame, summary_row
from errors import BoolFunError


@click.command("check-file")
@click.argument("filepath", type=click.Path(exists=True, dir_okay=False))
@click.option("--mode", default="hex", type=click.Choice(list(default_settings.ENCODING_MODES)),
              help="Encoding of every function line in the file (default: hex).")
@click.option("--json", "as_json", is_flag=True,
              help="Print the results as JSON records instead of a table.")
def check_file_cli(filepath, mode, as_json):
    """
    Computes the cryptographic properties of every Boolean function in a file.
    The first line is the number of variables n, each subsequent line one function
    encoded according to --mode.
    """
    try:
        lines_data, nvar = _read_file_firstline_n(filepath)
    except (OSError, ValueError) as exc:
        raise click.ClickException(str(exc))

    try:
        check_nvar(nvar)
        indices = create_indices(nvar)
    except BoolFunError as exc:
        raise click.ClickException(str(exc))

    parser = FunctionParser()
    rows = []
    for line_no, func_code in enumerate(lines_data, start=2):
        try:
            boolfun = parser.parse_encoded_function(mode, func_code, nvar)
            compute_all_properties(boolfun, indices)
        except BoolFunError as exc:
            click.echo(f"Skipped line {line_no} in '{filepath}': {exc}", err=True)
            continue
        rows.append(summary_row(boolfun))

    if not rows:
        click.echo("No valid functions found.")
        return

    frame = build_summary_frame(rows)
    if as_json:
        click.echo(frame.to_json(orient="records", indent=2))
    else:
        click.echo(frame.to_string(index=False))
        click.echo("-" * 100)
        click.echo(f"Analyzed {len(rows)} of {len(lines_data)} functions of {nvar} variables.")


def _read_file_firstline_n(filepath_str):
    file_path = Path(filepath_str)
    if not file_path.is_file():
        raise FileNotFoundError(f"File not found: {filepath_str}")

    all_lines = file_path.read_text(encoding="utf-8").splitlines()
    all_lines = [ln.strip() for ln in all_lines if ln.strip()]

    if len(all_lines) < 2:
        raise ValueError(f"File '{filepath_str}' must have at least 2 lines => number of variables + functions.")

    try:
        nvar = int(all_lines[0])
    except ValueError:
        raise ValueError(f"File '{filepath_str}': first line must be the integer number of variables.")

    return all_lines[1:], nvar
