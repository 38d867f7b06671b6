import click
from computations.combinatorics.weight_classes import create_indices
from computations.bitvector import bin_to_str, index_to_bits
from errors import BoolFunError


@click.command("weight-classes")
@click.argument("nvar", type=int)
@click.option("--max-weight", default=None, type=int,
              help="Highest weight class to list. Default is NVAR.")
def weight_classes_cli(nvar, max_weight):
    # Lists the truth table indices of each Hamming weight class, in generation order.
    try:
        table = create_indices(nvar, max_weight)
    except BoolFunError as exc:
        raise click.ClickException(str(exc))

    for weight, indices in table.items():
        click.echo(f"Weight {weight} ({len(indices)} indices):")
        for index in indices:
            click.echo(f"  {index} -> {bin_to_str(index_to_bits(index, nvar))}")
