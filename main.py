import click

# Import commands from modules
from cli_commands.check_file_cmd import check_file_cli
from cli_commands.check_prop_cmd import check_prop_cli
from cli_commands.weight_classes_cmd import weight_classes_cli


@click.group()
def cli():
    # CLI interface for analyzing Boolean functions.
    pass

# Register commands
cli.add_command(check_file_cli)
cli.add_command(check_prop_cli)
cli.add_command(weight_classes_cli)

if __name__ == "__main__":
    cli()
