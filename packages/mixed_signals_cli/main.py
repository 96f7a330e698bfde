"""Main CLI entry point"""

import logging

import click
from rich.console import Console

from mixed_signals import get_settings
from mixed_signals_cli.commands.plot import plot
from mixed_signals_cli.commands.sample import sample
from mixed_signals_cli.commands.shuffle import shuffle
from mixed_signals_cli.commands.validate import validate
from mixed_signals_cli.utils.output import OutputFormatter


@click.group()
@click.option('--json', 'json_mode', is_flag=True, help='Output as JSON')
@click.option('--verbose', is_flag=True, help='Verbose output')
@click.pass_context
def cli(ctx, json_mode: bool, verbose: bool):
    """Mixed Signals CLI - inspect, sample and plot signal specs

    Examples:
        mixed-signals validate kitt.json
        mixed-signals sample kitt.json --duration 0.01 --count 5
        mixed-signals plot kitt.json --end 0.01
        mixed-signals --json shuffle A B C D --seed 3
    """
    settings = get_settings()
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Initialize context
    ctx.ensure_object(dict)
    ctx.obj['verbose'] = verbose

    # Initialize output formatter
    console = Console()
    ctx.obj['console'] = console
    ctx.obj['formatter'] = OutputFormatter(json_mode=json_mode, console=console)


# Register commands
cli.add_command(validate)
cli.add_command(sample)
cli.add_command(plot)
cli.add_command(shuffle)


if __name__ == '__main__':
    cli()
