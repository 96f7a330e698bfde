"""Plot command - draw a spec as text"""

import click

from mixed_signals import SignalError, get_settings, load_spec_file
from mixed_signals.view import PlotWindow, TextPlotter


@click.command()
@click.argument('path', type=click.Path(exists=True, dir_okay=False))
@click.option('--start', default=0.0, help='Window start in seconds')
@click.option('--end', default=1.0, help='Window end in seconds')
@click.option('--width', type=int, default=None, help='Columns (default from settings)')
@click.option('--height', type=int, default=None, help='Rows (default from settings)')
@click.pass_context
def plot(ctx, path: str, start: float, end: float, width: int | None, height: int | None):
    """Plot a spec file as a character grid

    Example:
        mixed-signals plot kitt.json --end 0.01
    """
    formatter = ctx.obj['formatter']
    settings = get_settings()

    try:
        signal = load_spec_file(path).build()
        window = PlotWindow.for_signal(signal, start, end)
    except (SignalError, ValueError) as e:
        formatter.error(f"Cannot plot {path}", str(e))
        raise click.Abort()

    plotter = TextPlotter(
        width=width or settings.plot_width,
        height=height or settings.plot_height,
    )
    lines = plotter.plot(signal, window).split("\n")
    formatter.block(
        f"{path} over [{window.t_start}, {window.t_end}] s, values [{window.v_min}, {window.v_max}]",
        lines,
    )
