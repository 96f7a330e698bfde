"""Sample command - evaluate a spec over time"""

import math

import click

from mixed_signals import SignalError, load_spec_file


@click.command()
@click.argument('path', type=click.Path(exists=True, dir_okay=False))
@click.option('--start', default=0.0, help='First sample time in seconds')
@click.option('--duration', default=1.0, help='Sampled span in seconds')
@click.option('--rate', type=float, default=None, help='Samples per second (overrides --count)')
@click.option('--count', default=11, help='Number of evenly spaced samples')
@click.pass_context
def sample(ctx, path: str, start: float, duration: float, rate: float | None, count: int):
    """Sample a spec file over a time span

    Example:
        mixed-signals sample kitt.json --duration 0.01 --count 5
        mixed-signals --json sample kitt.json --rate 1000 --duration 0.01
    """
    formatter = ctx.obj['formatter']

    if rate is not None:
        if not (math.isfinite(rate) and rate > 0):
            formatter.error("Invalid rate", f"rate must be positive, got {rate}")
            raise click.Abort()
        count = int(math.floor(duration * rate))
        dt = 1.0 / rate
    else:
        dt = duration / (count - 1) if count > 1 else 0.0

    try:
        signal = load_spec_file(path).build()
    except (SignalError, ValueError) as e:
        formatter.error(f"Invalid spec: {path}", str(e))
        raise click.Abort()

    values = signal.sample_array(start, dt, count)
    rows = [(round(start + i * dt, 9), float(value)) for i, value in enumerate(values)]
    formatter.table(f"{count} samples from {path}", ["t", "value"], rows)
