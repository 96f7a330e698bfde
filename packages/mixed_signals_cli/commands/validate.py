"""Validate command - load and build a spec file"""

import click

from mixed_signals import SignalError, load_spec_file


@click.command()
@click.argument('path', type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def validate(ctx, path: str):
    """Load a spec file and build its signal tree

    Example:
        mixed-signals validate kitt.json
        mixed-signals --json validate kitt.yaml
    """
    formatter = ctx.obj['formatter']

    try:
        spec = load_spec_file(path)
        signal = spec.build()
    except (SignalError, ValueError) as e:
        formatter.error(f"Invalid spec: {path}", str(e))
        raise click.Abort()

    declared = signal.output_range()
    formatter.success(f"Spec '{path}' is valid", {
        "kind": spec.kind,
        "min": declared.min,
        "max": declared.max,
    })
