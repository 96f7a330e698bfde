"""Shuffle command - run a seeded shuffle algorithm"""

import click

from mixed_signals import Rng
from mixed_signals.shuffle import (
    fisher_yates,
    overhand_shuffle,
    perfect_shuffle,
    riffle_shuffle,
    sattolo,
    smooth_shuffle,
)

ALGORITHMS = ("fisher-yates", "sattolo", "riffle", "overhand", "smooth", "faro")


@click.command()
@click.argument('items', nargs=-1, required=True)
@click.option('--seed', default=0, type=click.IntRange(min=0), help='Rng seed')
@click.option('--algorithm', type=click.Choice(ALGORITHMS), default='fisher-yates',
              help='Shuffle algorithm')
@click.option('--passes', default=1, type=click.IntRange(min=0),
              help='Passes for riffle, overhand and faro')
@click.option('--strength', default=0.25, help='Displacement strength for smooth')
@click.pass_context
def shuffle(ctx, items: tuple[str, ...], seed: int, algorithm: str, passes: int, strength: float):
    """Shuffle ITEMS with a seeded algorithm

    Example:
        mixed-signals shuffle A B C D E --seed 7 --algorithm riffle --passes 3
    """
    formatter = ctx.obj['formatter']
    rng = Rng(seed)
    deck = list(items)

    if algorithm == "fisher-yates":
        fisher_yates(deck, rng)
    elif algorithm == "sattolo":
        sattolo(deck, rng)
    elif algorithm == "riffle":
        riffle_shuffle(deck, passes, rng)
    elif algorithm == "overhand":
        overhand_shuffle(deck, passes, rng)
    elif algorithm == "smooth":
        smooth_shuffle(deck, strength, rng)
    else:
        for _ in range(passes):
            perfect_shuffle(deck)

    formatter.success(f"Shuffled {len(deck)} items with {algorithm}", {
        "seed": seed,
        "result": deck if formatter.json_mode else " ".join(deck),
    })
