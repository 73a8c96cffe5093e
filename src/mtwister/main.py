#!/usr/bin/env python3

# The MIT License (MIT)
#
# Copyright © 2021 Maurizio Tomasi
#
# Permission is hereby granted, free of charge, to any person obtaining a copy of this software and associated
# documentation files (the “Software”), to deal in the Software without restriction, including without limitation the
# rights to use, copy, modify, merge, publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all copies or substantial portions of
# the Software. THE SOFTWARE IS PROVIDED “AS IS”, WITHOUT WARRANTY OF ANY KIND, EXPRESS OR IMPLIED, INCLUDING BUT NOT
# LIMITED TO THE WARRANTIES OF MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT
# SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF
# CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS
# IN THE SOFTWARE.

from dataclasses import dataclass
import logging
from typing import List, Union
import sys

from mtwister.engine import MersenneTwister64
from mtwister.random_source import MersenneTwister, InvalidArgument

import click


@dataclass
class Parameters:
    seed: int = 5489
    kind: str = "double"
    bound: Union[int, None] = None
    count: int = 10


KINDS = ["double", "float", "int", "long", "raw"]


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Print debug messages from the generator")
def cli(verbose):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def parse_key(words: List[str]) -> List[int]:
    """Parse the list of `--key` switches and return the words of the key

    Each word can be written in any base Python understands, e.g., `74565` or `0x12345`."""

    key = []
    for word in words:
        try:
            key.append(int(word, 0))
        except ValueError:
            print(f"error, «{word}» in the key is not a valid integer")
            sys.exit(1)

    return key


def build_random_source(seed: int, key: List[str]) -> MersenneTwister:
    if key:
        return MersenneTwister(engine=MersenneTwister64.from_key(parse_key(key)))

    return MersenneTwister(seed=seed)


def draw_one(source: MersenneTwister, params: Parameters):
    if params.kind == "double":
        return source.next_double()
    elif params.kind == "float":
        return source.next_float()
    elif params.kind == "int":
        return source.next_int() if params.bound is None else source.next_int(params.bound)
    elif params.kind == "long":
        return source.next_long()
    elif params.kind == "raw":
        return source.engine.next_raw()
    else:
        print(f"Unknown kind of number: {params.kind}")
        sys.exit(1)


@click.command("draw")
@click.option("--seed", type=int, default=5489, help="Seed of the generator (any integer, negative values allowed)")
@click.option("--kind", type=click.Choice(KINDS), default="double", help="Kind of number to produce")
@click.option(
    "--bound",
    type=int,
    default=None,
    help="Upper bound (excluded) of the numbers (only applicable with --kind=int).",
)
@click.option("--count", type=int, default=10, help="How many numbers to print")
@click.option(
    "--key",
    "-k",
    type=str,
    multiple=True,
    help="Seed the generator with a key instead of --seed. Repeat the switch for each word, e.g., -k 0x12345 -k 0x23456",
)
def draw(seed, kind, bound, count, key):
    params = Parameters(seed=seed, kind=kind, bound=bound, count=count)
    if params.bound is not None and params.kind != "int":
        print(f"Error, --bound is only applicable with --kind=int (you used --kind={params.kind})")
        sys.exit(1)

    source = build_random_source(params.seed, key)

    try:
        for _ in range(params.count):
            print(draw_one(source, params))
    except InvalidArgument as e:
        print(f"Error, {e}")
        sys.exit(1)


@click.command("stats")
@click.option("--seed", type=int, default=5489, help="Seed of the generator")
@click.option("--count", type=int, default=10000, help="Number of samples to draw")
def stats(seed, count):
    params = Parameters(seed=seed, count=count)
    if params.count <= 0:
        print(f"Error, the number of samples ({params.count}) must be positive")
        sys.exit(1)

    source = MersenneTwister(seed=params.seed)

    total = 0.0
    min_value, max_value = 1.0, 0.0
    for _ in range(params.count):
        value = source.next_double()
        total += value
        min_value = min(min_value, value)
        max_value = max(max_value, value)

    print(f"Samples: {params.count}")
    print(f"Mean:    {total / params.count:.6f}")
    print(f"Minimum: {min_value:.6f}")
    print(f"Maximum: {max_value:.6f}")


cli.add_command(draw)
cli.add_command(stats)

if __name__ == "__main__":
    cli()
