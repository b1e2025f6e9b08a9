"""UNDERBAR CLI commands: library operations over JSON documents.

Each command decodes its JSON arguments, applies one library operation and
prints the result as a single JSON document on stdout, so commands compose in
shell pipelines (pass ``-`` to read a document from stdin).

Failure modes
- Malformed JSON → usage error (exit code 2).
- Arguments the operation rejects (e.g. a mapping where a sequence is
  required) → ``ClickException`` (exit code 1).

Examples
    $ underbar uniq '[1, 2, 1, 3]'
    [1, 2, 3]
    $ echo '[[1, [2]], 3]' | underbar flatten -
    [1, 2, 3]
"""

import logging
import random
from collections.abc import Callable
from typing import Any

import click

import underbar

from .helpers import JSON, dumps, error_glyph

logger = logging.getLogger(__name__)


def _apply(operation: Callable[..., Any], *args: Any, **kwargs: Any) -> None:
    """Run *operation* and echo its JSON-encoded result."""
    logger.debug("Applying %s to %d argument(s)", operation.__name__, len(args))
    try:
        result = operation(*args, **kwargs)
    except underbar.UnderbarError as e:
        raise click.ClickException(f"{error_glyph()} {e}") from e
    click.echo(dumps(result))


count_option = click.option(
    "-n",
    "count",
    type=int,
    default=None,
    help="Number of elements to take (returns a list instead of one element).",
)


@click.command()
@click.argument("seq", type=JSON)
@count_option
def first(seq: Any, count: int | None) -> None:
    """Print the first element of SEQ, or its first N elements."""
    _apply(underbar.first, seq, count)


@click.command()
@click.argument("seq", type=JSON)
@count_option
def last(seq: Any, count: int | None) -> None:
    """Print the last element of SEQ, or its last N elements."""
    _apply(underbar.last, seq, count)


@click.command()
@click.argument("seq", type=JSON)
def uniq(seq: Any) -> None:
    """Print SEQ without duplicates, keeping first occurrences."""
    _apply(underbar.uniq, seq)


@click.command()
@click.argument("seq", type=JSON)
@click.option("--shallow", is_flag=True, help="Flatten a single level only.")
def flatten(seq: Any, shallow: bool) -> None:
    """Print the leaves of the nested sequence SEQ as one flat list."""
    _apply(underbar.flatten, seq, shallow)


@click.command("zip")
@click.argument("seqs", nargs=-1, type=JSON)
def zip_(seqs: tuple[Any, ...]) -> None:
    """Group the elements of SEQS by position, padding with null."""
    _apply(underbar.zip_, *seqs)


@click.command()
@click.argument("seqs", nargs=-1, type=JSON)
def intersection(seqs: tuple[Any, ...]) -> None:
    """Print the distinct elements shared by all SEQS."""
    _apply(underbar.intersection, *seqs)


@click.command()
@click.argument("seq", type=JSON)
@click.argument("others", nargs=-1, type=JSON)
def difference(seq: Any, others: tuple[Any, ...]) -> None:
    """Print the distinct elements of SEQ found in none of OTHERS."""
    _apply(underbar.difference, seq, *others)


@click.command()
@click.argument("seq", type=JSON)
@click.argument("target", type=JSON)
def contains(seq: Any, target: Any) -> None:
    """Print whether SEQ (a list or object) holds TARGET."""
    _apply(underbar.contains, seq, target)


@click.command("index-of")
@click.argument("seq", type=JSON)
@click.argument("target", type=JSON)
def index_of(seq: Any, target: Any) -> None:
    """Print the first index of TARGET in SEQ, or -1."""
    _apply(underbar.index_of, seq, target)


@click.command("sort-by")
@click.argument("seq", type=JSON)
@click.option("--key", "key", default=None, help="Sort records by this property.")
def sort_by(seq: Any, key: str | None) -> None:
    """Print SEQ sorted ascending (stable; nulls and missing keys last)."""
    _apply(underbar.sort_by, seq, key)


@click.command()
@click.argument("seq", type=JSON)
@click.option("--seed", type=int, default=None, help="Seed for a reproducible order.")
def shuffle(seq: Any, seed: int | None) -> None:
    """Print a random permutation of SEQ."""
    rng = random.Random(seed) if seed is not None else None
    _apply(underbar.shuffle, seq, rng)


@click.command()
@click.argument("records", type=JSON)
@click.argument("name")
@click.option(
    "--index",
    is_flag=True,
    help="Read NAME as an integer index into sequence records.",
)
def pluck(records: Any, name: str, index: bool) -> None:
    """Print the NAME property of every record in RECORDS."""
    prop: str | int = name
    if index:
        try:
            prop = int(name)
        except ValueError as e:
            raise click.BadParameter(
                f"{name!r} is not an integer index", param_hint="NAME"
            ) from e
    _apply(underbar.pluck, records, prop)


@click.command()
@click.argument("target", type=JSON)
@click.argument("sources", nargs=-1, type=JSON)
def extend(target: Any, sources: tuple[Any, ...]) -> None:
    """Merge SOURCES into TARGET; later keys win."""
    _apply(underbar.extend, target, *sources)


@click.command()
@click.argument("target", type=JSON)
@click.argument("sources", nargs=-1, type=JSON)
def defaults(target: Any, sources: tuple[Any, ...]) -> None:
    """Fill keys missing from TARGET from SOURCES; existing keys win."""
    _apply(underbar.defaults, target, *sources)


COMMANDS = [
    first,
    last,
    uniq,
    flatten,
    zip_,
    intersection,
    difference,
    contains,
    index_of,
    sort_by,
    shuffle,
    pluck,
    extend,
    defaults,
]
