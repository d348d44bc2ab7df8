from typing import IO, Iterator, Optional

import click

from .config import LOG_LEVELS, Config
from .utils.log import logger, setup_logger


@click.group()
@click.option("--seed", type=int, default=None, help="Seed of the random generator")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    help="Logging level written to stderr",
)
@click.pass_context
def rqueue_cli(ctx: click.Context, seed: Optional[int], log_level: str) -> None:
    config = Config()
    config.reseed(seed)
    config.log_level = log_level.upper()
    setup_logger(config.log_level)
    ctx.obj = config


@rqueue_cli.command(help="Print K of the input tokens in uniformly random order")
@click.argument("k", type=click.IntRange(min=0))
@click.option(
    "--input",
    "input_file",
    type=click.File("r"),
    default="-",
    help="File to read tokens from (default: stdin)",
)
@click.pass_context
def permutation(ctx: click.Context, k: int, input_file: IO[str]) -> None:
    queue = ctx.obj.randomized_queue(read_tokens(input_file))
    logger.info("Read %d tokens", len(queue))
    if k > len(queue):
        raise click.UsageError(
            "K ({}) is larger than the number of tokens ({})".format(k, len(queue))
        )
    for _ in range(k):
        click.echo(queue.dequeue())


def read_tokens(stream: IO[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main() -> None:
    rqueue_cli()
