#!/usr/bin/env python3
# -*- coding: utf-8; mode: python -*-

from typing import Annotated

import loguru as LG
import typer

from pylazy.core import concat, split
from pylazy.examples._logging import configure_logging


APP = typer.Typer(name='chain', pretty_exceptions_enable=False)


# Split views are forward only, and so is their concatenation: nothing is
# materialized, pieces are cut out of the texts as they are printed.
@APP.command()
def main(
    texts: Annotated[list[str], typer.Argument(help='Texts to split.')],
    delimiter: Annotated[str, typer.Option('--delimiter', '-d')] = ',',
    count: Annotated[bool, typer.Option('--count', '-c',
        help='Print the number of pieces only.')] = False,
    verbose: Annotated[bool, typer.Option('--verbose', '-v')] = False,
) -> None:
    configure_logging(verbose)
    if not delimiter:
        LG.logger.error('The delimiter must not be empty.')
        raise typer.Exit(code=2)
    pieces = concat(*(split(text, delimiter) for text in texts))
    LG.logger.debug(f'Chaining {len(texts)} texts: {pieces.capability.name}')
    if count:
        typer.echo(len(pieces))
        return
    for piece in pieces:
        typer.echo(piece)


if __name__ == '__main__':
    APP()
