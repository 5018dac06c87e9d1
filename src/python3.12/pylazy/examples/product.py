#!/usr/bin/env python3
# -*- coding: utf-8; mode: python -*-

from typing import Annotated, Optional

import loguru as LG
import typer

from pylazy.core import cartesian, split
from pylazy.examples._logging import configure_logging


APP = typer.Typer(name='product', pretty_exceptions_enable=False)


##############################################################################
# Cartesian Product Example
# --------------------------
#
# Every combination of the given comma separated lists, one per line:
#
#     $ python -m pylazy.examples.product a,b 1,2,3
#     a 1
#     a 2
#     ...
#
# Lists are materialized into tuples so the product stays random access,
# which is what makes --index and --reverse cheap.
#
@APP.command()
def main(
    lists: Annotated[list[str], typer.Argument(
        help='Comma separated lists, one per member.')],
    delimiter: Annotated[str, typer.Option('--delimiter', '-d')] = ',',
    index: Annotated[Optional[int], typer.Option('--index', '-i',
        help='Print only the combination at this position.')] = None,
    reverse: Annotated[bool, typer.Option('--reverse', '-r')] = False,
    verbose: Annotated[bool, typer.Option('--verbose', '-v')] = False,
) -> None:
    configure_logging(verbose)
    product = cartesian(*(tuple(split(items, delimiter)) for items in lists))
    LG.logger.info(f'{len(product)} combinations of {len(lists)} lists')
    if index is not None:
        try:
            typer.echo(' '.join(product[index]))
        except IndexError:
            LG.logger.error(f'No combination at {index}.')
            raise typer.Exit(code=1)
        return
    for combination in (reversed(product) if reverse else product):
        typer.echo(' '.join(combination))


if __name__ == '__main__':
    APP()
