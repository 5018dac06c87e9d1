#!/usr/bin/env python3
# -*- coding: utf-8; mode: python -*-

import loguru as LG
import rich.console, rich.logging, rich.traceback


__all__: list[str] = ['STDERR', 'configure_logging']


STDERR = rich.console.Console(stderr=True, log_path=False, soft_wrap=True)


def configure_logging(verbose: bool = False) -> None:
    rich.traceback.install(console=STDERR)
    LG.logger.configure(handlers=[dict(
        level="DEBUG" if verbose else "INFO",
        sink=rich.logging.RichHandler(
            console=STDERR,
            markup=True,
            show_path=False,),
        format="{message}",)])
    LG.logger.enable('pylazy')
