"""Сборка CLI: парсер аргументов и контроллер.

Принципы:
- SRP: только описание интерфейса командной строки и связывание с контроллером.
"""
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence

from rpad.config import RpadConfig
from rpad.controllers.app_controller import AppController

DESCRIPTION = "Replace uneven padding with unified one."

EPILOG = """\
input   (required) path to input image
output  (optional) path to output directory, default ~
size    (optional) padding size in pixels, default 30"""


class RpadApp:
    def __init__(self, config: Optional[RpadConfig] = None) -> None:
        self.config = config or RpadConfig.from_env()

        self.parser = argparse.ArgumentParser(
            prog="rpad",
            description=DESCRIPTION,
            epilog=EPILOG,
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        self.parser.add_argument("input", help="path to input image")
        self.parser.add_argument("output", nargs="?", help="output directory or padding size")
        self.parser.add_argument("size", nargs="?", help="padding size in pixels")

        # verbosity: -v -> DEBUG, -q -> WARNING
        verbosity = self.parser.add_mutually_exclusive_group()
        verbosity.add_argument("-v", "--verbose", action="store_true", help="show debug messages")
        verbosity.add_argument("-q", "--quiet", action="store_true", help="only show warnings and errors")

        self._controller = AppController(config=self.config)

    def has_valid_arity(self, argv: Sequence[str]) -> bool:
        """Допустимо от одного до трёх позиционных аргументов (флаги не считаются)."""
        positional = [arg for arg in argv if arg == "-" or not arg.startswith("-")]
        return 1 <= len(positional) <= 3

    def parse_args(self, argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
        return self.parser.parse_args(argv)

    def log_level(self, args: argparse.Namespace) -> str:
        if args.verbose:
            return "DEBUG"
        if args.quiet:
            return "WARNING"
        return self.config.log_level

    def run(self, args: argparse.Namespace) -> Path:
        return self._controller.run(args.input, args.output, args.size)
