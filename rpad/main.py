"""Точка входа в приложение."""
from __future__ import annotations

import logging
import sys
from typing import Optional, Sequence

from rpad.app import RpadApp


def setup_logging(level: str) -> None:
    """Вывод логов в консоль."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(levelname)s: %(message)s",
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Разбирает аргументы, обрабатывает изображение и возвращает код выхода."""
    try:
        app = RpadApp()
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    argv = sys.argv[1:] if argv is None else list(argv)
    if not app.has_valid_arity(argv):
        # Как в исходной утилите: справка и нормальный выход
        app.parser.print_help()
        return 0

    args = app.parse_args(argv)
    setup_logging(app.log_level(args))

    try:
        app.run(args)
    except (FileNotFoundError, ValueError, MemoryError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
