"""Настройки по умолчанию для CLI: ширина полей, каталог вывода, уровень логов.

Значения передаются в контроллер явно; алгоритм рамки их не читает.
"""
from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

DEFAULT_PADDING = 30
MAX_PADDING = 2**32 - 1

_PADDING_RE = re.compile(r"\+?[0-9]+", re.ASCII)


@dataclass(frozen=True)
class RpadConfig:
    """Неизменяемые настройки запуска.

    Fields:
        default_padding: Ширина полей, если она не задана аргументом, px.
        output_dir: Каталог вывода по умолчанию (домашний каталог).
        log_level: Имя уровня `logging`, например "INFO".
    """
    default_padding: int = DEFAULT_PADDING
    output_dir: Path = field(default_factory=Path.home)
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "RpadConfig":
        """Настройки с переопределениями из RPAD_PADDING, RPAD_OUTPUT_DIR, RPAD_LOG_LEVEL.

        Raises:
            ValueError: если RPAD_PADDING не является неотрицательным целым.
        """
        env = os.environ if environ is None else environ
        kwargs = {}

        padding = env.get("RPAD_PADDING")
        if padding:
            kwargs["default_padding"] = parse_padding(padding)

        output_dir = env.get("RPAD_OUTPUT_DIR")
        if output_dir:
            kwargs["output_dir"] = Path(output_dir).expanduser()

        log_level = env.get("RPAD_LOG_LEVEL")
        if log_level:
            kwargs["log_level"] = log_level.upper()

        return cls(**kwargs)


def parse_padding(value: str) -> int:
    """Разбирает ширину полей: только ASCII-цифры (допустим ведущий "+"), не больше 2**32 - 1."""
    if not isinstance(value, str) or _PADDING_RE.fullmatch(value) is None:
        raise ValueError(f"Padding must be a non-negative integer: {value!r}")
    padding = int(value)
    if padding > MAX_PADDING:
        raise ValueError(f"Padding must be a non-negative integer: {value!r}")
    return padding
