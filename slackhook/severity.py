import logging
from enum import IntEnum
from typing import Tuple

from .constants import DEBUG_COLOR, INFO_COLOR, WARNING_COLOR, DANGER_COLOR


class Level(IntEnum):
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    FATAL = 5
    PANIC = 6

    @classmethod
    def from_logging(cls, levelno: int) -> "Level":
        """Converte um levelno do módulo logging para Level."""
        if levelno <= logging.DEBUG:
            return cls.DEBUG
        if levelno <= logging.INFO:
            return cls.INFO
        if levelno <= logging.WARNING:
            return cls.WARN
        if levelno <= logging.ERROR:
            return cls.ERROR
        return cls.FATAL

    @classmethod
    def parse(cls, name: str) -> "Level":
        key = (name or "").strip().upper()
        if key == "WARNING":
            key = "WARN"
        elif key == "CRITICAL":
            key = "FATAL"
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"nível de log desconhecido: {name!r}") from None


ALL_LEVELS: Tuple[Level, ...] = tuple(Level)

LEVEL_COLORS = {
    Level.DEBUG: DEBUG_COLOR,
    Level.INFO: INFO_COLOR,
    Level.ERROR: DANGER_COLOR,
    Level.FATAL: DANGER_COLOR,
    Level.PANIC: DANGER_COLOR,
}


def color_for(level) -> str:
    # WARN e qualquer outro valor caem em "warning"
    return LEVEL_COLORS.get(level, WARNING_COLOR)


def level_threshold(level: Level) -> Tuple[Level, ...]:
    """
    Retorna todos os níveis iguais ou mais severos que `level`.

    Exemplo:
        level_threshold(Level.ERROR) -> (ERROR, FATAL, PANIC)
    """
    return tuple(lv for lv in ALL_LEVELS if lv >= level)
