"""
Cadeia de filtros aplicada antes do envio.

Um filtro é qualquer função LogEntry -> bool; retornar False veta o envio.
As funções abaixo montam filtros comuns para usar em HookConfig.filters.
"""
import re
from typing import Any, Callable, Iterable

from .models import LogEntry
from .severity import Level

FilterFunc = Callable[[LogEntry], bool]


class FilterChain:
    def __init__(self, filters: Iterable[FilterFunc] = ()):
        self.filters = tuple(filters)

    def passes(self, entry: LogEntry) -> bool:
        for predicate in self.filters:
            if not predicate(entry):
                return False
        return True

    def __len__(self):
        return len(self.filters)


def min_level(level: Level) -> FilterFunc:
    def _filter(entry: LogEntry) -> bool:
        return entry.level >= level
    return _filter


def message_contains(text: str) -> FilterFunc:
    def _filter(entry: LogEntry) -> bool:
        return text in entry.message
    return _filter


def exclude_message(pattern: str) -> FilterFunc:
    """Veta entradas cuja mensagem casa com a regex `pattern`."""
    compiled = re.compile(pattern)

    def _filter(entry: LogEntry) -> bool:
        return compiled.search(entry.message) is None
    return _filter


def has_field(name: str) -> FilterFunc:
    def _filter(entry: LogEntry) -> bool:
        return name in entry.data
    return _filter


def field_equals(name: str, value: Any) -> FilterFunc:
    def _filter(entry: LogEntry) -> bool:
        return name in entry.data and entry.data[name] == value
    return _filter
