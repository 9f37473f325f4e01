import logging
from typing import Tuple

from .config import HookConfig
from .filters import FilterChain
from .formatters import build_fields, compose_message, sort_fields
from .models import LogEntry, MergedEntry, OutboundMessage
from .services import Dispatcher, SlackClient
from .severity import ALL_LEVELS, Level
from .utils import merge_fields

logger = logging.getLogger(__name__)


class SlackHook:
    """
    Ponto de entrada ligado ao pipeline de logging.

    Para cada entrada: disabled -> filtros -> merge -> sort -> compose -> envio.
    Cada chamada de fire é independente; o único estado compartilhado é a
    configuração, que não muda após a construção.
    """

    def __init__(self, config: HookConfig):
        self.config = config
        self.filter_chain = FilterChain(config.filters)
        self.dispatcher = Dispatcher(
            SlackClient(config.endpoint_url, timeout=config.timeout),
            asynchronous=config.asynchronous,
            on_async_error=config.on_async_error,
        )

    def levels(self) -> Tuple[Level, ...]:
        if not self.config.accepted_levels:
            return ALL_LEVELS
        return tuple(sorted(self.config.accepted_levels))

    def build_message(self, entry: LogEntry) -> OutboundMessage:
        merged = MergedEntry(
            level=entry.level,
            message=entry.message,
            data=merge_fields(self.config.extra_fields, entry.data),
            timestamp=entry.timestamp,
        )
        fields = build_fields(merged.data)
        if self.config.sort_fields:
            fields = sort_fields(fields, self.config.sort_priorities)
        return compose_message(self.config, merged, fields)

    def fire(self, entry: LogEntry) -> None:
        """
        Processa uma entrada e tenta entregá-la.

        Levanta DispatchError no modo síncrono se o envio falhar;
        no modo assíncrono retorna imediatamente.
        """
        if self.config.disabled:
            logger.debug("Hook desabilitado, entrada ignorada")
            return
        if not self.filter_chain.passes(entry):
            logger.debug(f"Entrada vetada pelos filtros: {entry.message!r}")
            return

        message = self.build_message(entry)
        self.dispatcher.dispatch(message)
