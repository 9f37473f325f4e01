"""Hook de logging que envia eventos para um incoming webhook do Slack.

Este pacote contém:
- constants: variáveis de ambiente e tabelas fixas
- severity: níveis de log e mapa de cores
- models: entrada de log, campos e mensagem de saída
- config: HookConfig (configuração somente leitura)
- utils: merge de campos e renderização de valores
- filters: cadeia de filtros e filtros prontos
- formatters: montagem, ordenação de campos e composição da mensagem
- services: envio HTTP síncrono ou assíncrono
- hook: SlackHook, que orquestra o pipeline
- handler: SlackHandler, ponte com o módulo logging
"""
from .config import HookConfig
from .handler import SlackHandler
from .hook import SlackHook
from .models import LogEntry, OutboundMessage
from .services import DispatchError, SlackHookError
from .severity import ALL_LEVELS, Level, color_for, level_threshold

__all__ = [
    "ALL_LEVELS",
    "DispatchError",
    "HookConfig",
    "Level",
    "LogEntry",
    "OutboundMessage",
    "SlackHandler",
    "SlackHook",
    "SlackHookError",
    "color_for",
    "level_threshold",
]
