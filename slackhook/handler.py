import logging
from datetime import datetime, timezone
from typing import Any, Dict

from .hook import SlackHook
from .models import LogEntry
from .severity import Level

# Atributos que todo LogRecord tem; o resto veio de `extra=`
_RESERVED_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime", "taskName"}


def extract_fields(record: logging.LogRecord) -> Dict[str, Any]:
    data = {k: v for k, v in vars(record).items() if k not in _RESERVED_ATTRS and not k.startswith("_")}
    if record.exc_info:
        data["error"] = logging.Formatter().formatException(record.exc_info)
    return data


def record_to_entry(record: logging.LogRecord) -> LogEntry:
    return LogEntry(
        level=Level.from_logging(record.levelno),
        message=record.getMessage(),
        data=extract_fields(record),
        timestamp=datetime.fromtimestamp(record.created, tz=timezone.utc),
    )


class SlackHandler(logging.Handler):
    """
    Handler do módulo logging que encaminha registros para um SlackHook.

    Uso:
        hook = SlackHook(HookConfig.from_env())
        logging.getLogger().addHandler(SlackHandler(hook))
    """

    def __init__(self, hook: SlackHook, level=logging.NOTSET):
        super().__init__(level)
        self.hook = hook

    def _is_ignored(self, name: str) -> bool:
        for prefix in self.hook.config.ignored_loggers:
            if name == prefix or name.startswith(prefix + "."):
                return True
        return False

    def handle(self, record):
        # Sem o lock do Handler: fire é reentrante e envios síncronos não devem se serializar
        rv = self.filter(record)
        if isinstance(rv, logging.LogRecord):
            record = rv
        if rv:
            self.emit(record)
        return rv

    def emit(self, record: logging.LogRecord) -> None:
        # Registros do próprio transporte nunca voltam para o Slack
        if self._is_ignored(record.name):
            return
        if Level.from_logging(record.levelno) not in self.hook.levels():
            return
        try:
            self.hook.fire(record_to_entry(record))
        except Exception:
            self.handleError(record)
