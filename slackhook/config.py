import os
from types import MappingProxyType
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, FrozenSet, Mapping, Optional, Tuple

from .constants import (
    DEFAULT_USERNAME,
    DEFAULT_IGNORED_LOGGERS,
    ENV_WEBHOOK_URL,
    ENV_CHANNEL,
    ENV_USERNAME,
    ENV_ICON_EMOJI,
    ENV_ICON_URL,
    ENV_ASYNC,
    ENV_DISABLED,
    ENV_SORT_FIELDS,
    ENV_MIN_LEVEL,
    ENV_TIMEOUT_SECONDS,
)
from .filters import FilterFunc
from .severity import Level, level_threshold


def _env_flag(environ: Mapping[str, str], name: str) -> bool:
    return environ.get(name, "false").lower() == "true"


@dataclass(frozen=True)
class HookConfig:
    """
    Configuração de um SlackHook. Montada uma vez no setup e apenas lida depois.

    accepted_levels vazio significa "aceita todos os níveis".
    sort_priorities: título -> prioridade (maior aparece antes).
    on_async_error: callback opcional para observar falhas do envio assíncrono;
    sem ele, essas falhas são descartadas.
    """

    endpoint_url: str = ""
    channel: str = ""
    username: str = DEFAULT_USERNAME
    icon_emoji: str = ""
    icon_url: str = ""
    accepted_levels: FrozenSet[Level] = frozenset()
    filters: Tuple[FilterFunc, ...] = ()
    asynchronous: bool = False
    extra_fields: Mapping[str, Any] = field(default_factory=dict, hash=False)
    disabled: bool = False
    sort_fields: bool = False
    sort_priorities: Mapping[str, int] = field(default_factory=dict, hash=False)
    timeout: Optional[float] = None
    on_async_error: Optional[Callable[[Exception], None]] = None
    ignored_loggers: Tuple[str, ...] = DEFAULT_IGNORED_LOGGERS

    def __post_init__(self):
        # Copia coleções para que alterações externas não vazem para o hook
        object.__setattr__(self, "accepted_levels", frozenset(self.accepted_levels or ()))
        object.__setattr__(self, "filters", tuple(self.filters or ()))
        object.__setattr__(self, "extra_fields", MappingProxyType(dict(self.extra_fields or {})))
        object.__setattr__(self, "sort_priorities", MappingProxyType(dict(self.sort_priorities or {})))
        object.__setattr__(self, "ignored_loggers", tuple(self.ignored_loggers or ()))

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "HookConfig":
        """
        Monta a configuração a partir das variáveis SLACK_*.
        Argumentos nomeados sobrescrevem o que veio do ambiente.
        """
        env = os.environ if environ is None else environ

        values: Dict[str, Any] = {
            "endpoint_url": env.get(ENV_WEBHOOK_URL, ""),
            "channel": env.get(ENV_CHANNEL, ""),
            "username": env.get(ENV_USERNAME) or DEFAULT_USERNAME,
            "icon_emoji": env.get(ENV_ICON_EMOJI, ""),
            "icon_url": env.get(ENV_ICON_URL, ""),
            "asynchronous": _env_flag(env, ENV_ASYNC),
            "disabled": _env_flag(env, ENV_DISABLED),
            "sort_fields": _env_flag(env, ENV_SORT_FIELDS),
        }

        min_level = env.get(ENV_MIN_LEVEL, "").strip()
        if min_level:
            values["accepted_levels"] = frozenset(level_threshold(Level.parse(min_level)))

        timeout = env.get(ENV_TIMEOUT_SECONDS, "").strip()
        if timeout:
            values["timeout"] = float(timeout)

        values.update(overrides)
        return cls(**values)
