from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping

from .severity import Level


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class LogEntry:
    """Evento de log estruturado recebido do pipeline de logging."""

    level: Level
    message: str
    data: Mapping[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=_utcnow)


@dataclass(frozen=True)
class MergedEntry:
    level: Level
    message: str
    data: Dict[str, Any]
    timestamp: datetime


@dataclass(frozen=True)
class Field:
    title: str
    value: str
    short: bool

    def to_dict(self) -> Dict[str, Any]:
        return {"title": self.title, "value": self.value, "short": self.short}


@dataclass(frozen=True)
class Attachment:
    text: str
    pretext: str
    fallback: str
    color: str
    fields: List[Field] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "pretext": self.pretext,
            "fallback": self.fallback,
            "color": self.color,
            "fields": [f.to_dict() for f in self.fields],
        }


@dataclass(frozen=True)
class OutboundMessage:
    """Mensagem pronta para o webhook; criada e enviada uma única vez."""

    username: str
    channel: str
    icon_emoji: str
    icon_url: str
    attachment: Attachment

    def to_payload(self) -> Dict[str, Any]:
        # Todas as chaves vão sempre presentes, mesmo vazias
        return {
            "username": self.username,
            "channel": self.channel,
            "icon_emoji": self.icon_emoji,
            "icon_url": self.icon_url,
            "attachments": [self.attachment.to_dict()],
        }
