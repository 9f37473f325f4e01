from typing import Any, List, Mapping, Optional

from .constants import FIELDS_HEADER, SHORT_FIELD_MAX_LENGTH
from .models import Attachment, Field, MergedEntry, OutboundMessage
from .severity import color_for
from .utils import render_value


def build_fields(merged: Mapping[str, Any]) -> List[Field]:
    fields = []
    for title, raw in merged.items():
        value = render_value(raw)
        fields.append(Field(title=str(title), value=value, short=len(value) <= SHORT_FIELD_MAX_LENGTH))
    return fields


def sort_fields(fields: List[Field], priorities: Optional[Mapping[str, int]] = None) -> List[Field]:
    """
    Ordena os campos para exibição.

    Sem prioridades: ordem lexicográfica do título.
    Com prioridades: campos com prioridade vêm antes dos sem prioridade,
    maior prioridade primeiro; empates (ou ambos sem prioridade) pelo título.
    """
    if not priorities:
        return sorted(fields, key=lambda f: f.title)

    def _key(f: Field):
        if f.title in priorities:
            return (0, -priorities[f.title], f.title)
        return (1, 0, f.title)

    return sorted(fields, key=_key)


def compose_message(config, merged: MergedEntry, fields: List[Field]) -> OutboundMessage:
    if fields:
        attachment = Attachment(
            text=FIELDS_HEADER,
            pretext=merged.message,
            fallback=merged.message,
            color=color_for(merged.level),
            fields=list(fields),
        )
    else:
        attachment = Attachment(
            text=merged.message,
            pretext="",
            fallback=merged.message,
            color=color_for(merged.level),
        )

    return OutboundMessage(
        username=config.username,
        channel=config.channel,
        icon_emoji=config.icon_emoji,
        icon_url=config.icon_url,
        attachment=attachment,
    )
