from typing import Any, Dict, Mapping, Optional


def render_value(value: Any) -> str:
    # Conversão única para todos os tipos, sem inspeção de tipo
    return str(value)


def merge_fields(extra_fields: Optional[Mapping[str, Any]], entry_data: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Combina os campos fixos do hook com os campos da entrada.
    Em caso de colisão, o valor da entrada prevalece.
    """
    merged = dict(extra_fields or {})
    merged.update(entry_data or {})
    return merged
