"""
Options du panel : configuration explicite passée au builder.

Remplace la lecture de la config globale du CMS :
  - url        : URL de base du panel (PANEL_URL)
  - kirbytext  : drag text en kirbytext (True) ou markdown (PANEL_KIRBYTEXT)
  - drag_texts : callbacks "panel.<type>.<kind>DragText" → str
"""
import os
from typing import Any, Callable, Dict, Optional

from pydantic import BaseModel, Field, field_validator


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in ("0", "false", "no", "off", "")


class PanelOptions(BaseModel):
    url: str = Field(default="/panel", description="URL de base du panel")
    kirbytext: bool = True
    drag_texts: Dict[str, Callable[..., Optional[str]]] = Field(default_factory=dict)

    @field_validator("url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @classmethod
    def from_env(cls, **overrides: Any) -> "PanelOptions":
        """Construit les options depuis l'environnement (PANEL_URL, PANEL_KIRBYTEXT)."""
        values: Dict[str, Any] = {
            "url": os.getenv("PANEL_URL", "/panel"),
            "kirbytext": _env_flag("PANEL_KIRBYTEXT", True),
        }
        values.update(overrides)
        return cls(**values)

    def drag_text_callback(self, type: str, kind: str) -> Optional[Callable[..., Optional[str]]]:
        return self.drag_texts.get(f"panel.{type}.{kind}DragText")
