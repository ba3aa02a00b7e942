"""Panel : builder des données d'écran d'édition."""
from .model import PanelModel, IMAGE_PLACEHOLDER, resolve_lazy
from .variants import PanelVariant, PageVariant, FileVariant, UserVariant, SiteVariant
from .registry import panel_for, variant_for

__all__ = [
    "PanelModel",
    "IMAGE_PLACEHOLDER",
    "resolve_lazy",
    "PanelVariant",
    "PageVariant",
    "FileVariant",
    "UserVariant",
    "SiteVariant",
    "panel_for",
    "variant_for",
]
