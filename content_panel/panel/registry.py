"""
Registry des variants : kind du modèle → variant.
"""
import logging
from typing import Any, Optional

from ..core.options import PanelOptions
from .model import PanelModel
from .variants import FileVariant, PageVariant, PanelVariant, SiteVariant, UserVariant

log = logging.getLogger(__name__)

_VARIANT_REGISTRY: dict = {
    "page": PageVariant(),
    "file": FileVariant(),
    "user": UserVariant(),
    "site": SiteVariant(),
}


def variant_for(kind: str) -> PanelVariant:
    variant = _VARIANT_REGISTRY.get(kind)
    if variant is None:
        log.warning("type de modèle inconnu : %r", kind)
        raise ValueError(f"Type de modèle inconnu : {kind!r}. Registry : {list(_VARIANT_REGISTRY)}")
    return variant


def panel_for(
    model,
    options: Optional[PanelOptions] = None,
    request: Optional[Any] = None,
    language: Optional[str] = None,
    **kwargs: Any,
) -> PanelModel:
    """Construit le PanelModel d'un modèle selon son kind."""
    return PanelModel(
        model,
        variant_for(model.kind),
        options=options,
        request=request,
        language=language,
        **kwargs,
    )
