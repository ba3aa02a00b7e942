"""
content_panel v0.1 : données du panel d'administration + field methods.

Usage (panel):
    >>> from content_panel import panel_for, PanelOptions
    >>> panel = panel_for(page, options=PanelOptions(url="/panel"), request={"tab": "seo"})
    >>> panel.image({"cover": True}, layout="cards")
    >>> panel.props()

Usage (field methods):
    >>> from content_panel import blocks_with_srcset
    >>> blocks_with_srcset(page.field("gallery"))

Usage (FastAPI):
    >>> from content_panel.router import create_panel_router
    >>> app.include_router(create_panel_router(resolve_model))
"""

from .core import (
    PanelOptions,
    PanelLink,
    PickerRow,
    DropdownOption,
    ImageSrcset,
    BlockRecord,
    ContentModel,
    ImageAsset,
    Navigable,
)
from .form import Fields
from .panel import (
    PanelModel,
    IMAGE_PLACEHOLDER,
    resolve_lazy,
    PanelVariant,
    PageVariant,
    FileVariant,
    UserVariant,
    SiteVariant,
    panel_for,
    variant_for,
)
from .plugins import (
    SRCSET_SIZES,
    FIELD_METHODS,
    block_record,
    blocks_with_srcset,
    register_field_methods,
)

__version__ = "0.1.0"

__all__ = [
    # core
    "PanelOptions", "PanelLink", "PickerRow", "DropdownOption",
    "ImageSrcset", "BlockRecord",
    "ContentModel", "ImageAsset", "Navigable",
    # form
    "Fields",
    # panel
    "PanelModel", "IMAGE_PLACEHOLDER", "resolve_lazy",
    "PanelVariant", "PageVariant", "FileVariant", "UserVariant", "SiteVariant",
    "panel_for", "variant_for",
    # plugins
    "SRCSET_SIZES", "FIELD_METHODS", "block_record", "blocks_with_srcset",
    "register_field_methods",
]
