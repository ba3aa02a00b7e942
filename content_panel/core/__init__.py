"""Core module pour content_panel."""
from .options import PanelOptions
from .schemas import (
    PanelLink,
    PickerRow,
    DropdownOption,
    ImageSrcset,
    BlockRecord,
)
from .contracts import ContentModel, ImageAsset, Navigable

__all__ = [
    "PanelOptions",
    "PanelLink",
    "PickerRow",
    "DropdownOption",
    "ImageSrcset",
    "BlockRecord",
    "ContentModel",
    "ImageAsset",
    "Navigable",
]
