"""
Schémas Pydantic des données produites pour le panel.
Sérialisés en dict (model_dump) avant d'être rendus au front.
"""
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class PanelLink(BaseModel):
    """Lien + titre (navigation précédent/suivant)."""
    link: str
    title: str


class PickerRow(BaseModel):
    """Ligne d'un picker (sélection de pages, fichiers, utilisateurs)."""
    id: str
    image: Optional[Dict[str, Any]] = None
    info: str = ""
    link: str
    sortable: bool = True
    text: str = ""
    uuid: Optional[str] = None


class DropdownOption(BaseModel):
    icon: str = "page"
    image: Optional[Dict[str, Any]] = None
    link: str
    text: str


class ImageSrcset(BaseModel):
    """URLs redimensionnées de l'image d'un bloc (None si pas d'image)."""
    tiny: Optional[str] = None
    small: Optional[str] = None
    reg: Optional[str] = None
    large: Optional[str] = None
    xxl: Optional[str] = None


class BlockRecord(BaseModel):
    content: Dict[str, Any] = Field(default_factory=dict)
    img_srcset: ImageSrcset = Field(default_factory=ImageSrcset)
