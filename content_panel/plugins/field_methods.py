"""
Field methods : blocs → contenu brut + srcset précalculé.

Chaque bloc devient {"content": {...}, "img_srcset": {tiny, small, reg, large, xxl}}.
toBlocks_custom et toStructure_custom pointent sur la même fonction.
"""
import logging
from typing import Any, Callable, Dict, List, MutableMapping, Optional, Tuple

from ..core.contracts import Block, BlocksField, ResizableFile
from ..core.schemas import BlockRecord, ImageSrcset

log = logging.getLogger(__name__)

# nom → (largeur, hauteur, qualité)
SRCSET_SIZES: Dict[str, Tuple[int, Optional[int], Optional[int]]] = {
    "tiny":  (50, None, 10),
    "small": (500, None, None),
    "reg":   (1280, None, None),
    "large": (1920, None, None),
    "xxl":   (2500, None, None),
}


def _resize_url(file: Optional[ResizableFile], width: int, height: Optional[int], quality: Optional[int]) -> Optional[str]:
    if file is None:
        return None
    if quality is None:
        thumb = file.resize(width) if height is None else file.resize(width, height)
    else:
        thumb = file.resize(width, height, quality)
    return thumb.url()


def block_record(block: Block, image_field: str = "image") -> Dict[str, Any]:
    file = block.content().field(image_field).to_file()
    srcset = ImageSrcset(**{
        name: _resize_url(file, *size)
        for name, size in SRCSET_SIZES.items()
    })
    return BlockRecord(content=block.to_dict(), img_srcset=srcset).model_dump()


def blocks_with_srcset(field: BlocksField, image_field: str = "image") -> List[Dict[str, Any]]:
    """
    Convertit un champ blocs en liste de records avec srcset.

    Args:
        field: Champ contenant des blocs
        image_field: Nom du champ image de chaque bloc

    Returns:
        Un record par bloc, dans l'ordre du champ
    """
    records = [block_record(block, image_field) for block in field.to_blocks()]
    log.debug("blocks_with_srcset : %d bloc(s)", len(records))
    return records


FIELD_METHODS: Dict[str, Callable[..., List[Dict[str, Any]]]] = {
    "toBlocks_custom":    blocks_with_srcset,
    "toStructure_custom": blocks_with_srcset,
}


def register_field_methods(registry: MutableMapping[str, Callable[..., Any]]) -> MutableMapping[str, Callable[..., Any]]:
    """Enregistre les field methods dans le registry du CMS hôte."""
    registry.update(FIELD_METHODS)
    return registry
