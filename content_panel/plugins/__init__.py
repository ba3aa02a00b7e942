"""Plugins : field methods du site."""
from .field_methods import (
    SRCSET_SIZES,
    FIELD_METHODS,
    block_record,
    blocks_with_srcset,
    register_field_methods,
)

__all__ = [
    "SRCSET_SIZES",
    "FIELD_METHODS",
    "block_record",
    "blocks_with_srcset",
    "register_field_methods",
]
