"""Form : normalisation des valeurs de champs."""
from .fields import Fields

__all__ = ["Fields"]
