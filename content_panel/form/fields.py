"""
Fields : normalisation des valeurs de contenu au format du formulaire.

Les champs déclarés dans le blueprint définissent la forme du résultat :
chaque champ reçoit la valeur remplie, sinon son `default`.
"""
from typing import Any, Dict, Optional


class Fields:
    def __init__(self, definitions: Dict[str, Dict[str, Any]], language: Optional[str] = None):
        self.definitions = {name.lower(): definition or {} for name, definition in definitions.items()}
        self.language = language
        self._values: Dict[str, Any] = {}

    @classmethod
    def for_model(cls, model, language: Optional[str] = None) -> "Fields":
        return cls(model.blueprint().fields(), language)

    def reset(self) -> "Fields":
        self._values = {}
        return self

    def fill(self, values: Dict[str, Any]) -> "Fields":
        for key, value in values.items():
            self._values[key.lower()] = value
        return self

    def to_form_values(self) -> Dict[str, Any]:
        return {
            name: self._values.get(name, definition.get("default"))
            for name, definition in self.definitions.items()
        }
