"""
Variants : comportements propres à chaque type de modèle.

page / file / user / site : buttons, path, view, image par défaut,
drag text. Sélectionnés par kind via le registry (registry.py).
"""
from typing import Any, Dict, List, Optional, Protocol

from ..core.contracts import Navigable
from .model import _field_str


class PanelVariant(Protocol):
    kind: str

    def image_defaults(self) -> Dict[str, Any]: ...
    def buttons(self, panel) -> List[str]: ...
    def path(self, panel) -> str: ...
    def view(self, panel) -> Dict[str, Any]: ...
    def drag_text(self, panel, type: Optional[str] = None) -> Optional[str]: ...


def _siblings(model) -> Optional[Navigable]:
    if callable(getattr(model, "next", None)) and callable(getattr(model, "prev", None)):
        return model
    return None


def _view(panel, title: str) -> Dict[str, Any]:
    """Payload de vue commun : props + liens voisins (évalués à la lecture)."""
    model = panel.model
    props = panel.props()

    siblings = _siblings(model)
    if siblings is not None:
        props["next"] = lambda: panel.to_prev_next_link(siblings.next())
        props["prev"] = lambda: panel.to_prev_next_link(siblings.prev())

    return {
        "component": f"k-{model.kind}-view",
        "props":     props,
        "title":     title,
    }


class PageVariant:
    kind = "page"

    def image_defaults(self) -> Dict[str, Any]:
        return {"query": "page.image", "icon": "page"}

    def buttons(self, panel) -> List[str]:
        return ["open", "preview", "settings", "languages", "status"]

    def path(self, panel) -> str:
        return "pages/" + panel.model.id.replace("/", "+")

    def view(self, panel) -> Dict[str, Any]:
        return _view(panel, _field_str(panel.model, "title"))

    def drag_text(self, panel, type: Optional[str] = None) -> Optional[str]:
        type = panel.drag_text_type(type)
        custom = panel.drag_text_from_callback(type)
        if custom is not None:
            return custom

        model = panel.model
        title = _field_str(model, "title")

        if type == "markdown":
            return f"[{title}]({model.url()})"

        uuid = model.uuid()
        target = uuid.to_string() if uuid is not None else model.id
        return f"(link: {target} text: {title})"


class FileVariant:
    kind = "file"

    def image_defaults(self) -> Dict[str, Any]:
        return {"query": "file", "icon": "file"}

    def buttons(self, panel) -> List[str]:
        return ["open", "settings", "languages"]

    def path(self, panel) -> str:
        from .registry import panel_for

        parent = panel_for(panel.model.parent(), options=panel.config, request=panel.request)
        return parent.path() + "/files/" + panel.model.filename

    def view(self, panel) -> Dict[str, Any]:
        return _view(panel, panel.model.filename)

    def drag_text(self, panel, type: Optional[str] = None) -> Optional[str]:
        type = panel.drag_text_type(type)
        custom = panel.drag_text_from_callback(type)
        if custom is not None:
            return custom

        model = panel.model
        is_image = model.type == "image"

        if type == "markdown":
            prefix = "!" if is_image else ""
            return f"{prefix}[{model.filename}]({model.url()})"

        return f"({'image' if is_image else 'file'}: {model.filename})"


class UserVariant:
    kind = "user"

    def image_defaults(self) -> Dict[str, Any]:
        return {"query": "user.avatar", "icon": "user", "back": "black"}

    def buttons(self, panel) -> List[str]:
        return ["theme", "settings", "languages"]

    def path(self, panel) -> str:
        return "users/" + panel.model.id

    def view(self, panel) -> Dict[str, Any]:
        model = panel.model
        title = model.field("name") or model.field("email") or model.id
        return _view(panel, str(title))

    def drag_text(self, panel, type: Optional[str] = None) -> Optional[str]:
        return None


class SiteVariant:
    kind = "site"

    def image_defaults(self) -> Dict[str, Any]:
        return {"query": "site.image", "icon": "home"}

    def buttons(self, panel) -> List[str]:
        return ["open", "preview", "languages"]

    def path(self, panel) -> str:
        return "site"

    def view(self, panel) -> Dict[str, Any]:
        return _view(panel, _field_str(panel.model, "title"))

    def drag_text(self, panel, type: Optional[str] = None) -> Optional[str]:
        return None
