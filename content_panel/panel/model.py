"""
PanelModel : données d'écran d'édition pour un modèle de contenu.

Image (vignette + srcset), permissions, verrou, onglets, versions
latest/changes, lignes de picker, liens de navigation, drag text.
Les parties propres à chaque type de modèle (buttons, path, view)
sont déléguées à un variant (voir variants.py).
"""
import logging
import math
from typing import Any, Callable, Dict, Iterable, List, Optional, Union
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from ..core.contracts import ContentModel, ImageAsset
from ..core.options import PanelOptions
from ..core.schemas import DropdownOption, PanelLink, PickerRow
from ..form import Fields

log = logging.getLogger(__name__)

IMAGE_PLACEHOLDER = "data:image/gif;base64,R0lGODlhAQABAIAAAP///wAAACH5BAEAAAAALAAAAAABAAEAAAICRAEAOw"

_IMAGE_DEFAULTS: Dict[str, Any] = {
    "back":  "pattern",
    "color": "gray-500",
    "cover": False,
    "icon":  "page",
}

# Largeurs disponibles pour le srcset selon le layout
_SRCSET_SIZES: Dict[str, List[int]] = {
    "cards":    [352, 864, 1408],
    "cardlets": [96, 192],
}
_DEFAULT_SIZES = [38, 76]

ImageSettings = Union[Dict[str, Any], str, bool, None]


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _parse_ratio(ratio: Any) -> float:
    """1.5, "1.5" ou "3/2" → 1.5"""
    if isinstance(ratio, (int, float)):
        return float(ratio)
    try:
        return float(ratio)
    except ValueError:
        width, height = str(ratio).split("/", 1)
        return float(width) / float(height)


def _field_str(model: ContentModel, name: str) -> str:
    """Valeur d'un champ en texte ; champ absent → ""."""
    value = model.field(name)
    return "" if value is None else str(value)


def _with_query(link: str, **params: str) -> str:
    """Ajoute (ou remplace) des paramètres de query sur un lien."""
    parts = urlsplit(link)
    query = dict(parse_qsl(parts.query))
    query.update(params)
    return urlunsplit(parts._replace(query=urlencode(query)))


def resolve_lazy(data: Any) -> Any:
    """Évalue récursivement les producteurs sans argument (buttons, uuid, next…)."""
    if callable(data):
        return resolve_lazy(data())
    if isinstance(data, dict):
        return {key: resolve_lazy(value) for key, value in data.items()}
    if isinstance(data, list):
        return [resolve_lazy(value) for value in data]
    return data


class PanelModel:
    """
    Builder des données du panel pour un modèle.

    Usage:
        >>> panel = panel_for(page, options=PanelOptions(), request={"tab": "seo"})
        >>> panel.props()
        >>> panel.image({"cover": True}, layout="cards")
    """

    def __init__(
        self,
        model: ContentModel,
        variant,
        options: Optional[PanelOptions] = None,
        request: Optional[Any] = None,
        language: Optional[str] = None,
        fields: Optional[Callable[[ContentModel, Optional[str]], Fields]] = None,
    ):
        """
        Args:
            model: Modèle de contenu (page, fichier, utilisateur, site)
            variant: Comportements propres au type de modèle
            options: Configuration du panel (exposée en self.config)
            request: Paramètres de la requête courante (objet avec .get)
            language: Langue active (None = langue par défaut)
            fields: Fabrique de la couche de normalisation des champs
        """
        self._model = model
        self.variant = variant
        self.config = options or PanelOptions()
        self.request = request if request is not None else {}
        self.language = language
        self.fields = fields or Fields.for_model

    @property
    def model(self) -> ContentModel:
        return self._model

    # ── Hooks du variant ────────────────────────────────────────────────────

    def buttons(self) -> List[str]:
        return self.variant.buttons(self)

    def path(self) -> str:
        return self.variant.path(self)

    def view(self) -> Dict[str, Any]:
        return self.variant.view(self)

    def drag_text(self, type: Optional[str] = None) -> Optional[str]:
        return self.variant.drag_text(self, type)

    # ── Contenu ─────────────────────────────────────────────────────────────

    def content(self) -> Dict[str, Any]:
        """Valeurs de contenu courantes (version changes)."""
        return self.versions()["changes"]

    def versions(self) -> Dict[str, Dict[str, Any]]:
        """
        Deux versions du contenu : latest et changes.

        Les deux passent par la couche Fields pour être au format du
        formulaire. Sans version changes pour la langue active, latest
        est utilisée pour les deux.
        """
        fields = self.fields(self._model, self.language)

        latest_version  = self._model.version("latest")
        changes_version = self._model.version("changes")

        latest_content  = latest_version.content(self.language).to_dict()
        changes_content = latest_content

        if changes_version.exists(self.language):
            changes_content = changes_version.content(self.language).to_dict()

        return {
            "latest":  fields.reset().fill(latest_content).to_form_values(),
            "changes": fields.reset().fill(changes_content).to_form_values(),
        }

    # ── Drag text ───────────────────────────────────────────────────────────

    def drag_text_from_callback(self, type: str, *args: Any) -> Optional[str]:
        """Drag text issu d'un callback configuré (panel.<type>.<kind>DragText)."""
        callback = self.config.drag_text_callback(type, self._model.kind)
        if callable(callback):
            return callback(self._model, *args)
        return None

    def drag_text_type(self, type: Optional[str] = "auto") -> str:
        """auto → selon options.kirbytext ; tout sauf markdown → kirbytext."""
        type = type or "auto"
        if type == "auto":
            type = "kirbytext" if self.config.kirbytext else "markdown"
        return "markdown" if type == "markdown" else "kirbytext"

    # ── Image ───────────────────────────────────────────────────────────────

    def image_defaults(self) -> Dict[str, Any]:
        return {**_IMAGE_DEFAULTS, **self.variant.image_defaults()}

    @staticmethod
    def image_placeholder() -> str:
        return IMAGE_PLACEHOLDER

    def image(self, settings: ImageSettings = None, layout: str = "list") -> Optional[Dict[str, Any]]:
        """
        Définition de l'image du panel.

        Ordre de fusion : défauts < settings < blueprint.
        settings=False coupe l'image ; blueprint False aussi, sauf si
        des settings non vides sont fournis.
        """
        if settings is False:
            return None

        blueprint = self._model.blueprint().image()

        if blueprint is False:
            if not settings:
                log.debug("image désactivée par le blueprint (%s %s)", self._model.kind, self._model.id)
                return None
            blueprint = None

        if isinstance(blueprint, str):
            blueprint = {"query": blueprint}
        elif not isinstance(blueprint, dict):
            blueprint = None

        # "icon" : pas de vignette, uniquement l'icône
        if settings == "icon":
            settings = {"query": False}

        if isinstance(settings, str):
            settings = {"query": settings}

        settings = {
            **self.image_defaults(),
            **(settings or {}),
            **(blueprint or {}),
        }

        image = self._image_source(settings.get("query"))
        if image is not None:
            settings["url"] = image.url()

            if image.is_resizable():
                # srcset uniquement pour les fichiers redimensionnables
                settings["src"]    = self.image_placeholder()
                settings["srcset"] = self._image_srcset(image, layout, settings)
            elif image.is_viewable():
                settings["src"] = image.url()

        settings.pop("query", None)

        # Options restantes définies comme query
        return {
            key: self._model.to_string(value) if isinstance(value, str) else value
            for key, value in settings.items()
        }

    def _image_source(self, query: Any) -> Optional[ImageAsset]:
        if not isinstance(query, str) or not query:
            return None

        image = self._model.query(query)
        if isinstance(image, ImageAsset):
            return image
        return None

    def _image_srcset(self, image: ImageAsset, layout: str, settings: Dict[str, Any]) -> Optional[str]:
        sizes = _SRCSET_SIZES.get(layout, _DEFAULT_SIZES)

        cover = settings.get("cover")
        if cover is None or cover is False:
            return image.srcset(sizes)

        # cards + cover : crops selon le ratio de la carte
        if layout == "cards":
            ratio = settings.get("ratio")
            ratio = _parse_ratio("1/1" if ratio is None else ratio)
            return image.srcset({
                f"{size}w": {
                    "width":  size,
                    "height": _round_half_up(size / ratio),
                    "crop":   True,
                }
                for size in sizes
            })

        # list / cardlets + cover : crops carrés en 1x et 2x
        return image.srcset({
            "1x": {"width": sizes[0], "height": sizes[0], "crop": True},
            "2x": {"width": sizes[1], "height": sizes[1], "crop": True},
        })

    # ── Permissions ─────────────────────────────────────────────────────────

    def options(self, unlock: Iterable[str] = ()) -> Dict[str, bool]:
        """
        Actions possibles dans le panel, en tenant compte du verrou.

        Args:
            unlock: Actions à garder actives même si le modèle est verrouillé
        """
        options = dict(self._model.permissions().to_dict())

        if self._model.lock().is_locked():
            unlock = set(unlock)
            log.debug("modèle verrouillé (%s %s) : options forcées à False", self._model.kind, self._model.id)
            options = {key: value if key in unlock else False for key, value in options.items()}

        return options

    @staticmethod
    def is_disabled_dropdown_option(action: str, options: Dict[str, Any], permissions: Dict[str, Any]) -> bool:
        option = options.get(action, True)
        return (
            permissions.get(action) is False
            or option is False
            or option == "false"
        )

    def dropdown_option(self) -> Dict[str, Any]:
        return DropdownOption(
            icon="page",
            image=self.image({"back": "black"}),
            link=self.url(True),
            text=self._model.id,
        ).model_dump()

    # ── Props / liens ───────────────────────────────────────────────────────

    def _uuid(self) -> Optional[str]:
        uuid = self._model.uuid()
        return uuid.to_string() if uuid is not None else None

    def picker_data(self, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Ligne pour les pickers et champs de sélection."""
        params = params or {}
        return PickerRow(
            id=self._model.id,
            image=self.image(params.get("image", {}), params.get("layout", "list")),
            info=self._model.to_safe_string(params.get("info", False)) or "",
            link=self.url(True),
            sortable=True,
            text=self._model.to_safe_string(params.get("text", False)) or "",
            uuid=self._uuid(),
        ).model_dump()

    def props(self) -> Dict[str, Any]:
        """Props du composant de vue (buttons et uuid évalués à la lecture)."""
        blueprint = self._model.blueprint()
        link      = self.url(True)
        tabs      = blueprint.tabs()
        requested = self.request.get("tab")
        tab       = (blueprint.tab(requested) if requested else None) or (tabs[0] if tabs else None)
        versions  = self.versions()

        props: Dict[str, Any] = {
            "api":         link,
            "buttons":     self.buttons,
            "id":          self._model.id,
            "link":        link,
            "lock":        self._model.lock().to_dict(),
            "permissions": self._model.permissions().to_dict(),
            "tabs":        tabs,
            "uuid":        self._uuid,
            "versions": {
                "latest":  dict(versions["latest"]),
                "changes": dict(versions["changes"]),
            },
        }

        # l'onglet n'est envoyé que s'il existe
        if tab:
            props["tab"] = tab

        return props

    def to_link(self, title: str = "title") -> Dict[str, str]:
        return PanelLink(
            link=self.url(True),
            title=_field_str(self._model, title),
        ).model_dump()

    def to_prev_next_link(self, model: Optional[ContentModel] = None, title: str = "title") -> Optional[Dict[str, str]]:
        """Lien vers un modèle voisin, en conservant l'onglet sélectionné."""
        if model is None:
            return None

        from .registry import panel_for

        sibling = panel_for(model, options=self.config, request=self.request, language=self.language)
        data = sibling.to_link(title)

        tab = self.request.get("tab")
        if tab:
            data["link"] = _with_query(data["link"], tab=tab)

        return data

    def url(self, relative: bool = False) -> str:
        if relative:
            return "/" + self.path()
        return self.config.url + "/" + self.path()
