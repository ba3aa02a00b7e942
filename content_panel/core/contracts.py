"""
Contrats : interfaces structurelles des objets fournis par le CMS hôte.

Le panel ne possède jamais ces objets : il les lit via leurs accesseurs.
Toute classe qui expose les bonnes méthodes convient (duck typing).
"""
from typing import Any, Dict, List, Optional, Protocol, Union, runtime_checkable


class Blueprint(Protocol):
    def image(self) -> Union[Dict[str, Any], str, bool, None]: ...
    def tabs(self) -> List[Dict[str, Any]]: ...
    def tab(self, name: Optional[str]) -> Optional[Dict[str, Any]]: ...
    def fields(self) -> Dict[str, Dict[str, Any]]: ...


class Permissions(Protocol):
    def to_dict(self) -> Dict[str, bool]: ...


class Lock(Protocol):
    def is_locked(self) -> bool: ...
    def to_dict(self) -> Dict[str, Any]: ...


class Content(Protocol):
    def to_dict(self) -> Dict[str, Any]: ...


class Version(Protocol):
    def exists(self, language: Optional[str] = None) -> bool: ...
    def content(self, language: Optional[str] = None) -> Content: ...


class Uuid(Protocol):
    def to_string(self) -> str: ...


class ContentModel(Protocol):
    """Page, fichier, utilisateur ou site."""
    id: str
    kind: str

    def blueprint(self) -> Blueprint: ...
    def permissions(self) -> Permissions: ...
    def lock(self) -> Lock: ...
    def version(self, name: str) -> Version: ...
    def uuid(self) -> Optional[Uuid]: ...
    def query(self, expression: str) -> Any: ...
    def to_string(self, template: str) -> str: ...
    def to_safe_string(self, template: Any) -> str: ...
    def field(self, name: str) -> Any: ...


class Navigable(Protocol):
    """Modèle ayant des voisins (navigation précédent/suivant)."""
    def prev(self) -> Optional[ContentModel]: ...
    def next(self) -> Optional[ContentModel]: ...


@runtime_checkable
class ImageAsset(Protocol):
    """Fichier ou asset utilisable comme vignette."""
    def url(self) -> str: ...
    def is_resizable(self) -> bool: ...
    def is_viewable(self) -> bool: ...
    def srcset(self, sizes: Union[List[int], Dict[str, Dict[str, Any]]]) -> Optional[str]: ...


class Thumb(Protocol):
    def url(self) -> str: ...


class ResizableFile(Protocol):
    def resize(self, width: Optional[int] = None, height: Optional[int] = None,
               quality: Optional[int] = None) -> Thumb: ...


class FileField(Protocol):
    def to_file(self) -> Optional[ResizableFile]: ...


class BlockContent(Protocol):
    def field(self, name: str) -> FileField: ...


class Block(Protocol):
    def to_dict(self) -> Dict[str, Any]: ...
    def content(self) -> BlockContent: ...


class BlocksField(Protocol):
    def to_blocks(self) -> List[Block]: ...
