"""Doubles MagicMock des objets du CMS hôte (modèles, versions, assets, blocs)."""
from unittest.mock import MagicMock


def make_version(content=None, exists=True):
    v = MagicMock()
    v.exists.return_value = exists
    v.content.return_value.to_dict.return_value = dict(content or {})
    return v


def make_model(
    kind="page",
    id="blog/article",
    title="Article",
    blueprint_image=None,
    tabs=None,
    fields=None,
    permissions=None,
    locked=False,
    latest=None,
    changes=None,
    query_result=None,
    uuid="page://abc",
):
    m = MagicMock()
    m.kind = kind
    m.id = id

    tabs = tabs or []
    bp = m.blueprint.return_value
    bp.image.return_value = blueprint_image
    bp.tabs.return_value = tabs
    bp.tab.side_effect = lambda name: next((t for t in tabs if t["name"] == name), None)
    bp.fields.return_value = fields if fields is not None else {"title": {"type": "text"}, "text": {"type": "textarea"}}

    m.permissions.return_value.to_dict.return_value = dict(
        permissions if permissions is not None else {"read": True, "update": True, "delete": True}
    )
    m.lock.return_value.is_locked.return_value = locked
    m.lock.return_value.to_dict.return_value = {"isLocked": locked}

    versions = {
        "latest":  make_version(latest if latest is not None else {"title": title, "text": "Bonjour"}),
        "changes": make_version(changes, exists=changes is not None),
    }
    m.version.side_effect = lambda name: versions[name]

    m.query.return_value = query_result
    m.to_string.side_effect = lambda t: t.replace("{{ page.title }}", title)
    m.to_safe_string.side_effect = lambda t: t.replace("{{ page.title }}", title) if isinstance(t, str) else ""
    m.field.side_effect = lambda name: {"title": title}.get(name)
    m.url.return_value = "https://example.com/" + id

    if uuid:
        m.uuid.return_value.to_string.return_value = uuid
    else:
        m.uuid.return_value = None

    m.prev.return_value = None
    m.next.return_value = None
    return m


class FakeAsset:
    """Asset dont srcset() renvoie les tailles demandées (inspectables)."""

    def __init__(self, resizable=True, viewable=True, url="/media/cover.jpg"):
        self._url = url
        self._resizable = resizable
        self._viewable = viewable

    def url(self):
        return self._url

    def is_resizable(self):
        return self._resizable

    def is_viewable(self):
        return self._viewable

    def srcset(self, sizes):
        return sizes


def make_asset(resizable=True, viewable=True, url="/media/cover.jpg"):
    return FakeAsset(resizable=resizable, viewable=viewable, url=url)
