from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Dict, Optional

from ..domain.errors import NotFoundError


class Route(Enum):
    LOGIN = "login"
    PANTRY = "pantry"
    SHOPPING_LIST = "shopping_list"
    COOKBOOK = "cookbook"


OnShow = Callable[[Route, Any], None]


class ViewManager:
    """Registry of top-level views keyed by route.

    The manager itself draws nothing; the host window passes ``on_show`` and
    raises the requested view when it is called.
    """

    def __init__(self, on_show: Optional[OnShow] = None) -> None:
        self._log = logging.getLogger(__name__)
        self._views: Dict[Route, Any] = {}
        self._current: Optional[Route] = None
        self.on_show = on_show

    @property
    def current_route(self) -> Optional[Route]:
        return self._current

    def add_view(self, route: Route, view: Any) -> None:
        self._views[route] = view

    def get_view(self, route: Route) -> Any:
        if route not in self._views:
            raise NotFoundError("View does not exist in register", key=getattr(route, "value", str(route)))
        return self._views[route]

    def set_view(self, route: Route) -> None:
        view = self.get_view(route)
        self._current = route
        self._log.debug("Showing %s", route.value)
        if self.on_show is not None:
            self.on_show(route, view)


__all__ = ["OnShow", "Route", "ViewManager"]
