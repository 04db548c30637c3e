# pantrypal/app/main.py
from __future__ import annotations
import logging
from typing import Any, Callable, Optional

# ---- Views (UI-only) ----
from .views.main_window import MainWindowView
from .views.login_view import LoginView
from .views.pantry_view import PantryView
from .views.shopping_list_view import ShoppingListView
from .views.cookbook_view import CookbookView

# ---- Controllers ----
from .controller import DISPATCH_ERRORS
from .cookbook_controller import CookbookController
from .login_controller import LoginController
from .pantry_controller import PantryController
from .shopping_list_controller import ShoppingListController
from .view_manager import Route, ViewManager

# ---- ViewModels ----
from ..viewmodels.recipe_form import RecipeFormVM
from ..viewmodels.settings_vm import SettingsVM

# ---- UseCases & Adapters ----
from ..adapters.db_errors import PersistenceError
from ..adapters.sql_repositories import CatalogSql, CookbookSql, PantrySql, ShoppingListSql, UserSql
from ..adapters.sqlite_db import SqliteDatabase, open_database
from ..adapters.storage_local import StorageLocal, default_storage_root
from ..domain.entities import Grocery
from ..domain.ports import UseCaseError
from ..domain.session import Session
from ..usecases.error_mapping import map_error
from ..usecases.user_settings import LoadUserSettings, SaveUserSettings
from ..utils import logging as logging_utils

logging_utils.configure_root()


class App:
    """Bootstrap: wire Views <-> Controllers, SQLite repositories, and settings."""

    def __init__(self, *, storage_root: Optional[str] = None) -> None:
        self._log = logging.getLogger(__name__)
        self.win = MainWindowView(
            on_open_pantry=lambda: self._navigate(Route.PANTRY),
            on_open_shopping_list=lambda: self._navigate(Route.SHOPPING_LIST),
            on_open_cookbook=lambda: self._navigate(Route.COOKBOOK),
            on_log_out=self._on_log_out,
            on_toggle_debug=self._on_toggle_debug,
        )

        # ---- Settings ----
        self._storage_root = storage_root or default_storage_root()
        self._storage = StorageLocal(root_dir=self._storage_root)
        self.settings_vm = SettingsVM()
        self.recipe_form = RecipeFormVM()
        self._load_user_settings()
        self._apply_logging_preferences()

        # ---- Persistence ----
        self.db = self._open_database()
        catalog = CatalogSql(self.db)

        # ---- Session & navigation ----
        self.session = Session()
        self.view_manager = ViewManager(on_show=self._on_show_view)

        # ---- Views ----
        self.login_view = LoginView(self.win.content_host)
        self.pantry_view = PantryView(self.win.content_host)
        self.shopping_view = ShoppingListView(self.win.content_host)
        self.cookbook_view = CookbookView(self.win.content_host)
        for route, view in (
            (Route.LOGIN, self.login_view),
            (Route.PANTRY, self.pantry_view),
            (Route.SHOPPING_LIST, self.shopping_view),
            (Route.COOKBOOK, self.cookbook_view),
        ):
            self.win.mount_view(view)
            self.view_manager.add_view(route, view)

        # ---- Controllers ----
        self.pantry_controller = PantryController(
            self.pantry_view,
            self.view_manager,
            self.session,
            pantry_store=PantrySql(self.db),
            catalog=catalog,
        )
        self.shopping_controller = ShoppingListController(
            self.shopping_view,
            self.view_manager,
            self.session,
            pantry=self.pantry_controller,
            shopping_store=ShoppingListSql(self.db),
            catalog=catalog,
        )
        self.cookbook_controller = CookbookController(
            self.cookbook_view,
            self.view_manager,
            self.session,
            shopping_list=self.shopping_controller,
            cookbook_store=CookbookSql(self.db),
        )
        self.login_controller = LoginController(
            self.login_view,
            self.view_manager,
            self.session,
            users=UserSql(self.db),
            settings_vm=self.settings_vm,
            storage=self._storage,
        )
        controllers = (
            self.pantry_controller,
            self.shopping_controller,
            self.cookbook_controller,
            self.login_controller,
        )
        for controller in controllers:
            controller.on_error = self._toast_error

        # ---- View callbacks (non-action intents) ----
        self.pantry_view.on_add_shelf = self._guard(self.pantry_controller.add_shelf)
        self.pantry_view.on_delete_shelf = self._guard(self.pantry_controller.delete_shelf)
        self.pantry_view.on_rename_shelf = self._guard(self.pantry_controller.edit_shelf_name)
        self.pantry_view.on_add_grocery = self._guard(self._on_add_pantry_grocery)
        self.shopping_view.on_add_grocery = self._guard(self._on_add_shopping_grocery)
        self.shopping_view.on_checked = self._guard(self.shopping_controller.set_checked)
        self.shopping_view.on_quantity = self._guard(self._on_shopping_quantity)
        self.cookbook_view.on_search = self._guard(self.cookbook_controller.search_recipes)
        self.cookbook_view.on_save_recipe = self._guard(self._on_save_recipe)
        self.cookbook_view.on_edit_recipe = self._on_edit_recipe
        self.cookbook_view.on_new_recipe = self._on_new_recipe

        # rows built before the callbacks existed
        for controller in controllers:
            controller.render()

        self.session.subscribe(self._on_session_changed)
        self.win.protocol("WM_DELETE_WINDOW", self._on_close)
        self.view_manager.set_view(Route.LOGIN)

    # ------------------------------------------------------------------
    # Startup helpers
    # ------------------------------------------------------------------
    def _load_user_settings(self) -> None:
        try:
            payload = LoadUserSettings(self._storage)()
        except UseCaseError as exc:
            self.win.show_toast(exc.message, level="warning")
            return
        if payload:
            try:
                self.settings_vm.apply_dict(payload)
            except ValueError as exc:
                self._log.warning("Ignoring stored settings: %s", exc)
                self.win.show_toast(f"Ignoring stored settings: {exc}", level="warning")

    def _apply_logging_preferences(self) -> None:
        logging_utils.apply_saved_preference(self.settings_vm.debug_logging)
        self.win.set_debug_logging(self.settings_vm.debug_logging)

    def _open_database(self) -> SqliteDatabase:
        path = self.settings_vm.resolve_db_path(self._storage_root)
        try:
            database = open_database(path)
        except PersistenceError as exc:
            self._log.error("Database %s unavailable, falling back to memory: %s", path, exc)
            self.win.show_toast("Database unavailable; changes will not be saved.", level="error")
            return open_database(":memory:")
        self._log.info("Using database %s", path)
        return database

    # ------------------------------------------------------------------
    # Callbacks
    # ------------------------------------------------------------------
    def _guard(self, handler: Callable[..., Any]) -> Callable[..., None]:
        """Wrap a direct view callback so failures end up in the status bar."""

        def wrapper(*args: Any) -> None:
            try:
                handler(*args)
            except DISPATCH_ERRORS as exc:
                self._toast_error(map_error(exc))

        return wrapper

    def _toast_error(self, err: UseCaseError) -> None:
        self._log.warning("%s: %s", err.code, err.message)
        self.win.show_toast(err.message, level="error")

    def _navigate(self, route: Route) -> None:
        self._guard(self.view_manager.set_view)(route)

    def _on_show_view(self, route: Route, view: Any) -> None:
        self.win.show_view(view, show_toolbar=route is not Route.LOGIN)

    def _on_log_out(self) -> None:
        self._guard(self.login_controller.log_out)()

    def _on_toggle_debug(self, enabled: bool) -> None:
        self.settings_vm.debug_logging = enabled
        logging_utils.apply_saved_preference(enabled)
        try:
            SaveUserSettings(self._storage)(self.settings_vm.to_dict())
        except UseCaseError as exc:
            self._toast_error(exc)

    def _on_session_changed(self, session: Session) -> None:
        self.win.set_user(session.user_name)
        self.win.set_status_message(
            f"Logged in as {session.user_name}." if session.is_logged_in else "Guest mode: nothing is saved."
        )

    def _on_add_pantry_grocery(self, shelf, name: str, amount: str, unit: str) -> None:
        self.pantry_controller.add_grocery(shelf, name.strip(), _parse_amount(amount), unit.strip() or "g")

    def _on_add_shopping_grocery(self, name: str, quantity: str, unit: str, shelf: str) -> None:
        grocery = Grocery(name.strip(), _parse_amount(quantity), unit.strip() or "g", shelf=shelf.strip() or None)
        self.shopping_controller.add_grocery(grocery)
        self.shopping_view.clear_form()

    def _on_shopping_quantity(self, grocery: Grocery, raw: str) -> None:
        self.shopping_controller.set_quantity(grocery, _parse_amount(raw))

    def _on_save_recipe(self, name: str, ingredients: str, steps: str) -> None:
        self.recipe_form.name = name
        self.recipe_form.ingredients_text = ingredients
        self.recipe_form.steps_text = steps
        recipe = self.recipe_form.build()
        if self.recipe_form.is_edit:
            previous = self.cookbook_controller.recipe_register.get_recipe_by_name(recipe.name)
            recipe.set_favorite(previous.is_favorite)
            self.cookbook_controller.update_recipe(recipe)
        else:
            self.cookbook_controller.add_recipe(recipe)
        self.win.show_toast(f"Saved {recipe.name}.")
        self._on_new_recipe()

    def _on_edit_recipe(self, recipe) -> None:
        self.recipe_form.load(recipe)
        self.cookbook_view.set_form(
            self.recipe_form.name, self.recipe_form.ingredients_text, self.recipe_form.steps_text
        )

    def _on_new_recipe(self) -> None:
        self.recipe_form.clear()
        self.cookbook_view.set_form("", "", "")

    def _on_close(self) -> None:
        self.db.close()
        self.win.destroy()


def _parse_amount(raw: str) -> int:
    text = (raw or "").strip()
    if not text:
        return 0
    try:
        return int(text)
    except ValueError as exc:
        raise ValueError(f"{text!r} is not a whole number.") from exc


def main() -> None:
    app = App()
    app.win.mainloop()


if __name__ == "__main__":
    main()
