"""Derived views over the catalog, the active criteria and the favorites."""

from collections import Counter
from typing import Any, Callable, Iterable, Optional

from domain.entities import Property
from domain.services import count_active_filters, filter_properties, select_by_ids
from domain.value_objects import FilterCriteria
from infrastructure.config import get_logger
from .favorites_store import FavoritesStore

# Each view is recomputed only when one of the inputs it declares changes.
VIEW_DEPENDENCIES: dict[str, tuple[str, ...]] = {
    "filtered": ("catalog", "criteria"),
    "result_count": ("catalog", "criteria"),
    "favorite_properties": ("catalog", "favorites"),
    "favorite_count": ("favorites",),
    "active_filter_count": ("criteria",),
}

ChangeListener = Callable[[frozenset[str]], None]


class DerivedViewComposer:
    """
    Combines the filter engine and the favorites store into named views.

    Views are memoised against the versions of the inputs they declare in
    ``VIEW_DEPENDENCIES``, so a read always reflects the latest catalog,
    criteria and favorites, and an unrelated change never forces a
    recomputation.
    """

    def __init__(
        self,
        favorites: FavoritesStore,
        catalog: Optional[Iterable[Property]] = None,
        criteria: Optional[FilterCriteria] = None,
    ):
        self.favorites = favorites
        self.logger = get_logger(self.__class__.__name__)
        self._catalog: tuple[Property, ...] = tuple(catalog or ())
        self._criteria = criteria or FilterCriteria()
        self._versions = {"catalog": 0, "criteria": 0}
        self._memo: dict[str, tuple[tuple[int, ...], Any]] = {}
        self._recomputations: Counter = Counter()
        self._listeners: list[ChangeListener] = []
        self._unsubscribe = favorites.subscribe(self._on_favorites_changed)

    # Inputs

    @property
    def catalog(self) -> tuple[Property, ...]:
        return self._catalog

    @property
    def criteria(self) -> FilterCriteria:
        return self._criteria

    def set_catalog(self, catalog: Optional[Iterable[Property]]) -> None:
        """Replace the catalog. Any replacement counts as a change."""
        self._catalog = tuple(catalog or ())
        self._versions["catalog"] += 1
        self._emit("catalog")

    def set_criteria(self, criteria: FilterCriteria) -> None:
        """Replace the criteria; equal criteria leave the views untouched."""
        if criteria == self._criteria:
            return
        self._criteria = criteria
        self._versions["criteria"] += 1
        self._emit("criteria")

    # Views

    @property
    def filtered(self) -> tuple[Property, ...]:
        return self._derive(
            "filtered",
            lambda: tuple(filter_properties(self._catalog, self._criteria)),
        )

    @property
    def result_count(self) -> int:
        return self._derive("result_count", lambda: len(self.filtered))

    @property
    def favorite_properties(self) -> tuple[Property, ...]:
        """Favorited properties present in the catalog, in catalog order."""
        return self._derive(
            "favorite_properties",
            lambda: tuple(select_by_ids(self._catalog, self.favorites)),
        )

    @property
    def favorite_count(self) -> int:
        """Size of the favorite set, including ids missing from the catalog."""
        return self._derive("favorite_count", lambda: len(self.favorites))

    @property
    def active_filter_count(self) -> int:
        return self._derive(
            "active_filter_count",
            lambda: count_active_filters(self._criteria),
        )

    # Change notification

    def on_change(self, listener: ChangeListener) -> Callable[[], None]:
        """
        Call ``listener`` with the names of the views an input change affects.

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)

        def remove() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return remove

    def recompute_count(self, view: str) -> int:
        """How many times a view has been computed."""
        return self._recomputations[view]

    def close(self) -> None:
        """Stop following the favorites store."""
        self._unsubscribe()
        self._listeners.clear()

    # Internals

    def _input_version(self, name: str) -> int:
        if name == "favorites":
            return self.favorites.version
        return self._versions[name]

    def _derive(self, view: str, compute: Callable[[], Any]) -> Any:
        deps = tuple(self._input_version(name) for name in VIEW_DEPENDENCIES[view])
        cached = self._memo.get(view)
        if cached is not None and cached[0] == deps:
            return cached[1]
        value = compute()
        self._memo[view] = (deps, value)
        self._recomputations[view] += 1
        return value

    def _on_favorites_changed(self) -> None:
        self._emit("favorites")

    def _emit(self, changed_input: str) -> None:
        affected = frozenset(
            view for view, deps in VIEW_DEPENDENCIES.items() if changed_input in deps
        )
        for listener in list(self._listeners):
            try:
                listener(affected)
            except Exception as e:
                self.logger.error(f"View listener failed: {e}", exc_info=True)
