"""Durable set of favorite property ids."""

import asyncio
import json
from enum import Enum
from typing import Callable, Iterator, Optional

from domain.repositories import IKeyValueStorage
from infrastructure.config import get_logger

Listener = Callable[[], None]


class FavoritesState(str, Enum):
    """Lifecycle of a FavoritesStore."""
    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    READY = "ready"


class _Op(str, Enum):
    ADD = "add"
    REMOVE = "remove"


class FavoritesStore:
    """
    Owns the user's favorite property ids and keeps them durable.

    Mutations update the in-memory set synchronously, so readers see them
    immediately. Persistence happens in a single background writer task that
    writes a snapshot of the whole set; writes never overlap and each one
    reflects every mutation applied before it started. A failed write is
    retried, and the in-memory state stays authoritative when it keeps
    failing.

    Mutations issued before ``initialize()`` finishes are replayed on top of
    the loaded set, and nothing is written until loading has completed.
    """

    def __init__(
        self,
        storage: IKeyValueStorage,
        storage_key: str = "favorites",
        max_write_attempts: int = 3,
        retry_delay: float = 0.2,
    ):
        """
        Initialize the store.

        Args:
            storage: Durable key-value storage
            storage_key: Key the serialized set is stored under
            max_write_attempts: Attempts per write before giving up
            retry_delay: Base delay in seconds between attempts
        """
        if max_write_attempts < 1:
            raise ValueError("max_write_attempts must be at least 1")
        self.storage = storage
        self.storage_key = storage_key
        self.max_write_attempts = max_write_attempts
        self.retry_delay = retry_delay
        self.logger = get_logger(self.__class__.__name__)

        # dict keeps insertion order and gives O(1) membership
        self._ids: dict[str, None] = {}
        self._state = FavoritesState.UNINITIALIZED
        self._init_lock = asyncio.Lock()
        self._pending_ops: list[tuple[_Op, str]] = []
        self._listeners: list[Listener] = []
        self._version = 0
        self._write_generation = 0
        self._written_generation = 0
        self._writer: Optional[asyncio.Task] = None

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def state(self) -> FavoritesState:
        return self._state

    @property
    def is_ready(self) -> bool:
        return self._state is FavoritesState.READY

    @property
    def version(self) -> int:
        """Increments on every mutation that changed the set."""
        return self._version

    @property
    def favorites(self) -> tuple[str, ...]:
        """Snapshot of the favorite ids in the order they were added."""
        return tuple(self._ids)

    @property
    def is_persisted(self) -> bool:
        """True when durable storage holds the current in-memory set."""
        return self._written_generation >= self._write_generation

    def is_favorite(self, property_id: str) -> bool:
        return property_id in self._ids

    def __contains__(self, property_id: object) -> bool:
        return property_id in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._ids))

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add(self, property_id: str) -> bool:
        """Add an id. Adding an existing id is a no-op. Returns whether the set changed."""
        return self._apply(_Op.ADD, property_id)

    def remove(self, property_id: str) -> bool:
        """Remove an id. Removing a missing id is a no-op. Returns whether the set changed."""
        return self._apply(_Op.REMOVE, property_id)

    def toggle(self, property_id: str) -> bool:
        """
        Remove the id if present, add it otherwise.

        Before loading completes the toggle is resolved against the set the
        caller sees now and queued as that add or remove, so the answer
        returned here still holds once the persisted set is merged in.

        Returns:
            Whether the id is a favorite after the call
        """
        op = _Op.REMOVE if self.is_favorite(property_id) else _Op.ADD
        self._apply(op, property_id)
        return self.is_favorite(property_id)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Call ``listener`` after every mutation that changed the set.

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def initialize(self) -> None:
        """Load the persisted set once. Safe to call repeatedly and concurrently."""
        if self.is_ready:
            return
        async with self._init_lock:
            if self.is_ready:
                return
            self._state = FavoritesState.LOADING
            loaded = await self._load()

            replayed = dict.fromkeys(loaded)
            for op, property_id in self._pending_ops:
                self._mutate(replayed, op, property_id)
            self._pending_ops.clear()

            previous_view = list(self._ids)
            self._ids = replayed
            self._state = FavoritesState.READY
            self.logger.info(f"Favorites ready with {len(replayed)} ids")

            if list(replayed) != previous_view:
                self._changed()
            if list(replayed) != loaded:
                self._mark_dirty()

    async def flush(self) -> bool:
        """
        Wait until durable storage matches the in-memory set.

        Returns:
            True if storage is up to date, False if the write kept failing
        """
        await self.initialize()
        if self._writer is not None and not self._writer.done():
            return await self._writer
        if self.is_persisted:
            return True
        return await self._start_writer()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _apply(self, op: _Op, property_id: str) -> bool:
        if not isinstance(property_id, str) or not property_id:
            self.logger.warning(f"Ignoring {op.value} with invalid id {property_id!r}")
            return False
        if not self.is_ready:
            self._pending_ops.append((op, property_id))
        changed = self._mutate(self._ids, op, property_id)
        if changed:
            self._changed()
            if self.is_ready:
                self._mark_dirty()
        return changed

    @staticmethod
    def _mutate(ids: dict[str, None], op: _Op, property_id: str) -> bool:
        present = property_id in ids
        if op is _Op.ADD:
            if present:
                return False
            ids[property_id] = None
            return True
        if not present:
            return False
        del ids[property_id]
        return True

    def _changed(self) -> None:
        self._version += 1
        for listener in list(self._listeners):
            try:
                listener()
            except Exception as e:
                self.logger.error(f"Favorites listener failed: {e}", exc_info=True)

    def _mark_dirty(self) -> None:
        self._write_generation += 1
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            self.logger.debug("No running event loop, write deferred until flush()")
            return
        self._start_writer()

    def _start_writer(self) -> asyncio.Task:
        if self._writer is None or self._writer.done():
            self._writer = asyncio.get_running_loop().create_task(self._drain())
        return self._writer

    async def _drain(self) -> bool:
        while not self.is_persisted:
            target = self._write_generation
            payload = json.dumps(list(self._ids))
            if not await self._write_with_retry(payload):
                return False
            self._written_generation = target
        return True

    async def _write_with_retry(self, payload: str) -> bool:
        for attempt in range(1, self.max_write_attempts + 1):
            try:
                await self.storage.set(self.storage_key, payload)
                return True
            except Exception as e:
                self.logger.warning(
                    f"Favorites write failed (attempt {attempt}/{self.max_write_attempts}): {e}",
                    extra={"storage_key": self.storage_key},
                )
                if attempt < self.max_write_attempts:
                    await asyncio.sleep(self.retry_delay * attempt)
        self.logger.error(
            "Giving up on favorites write; keeping in-memory state",
            extra={"storage_key": self.storage_key, "count": len(self._ids)},
        )
        return False

    async def _load(self) -> list[str]:
        try:
            raw = await self.storage.get(self.storage_key)
        except Exception as e:
            self.logger.warning(f"Could not read favorites, starting empty: {e}")
            return []

        if raw is None:
            self.logger.info("No stored favorites, starting empty")
            return []

        try:
            data = json.loads(raw)
        except (TypeError, ValueError) as e:
            self.logger.warning(f"Stored favorites are not valid JSON, starting empty: {e}")
            return []

        if not isinstance(data, list) or not all(isinstance(item, str) for item in data):
            self.logger.warning("Stored favorites are not a list of ids, starting empty")
            return []

        return list(dict.fromkeys(data))
