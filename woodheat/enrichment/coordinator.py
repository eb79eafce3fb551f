"""Coordinates dataset loading and per-country enrichment on one event loop.

Blocking work (file reads, HTTP calls) runs in worker threads via
``asyncio.to_thread``; every write to shared state happens back on the
loop, so no locks are needed.

Usage:
    coordinator = EnrichmentCoordinator(AppState(), OpenMeteoClient())
    await coordinator.load_dataset("monthly_full_release_long_format.csv")
    await coordinator.wait()
    coordinator.state.comparison()
"""

from __future__ import annotations

import asyncio
import contextlib
from pathlib import Path

from woodheat.data.loader import DatasetSnapshot, load_dataset
from woodheat.enrichment.open_meteo import Forecaster, Geocoder
from woodheat.models.heating_models import Coordinate
from woodheat.state import AppState
from woodheat.utils.logger import Logger

_log = Logger.lazy("enrichment.coordinator")


class RequestToken:
    """Marks the enrichment run for one country selection.

    Cancelled when the selection changes or the coordinator closes; a
    run checks its token before writing results so a late response can
    never land on a different selection.
    """

    def __init__(self, key: str) -> None:
        self.key = key
        self._cancelled = False

    def cancel(self) -> None:
        """Invalidate the run."""
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        """True once cancel() was called."""
        return self._cancelled


class EnrichmentCoordinator:
    """Drive dataset loads, geocoding and temperature lookups for an AppState.

    A country's coordinates are looked up at most once per coordinator
    unless the lookup is cancelled before it completes. The temperature
    is fetched again every time a country with known coordinates is
    selected.

    Parameters
    ----------
    state : AppState
        State that receives the snapshot and temperature.
    geocoder : Geocoder
        Place name to coordinates.
    forecaster : Forecaster
        Coordinates to current temperature.
    """

    def __init__(self, state: AppState, geocoder: Geocoder, forecaster: Forecaster | None = None) -> None:
        self.state = state
        self.coordinates: dict[str, Coordinate] = {}
        self._geocoder = geocoder
        self._forecaster: Forecaster = forecaster if forecaster is not None else geocoder  # type: ignore[assignment]
        self._pending: set[str] = set()
        self._attempted: set[str] = set()
        self._token: RequestToken | None = None
        self._task: asyncio.Task[None] | None = None

    @property
    def pending(self) -> frozenset[str]:
        """Country codes with a geocoding request in flight."""
        return frozenset(self._pending)

    async def load_dataset(self, path: str | Path) -> DatasetSnapshot:
        """Load a dataset file, apply it, and start enrichment for the selection."""
        snapshot = await asyncio.to_thread(load_dataset, path, self.state.defaults)
        self.state.apply_snapshot(snapshot)
        if snapshot.error:
            _log.warning("Dataset unavailable: %s", snapshot.error)
        # Reselect even when empty so earlier work is cancelled
        self.select(self.state.country)
        return snapshot

    def select(self, iso3: str) -> asyncio.Task[None] | None:
        """Select a country and start its enrichment.

        Must be called from a running event loop. Work still in flight for
        the previous selection is cancelled first.

        Returns
        -------
        asyncio.Task[None] | None
            The enrichment task, or None when the selection is empty.
        """
        self._cancel_current()
        self.state.select_country(iso3)
        if not self.state.country:
            self.state.set_temperature(None)
            return None

        token = RequestToken(self.state.country)
        self._token = token
        self._task = asyncio.get_running_loop().create_task(
            self._enrich(token), name=f"enrich-{token.key}"
        )
        return self._task

    async def wait(self) -> None:
        """Wait for the current enrichment run, if any, to finish."""
        task = self._task
        if task is not None:
            with contextlib.suppress(asyncio.CancelledError):
                await task

    async def aclose(self) -> None:
        """Cancel all in-flight work."""
        task = self._task
        self._cancel_current()
        if task is not None:
            with contextlib.suppress(asyncio.CancelledError):
                await task

    def _cancel_current(self) -> None:
        if self._token is not None:
            self._token.cancel()
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._token = None
        self._task = None

    async def _enrich(self, token: RequestToken) -> None:
        coordinate = self.coordinates.get(token.key)
        if coordinate is None:
            coordinate = await self._resolve_coordinate(token)
        if token.cancelled:
            return
        if coordinate is None:
            self.state.set_temperature(None)
            return

        temperature = await asyncio.to_thread(self._forecaster.current_temperature, coordinate)
        if token.cancelled:
            _log.debug("Discarding temperature for %s", token.key)
            return
        self.state.set_temperature(temperature)

    async def _resolve_coordinate(self, token: RequestToken) -> Coordinate | None:
        iso3 = token.key
        if iso3 in self._pending or iso3 in self._attempted:
            return None
        name = self.state.snapshot.history.names.get(iso3)
        if not name:
            return None

        self._pending.add(iso3)
        try:
            coordinate = await asyncio.to_thread(self._geocoder.geocode, name)
        finally:
            self._pending.discard(iso3)

        self._attempted.add(iso3)
        if coordinate is None:
            _log.info("No coordinates for %s (%s)", iso3, name)
            return None
        self.coordinates[iso3] = coordinate
        return coordinate
