import asyncio
import copy
import logging
from collections import deque

from domain.exceptions.rates import (
	AssetNotFoundError,
	FiatNotFoundError,
	HistoryNotFoundError,
)
from domain.models.rates import RateSample, RateSnapshot

logger = logging.getLogger(__name__)


class RateStore:
	"""In-memory holder of the latest rate snapshot and per-pair rate history.

	Writers serialize on a lock and publish by swapping references, so readers
	never block and never observe a half-built snapshot. The snapshot and the
	history are published in separate steps: a reader may briefly see a new
	snapshot next to the previous history.
	"""

	def __init__(self, retention_seconds: int = 24 * 60 * 60, max_samples: int = 1000):
		self.retention_seconds = retention_seconds
		self.max_samples = max_samples
		self._snapshot: RateSnapshot = {}
		self._history: dict[tuple[str, str], deque[RateSample]] = {}
		self._last_updated: int | None = None
		self._lock = asyncio.Lock()

	@property
	def last_updated(self) -> int | None:
		return self._last_updated

	async def replace_snapshot(self, snapshot: RateSnapshot, timestamp: int) -> None:
		fresh = {asset: dict(rates) for asset, rates in snapshot.items()}
		async with self._lock:
			self._snapshot = fresh
			self._last_updated = timestamp

	async def append_history(self, snapshot: RateSnapshot, timestamp: int) -> int:
		"""Record one sample per (asset, fiat) pair of ``snapshot``. Returns the sample count."""
		cutoff = timestamp - self.retention_seconds
		appended = 0
		async with self._lock:
			history = dict(self._history)
			for asset, rates in snapshot.items():
				for fiat, rate in rates.items():
					key = (asset, fiat)
					series = deque(history.get(key, ()), maxlen=self.max_samples)
					series.append(RateSample(timestamp=timestamp, rate=rate))
					while series and series[0].timestamp <= cutoff:
						series.popleft()
					history[key] = series
					appended += 1
			self._history = history
		logger.debug(f'Appended {appended} history samples at {timestamp}')
		return appended

	def snapshot(self) -> RateSnapshot:
		return copy.deepcopy(self._snapshot)

	def asset_rates(self, asset: str) -> dict[str, float]:
		rates = self._snapshot.get(asset)
		if rates is None:
			raise AssetNotFoundError(asset)
		return dict(rates)

	def rate(self, asset: str, fiat: str) -> float:
		rates = self._snapshot.get(asset)
		if rates is None:
			raise AssetNotFoundError(asset)
		if fiat not in rates:
			raise FiatNotFoundError(asset, fiat)
		return rates[fiat]

	def history(self, asset: str, fiat: str, since: int) -> list[RateSample]:
		"""Samples for the pair newer than ``since`` (exclusive), oldest first."""
		series = self._history.get((asset, fiat))
		if series is None:
			raise HistoryNotFoundError(asset, fiat)
		return [sample for sample in series if sample.timestamp > since]
