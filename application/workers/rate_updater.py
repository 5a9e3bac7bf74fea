import asyncio
import logging
import time
from datetime import datetime

from domain.exceptions.rates import ProviderError
from infrastructure.providers.base import ExchangeRateProvider
from infrastructure.store.rate_store import RateStore

logger = logging.getLogger(__name__)


class RateUpdater:
	"""
	Background worker that periodically refreshes the rate snapshot and history.

	A failed fetch skips the cycle entirely: the previous snapshot stays visible
	and no history sample is recorded until the next scheduled wake-up.
	"""

	def __init__(
		self,
		provider: ExchangeRateProvider,
		store: RateStore,
		assets: list[str],
		fiats: list[str],
		update_interval: int = 300,
	):
		self.provider = provider
		self.store = store
		self.assets = assets
		self.fiats = fiats
		self.update_interval = update_interval

		self.cycles = 0
		self.successful_cycles = 0
		self.failed_cycles = 0
		self.last_error: str | None = None
		self.last_cycle_ok: bool | None = None
		self._task: asyncio.Task | None = None

	async def run_cycle(self) -> bool:
		"""Perform one fetch/replace/append cycle. Returns whether it succeeded."""
		self.cycles += 1
		cycle_start = datetime.now()

		try:
			snapshot = await self.provider.fetch_rates(self.assets, self.fiats)
		except ProviderError as e:
			self.failed_cycles += 1
			self.last_error = str(e)
			self.last_cycle_ok = False
			logger.error(f'Failed to fetch exchange rates from {self.provider.name}: {e}')
			return False

		timestamp = int(time.time())
		await self.store.replace_snapshot(snapshot, timestamp)
		appended = await self.store.append_history(snapshot, timestamp)

		self.successful_cycles += 1
		self.last_error = None
		self.last_cycle_ok = True

		cycle_duration = (datetime.now() - cycle_start).total_seconds()
		logger.info(
			f'Exchange rates updated in {cycle_duration:.2f}s: '
			f'{len(snapshot)} assets, {appended} pairs recorded'
		)
		return True

	async def run(self) -> None:
		"""Main worker loop. Runs until cancelled."""
		logger.info(
			f'Rate updater started: assets={self.assets} fiats={self.fiats} '
			f'interval={self.update_interval}s'
		)

		while True:
			try:
				await self.run_cycle()
			except asyncio.CancelledError:
				raise
			except Exception as e:
				self.failed_cycles += 1
				self.last_error = str(e)
				self.last_cycle_ok = False
				logger.error(f'Error in rate updater cycle: {e}', exc_info=True)

			await asyncio.sleep(self.update_interval)

	def start(self) -> asyncio.Task:
		if self._task is None or self._task.done():
			self._task = asyncio.create_task(self.run(), name='rate-updater')
		return self._task

	async def stop(self) -> None:
		if self._task is None:
			return

		logger.info('Stopping rate updater...')
		self._task.cancel()
		try:
			await self._task
		except asyncio.CancelledError:
			pass
		self._task = None
		logger.info('Rate updater stopped')
