import time

from domain.models.rates import RateHistory, RateQuote, RateSnapshot
from infrastructure.store.rate_store import RateStore


class RateService:
	def __init__(self, store: RateStore, history_window_hours: int = 24):
		self.store = store
		self.history_window_seconds = history_window_hours * 60 * 60

	def get_rate(self, asset: str, fiat: str) -> RateQuote:
		return RateQuote(asset=asset, fiat=fiat, rate=self.store.rate(asset, fiat))

	def get_asset_rates(self, asset: str) -> dict[str, float]:
		return self.store.asset_rates(asset)

	def get_all_rates(self) -> RateSnapshot:
		return self.store.snapshot()

	def get_history(self, asset: str, fiat: str, now: int | None = None) -> RateHistory:
		current_rate = self.store.rate(asset, fiat)

		now = int(time.time()) if now is None else now
		samples = self.store.history(asset, fiat, since=now - self.history_window_seconds)

		return RateHistory(asset=asset, fiat=fiat, rate=current_rate, samples=samples)
