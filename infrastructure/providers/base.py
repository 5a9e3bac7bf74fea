from typing import Protocol

from domain.models.rates import RateSnapshot


class ExchangeRateProvider(Protocol):
	@property
	def name(self) -> str: ...

	async def fetch_rates(self, assets: list[str], fiats: list[str]) -> RateSnapshot: ...

	async def close(self) -> None: ...
