import logging

import httpx
from pydantic import PositiveFloat, TypeAdapter, ValidationError

from domain.exceptions.rates import ProviderError
from domain.models.rates import RateSnapshot

logger = logging.getLogger(__name__)

_PRICE_PAYLOAD = TypeAdapter(dict[str, dict[str, PositiveFloat]])


class CoinGeckoProvider:
	BASE_URL = 'https://api.coingecko.com/api/v3'

	def __init__(
		self,
		base_url: str | None = None,
		client: httpx.AsyncClient | None = None,
		timeout: int = 10,
	):
		self.base_url = (base_url or self.BASE_URL).rstrip('/')
		self._client = client or httpx.AsyncClient(
			timeout=timeout,
			headers={'accept': 'application/json'},
		)

	@property
	def name(self) -> str:
		return 'coingecko'

	async def _request(self, endpoint: str, params: dict) -> dict:
		url = f'{self.base_url}/{endpoint}'

		try:
			response = await self._client.get(url, params=params)
			response.raise_for_status()
			return response.json()

		except httpx.HTTPStatusError as e:
			raise ProviderError(
				f'CoinGecko HTTP error {e.response.status_code}: {e.response.text[:200]}'
			) from e
		except httpx.RequestError as e:
			raise ProviderError(f'CoinGecko request failed: {e.__class__.__name__}') from e
		except Exception as e:
			raise ProviderError(f'CoinGecko response parsing error: {str(e)}') from e

	async def fetch_rates(self, assets: list[str], fiats: list[str]) -> RateSnapshot:
		data = await self._request(
			'simple/price',
			{'ids': ','.join(assets), 'vs_currencies': ','.join(fiats)},
		)
		if not isinstance(data, dict):
			raise ProviderError(f'Unexpected CoinGecko payload type: {type(data).__name__}')

		requested = {asset: data[asset] for asset in assets if asset in data}
		try:
			parsed = _PRICE_PAYLOAD.validate_python(requested)
		except ValidationError as e:
			raise ProviderError(
				f'Unexpected CoinGecko payload: {e.error_count()} validation errors'
			) from e

		missing = [asset for asset in assets if asset not in parsed]
		if missing:
			logger.warning(f'CoinGecko response is missing assets: {missing}')

		return parsed

	async def close(self) -> None:
		await self._client.aclose()
