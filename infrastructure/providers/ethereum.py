import logging

import httpx
from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from domain.exceptions.rates import BalanceRetrievalError, NodeConnectionError

logger = logging.getLogger(__name__)

_CONNECT_ERRORS = (httpx.ConnectError, httpx.ConnectTimeout)


class EthereumRPCClient:
	"""JSON-RPC client for an Ethereum node, sharing one connection pool across requests."""

	def __init__(
		self,
		rpc_url: str,
		client: httpx.AsyncClient | None = None,
		timeout: int = 10,
		retry_attempts: int = 3,
	):
		self.rpc_url = rpc_url
		self.retry_attempts = retry_attempts
		self._request_id = 0
		self._client = client or httpx.AsyncClient(
			timeout=timeout,
			limits=httpx.Limits(max_keepalive_connections=5, max_connections=10),
		)

	@property
	def name(self) -> str:
		return 'ethereum-rpc'

	async def _post(self, payload: dict) -> httpx.Response:
		try:
			async for attempt in AsyncRetrying(
				stop=stop_after_attempt(self.retry_attempts),
				wait=wait_exponential(multiplier=0.5, min=0.5, max=5),
				retry=retry_if_exception_type(_CONNECT_ERRORS),
				reraise=True,
			):
				with attempt:
					return await self._client.post(self.rpc_url, json=payload)
		except _CONNECT_ERRORS as e:
			logger.error(f'Ethereum node unreachable after {self.retry_attempts} attempts: {e}')
			raise NodeConnectionError('failed to connect') from e
		except httpx.RequestError as e:
			raise BalanceRetrievalError(f'RPC request failed: {e.__class__.__name__}') from e

	async def call(self, method: str, params: list) -> object:
		self._request_id += 1
		payload = {'jsonrpc': '2.0', 'id': self._request_id, 'method': method, 'params': params}

		response = await self._post(payload)
		try:
			response.raise_for_status()
			data = response.json()
		except httpx.HTTPStatusError as e:
			raise BalanceRetrievalError(
				f'{method} HTTP error {e.response.status_code}: {e.response.text[:200]}'
			) from e
		except ValueError as e:
			raise BalanceRetrievalError(f'{method} response parsing error: {str(e)}') from e

		if not isinstance(data, dict):
			raise BalanceRetrievalError(f'{method} returned a malformed response')
		if data.get('error'):
			error = data['error']
			message = error.get('message', 'Unknown error') if isinstance(error, dict) else str(error)
			raise BalanceRetrievalError(f'{method} RPC error: {message}')
		if 'result' not in data:
			raise BalanceRetrievalError(f'{method} response has no result')

		return data['result']

	async def get_balance_wei(self, address: str) -> int:
		"""Balance of ``address`` at the latest block, in wei."""
		result = await self.call('eth_getBalance', [address, 'latest'])
		try:
			return int(result, 16)
		except (TypeError, ValueError) as e:
			raise BalanceRetrievalError(f'Invalid balance quantity: {result!r}') from e

	async def close(self) -> None:
		await self._client.aclose()
