import logging

from domain.models.rates import WalletBalance
from infrastructure.providers.ethereum import EthereumRPCClient

logger = logging.getLogger(__name__)


class BalanceService:
	def __init__(self, rpc_client: EthereumRPCClient):
		self.rpc_client = rpc_client

	@staticmethod
	def normalize_address(address: str) -> str:
		"""Accept addresses with or without the 0x prefix."""
		if address[:2].lower() == '0x':
			return '0x' + address[2:]
		return '0x' + address

	async def get_balance(self, address: str) -> WalletBalance:
		address = self.normalize_address(address)
		balance_wei = await self.rpc_client.get_balance_wei(address)
		logger.info(f'Fetched balance for {address}: {balance_wei} wei')
		return WalletBalance(address=address, balance_wei=balance_wei)
