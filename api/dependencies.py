import logging
from typing import Annotated

from fastapi import Depends

from application.services import BalanceService, RateService
from application.workers.rate_updater import RateUpdater
from config.settings import get_settings
from infrastructure.providers import CoinGeckoProvider, EthereumRPCClient
from infrastructure.store.rate_store import RateStore

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	store: RateStore | None = None
	price_provider: CoinGeckoProvider | None = None
	rpc_client: EthereumRPCClient | None = None
	rate_updater: RateUpdater | None = None


deps = AppDependencies()


def init_dependencies() -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	settings = get_settings()

	deps.store = RateStore(
		retention_seconds=settings.HISTORY_WINDOW_HOURS * 60 * 60,
		max_samples=settings.HISTORY_MAX_SAMPLES,
	)
	deps.price_provider = CoinGeckoProvider(
		base_url=settings.PRICE_FEED_URL, timeout=settings.PRICE_FEED_TIMEOUT
	)
	deps.rpc_client = EthereumRPCClient(
		rpc_url=settings.ETH_RPC_URL,
		timeout=settings.ETH_RPC_TIMEOUT,
		retry_attempts=settings.ETH_RPC_RETRY_ATTEMPTS,
	)
	deps.rate_updater = RateUpdater(
		provider=deps.price_provider,
		store=deps.store,
		assets=settings.ASSETS,
		fiats=settings.FIATS,
		update_interval=settings.UPDATE_INTERVAL_SECONDS,
	)
	logger.info('Dependencies initialized')


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.rate_updater:
		await deps.rate_updater.stop()
	if deps.price_provider:
		await deps.price_provider.close()
	if deps.rpc_client:
		await deps.rpc_client.close()

	logger.info('Cleanup complete')


def get_rate_store() -> RateStore:
	if deps.store is None:
		raise RuntimeError('Rate store not initialized')
	return deps.store


def get_rpc_client() -> EthereumRPCClient:
	if deps.rpc_client is None:
		raise RuntimeError('Ethereum RPC client not initialized')
	return deps.rpc_client


def get_rate_updater() -> RateUpdater:
	if deps.rate_updater is None:
		raise RuntimeError('Rate updater not initialized')
	return deps.rate_updater


def get_rate_service(store: Annotated[RateStore, Depends(get_rate_store)]) -> RateService:
	return RateService(store=store, history_window_hours=get_settings().HISTORY_WINDOW_HOURS)


def get_balance_service(
	rpc_client: Annotated[EthereumRPCClient, Depends(get_rpc_client)],
) -> BalanceService:
	return BalanceService(rpc_client=rpc_client)
