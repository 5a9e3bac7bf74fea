from typing import Annotated

from fastapi import APIRouter, Depends

from api.dependencies import get_rate_store, get_rate_updater
from api.schemas import HealthResponse
from application.workers.rate_updater import RateUpdater
from infrastructure.store.rate_store import RateStore

router = APIRouter(tags=['health'])


@router.get('/health', response_model=HealthResponse, summary='Rate updater status')
async def health_check(
	updater: Annotated[RateUpdater, Depends(get_rate_updater)],
	store: Annotated[RateStore, Depends(get_rate_store)],
) -> HealthResponse:
	if updater.last_cycle_ok is False:
		state = 'degraded'
	elif store.last_updated is None:
		state = 'starting'
	else:
		state = 'ok'

	return HealthResponse(
		status=state,
		last_updated=store.last_updated,
		cycles=updater.cycles,
		successful_cycles=updater.successful_cycles,
		failed_cycles=updater.failed_cycles,
		last_error=updater.last_error,
	)
