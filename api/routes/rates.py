from typing import Annotated

from fastapi import APIRouter, Depends, status

from api.dependencies import get_rate_service
from api.schemas import (
	AllRatesResponse,
	AssetRatesResponse,
	HistoryPoint,
	RateHistoryResponse,
	RateResponse,
)
from application.services import RateService

router = APIRouter(prefix='/rates', tags=['rates'])


@router.get(
	'',
	response_model=AllRatesResponse,
	status_code=status.HTTP_200_OK,
	summary='Get all latest rates',
)
async def get_all_rates(
	service: Annotated[RateService, Depends(get_rate_service)],
) -> AllRatesResponse:
	return AllRatesResponse(rates=service.get_all_rates())


@router.get(
	'/history/{asset}/{fiat}',
	response_model=RateHistoryResponse,
	status_code=status.HTTP_200_OK,
	summary='Get the last 24 hours of rates for a pair',
)
async def get_rate_history(
	asset: str,
	fiat: str,
	service: Annotated[RateService, Depends(get_rate_service)],
) -> RateHistoryResponse:
	result = service.get_history(asset, fiat)
	return RateHistoryResponse(
		asset=result.asset,
		fiat=result.fiat,
		rate=result.rate,
		history=[HistoryPoint(timestamp=s.timestamp, rate=s.rate) for s in result.samples],
	)


@router.get(
	'/{asset}',
	response_model=AssetRatesResponse,
	status_code=status.HTTP_200_OK,
	summary='Get latest rates for an asset',
)
async def get_asset_rates(
	asset: str,
	service: Annotated[RateService, Depends(get_rate_service)],
) -> AssetRatesResponse:
	return AssetRatesResponse(asset=asset, rates=service.get_asset_rates(asset))


@router.get(
	'/{asset}/{fiat}',
	response_model=RateResponse,
	status_code=status.HTTP_200_OK,
	summary='Get latest rate for an asset/fiat pair',
)
async def get_rate(
	asset: str,
	fiat: str,
	service: Annotated[RateService, Depends(get_rate_service)],
) -> RateResponse:
	result = service.get_rate(asset, fiat)
	return RateResponse(asset=result.asset, fiat=result.fiat, rate=result.rate)
