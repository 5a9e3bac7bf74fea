from .responses import (
	AllRatesResponse,
	AssetRatesResponse,
	BalanceResponse,
	HealthResponse,
	HistoryPoint,
	RateHistoryResponse,
	RateResponse,
)

__all__ = [
	'AllRatesResponse',
	'AssetRatesResponse',
	'BalanceResponse',
	'HealthResponse',
	'HistoryPoint',
	'RateHistoryResponse',
	'RateResponse',
]
