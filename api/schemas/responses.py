from pydantic import BaseModel, ConfigDict, Field


class RateResponse(BaseModel):
	asset: str = Field(..., description='Cryptocurrency identifier')
	fiat: str = Field(..., description='Fiat currency code')
	rate: float = Field(..., description='Latest known rate')

	model_config = ConfigDict(
		json_schema_extra={'example': {'asset': 'bitcoin', 'fiat': 'usd', 'rate': 67012.5}}
	)


class AssetRatesResponse(BaseModel):
	asset: str = Field(..., description='Cryptocurrency identifier')
	rates: dict[str, float] = Field(..., description='Fiat code to rate')


class AllRatesResponse(BaseModel):
	rates: dict[str, dict[str, float]] = Field(..., description='Asset to fiat code to rate')

	model_config = ConfigDict(
		json_schema_extra={
			'example': {
				'rates': {
					'bitcoin': {'usd': 67012.5, 'eur': 61870.0, 'gbp': 52731.2},
					'ethereum': {'usd': 3120.4, 'eur': 2881.0, 'gbp': 2455.9},
				}
			}
		}
	)


class HistoryPoint(BaseModel):
	timestamp: int = Field(..., description='Unix timestamp of the sample')
	rate: float = Field(..., description='Rate at that time')


class RateHistoryResponse(BaseModel):
	asset: str = Field(..., description='Cryptocurrency identifier')
	fiat: str = Field(..., description='Fiat currency code')
	rate: float = Field(..., description='Latest known rate')
	history: list[HistoryPoint] = Field(..., description='Samples from the last 24 hours, oldest first')


class BalanceResponse(BaseModel):
	address: str = Field(..., description='Ethereum account address')
	balance: float = Field(..., description='Balance in ether')
	balance_wei: str = Field(..., description='Exact balance in wei')

	model_config = ConfigDict(
		json_schema_extra={
			'example': {
				'address': '0x00000000219ab540356cbb839cbe05303d7705fa',
				'balance': 1.5,
				'balance_wei': '1500000000000000000',
			}
		}
	)


class HealthResponse(BaseModel):
	status: str = Field(..., description='starting, ok or degraded')
	last_updated: int | None = Field(None, description='Unix timestamp of the last successful refresh')
	cycles: int = Field(..., description='Refresh cycles attempted')
	successful_cycles: int
	failed_cycles: int
	last_error: str | None = None
