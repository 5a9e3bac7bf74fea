from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	# Application
	APP_NAME: str = 'Crypto Rates API'
	DEBUG: bool = False
	HOST: str = '0.0.0.0'
	PORT: int = 8080
	LOG_LEVEL: str = 'INFO'

	# Price feed
	PRICE_FEED_URL: str = 'https://api.coingecko.com/api/v3'
	PRICE_FEED_TIMEOUT: int = 10
	ASSETS: list[str] = ['bitcoin', 'ethereum', 'litecoin']
	FIATS: list[str] = ['usd', 'eur', 'gbp']
	UPDATE_INTERVAL_SECONDS: int = 300

	# History
	HISTORY_WINDOW_HOURS: int = 24
	HISTORY_MAX_SAMPLES: int = 1000

	# Ethereum node
	ETH_RPC_URL: str = 'https://ethereum-rpc.publicnode.com'
	ETH_RPC_TIMEOUT: int = 10
	ETH_RPC_RETRY_ATTEMPTS: int = 3

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
