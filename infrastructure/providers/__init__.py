from .base import ExchangeRateProvider
from .coingecko import CoinGeckoProvider
from .ethereum import EthereumRPCClient

__all__ = ['ExchangeRateProvider', 'CoinGeckoProvider', 'EthereumRPCClient']
