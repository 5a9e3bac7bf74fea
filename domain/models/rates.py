from dataclasses import dataclass
from decimal import Decimal

WEI_PER_ETHER = Decimal(10) ** 18

# asset -> fiat -> rate
RateSnapshot = dict[str, dict[str, float]]


@dataclass(frozen=True)
class RateSample:
	timestamp: int  # unix seconds
	rate: float


@dataclass(frozen=True)
class RateQuote:
	asset: str
	fiat: str
	rate: float


@dataclass(frozen=True)
class RateHistory:
	asset: str
	fiat: str
	rate: float
	samples: list[RateSample]


@dataclass(frozen=True)
class WalletBalance:
	address: str
	balance_wei: int

	@property
	def balance(self) -> float:
		"""Balance in ether, converted from wei exactly once."""
		return float(Decimal(self.balance_wei) / WEI_PER_ETHER)
