class RatesException(Exception):
	pass


class NotFoundError(RatesException):
	pass


class AssetNotFoundError(NotFoundError):
	def __init__(self, asset: str):
		self.asset = asset
		super().__init__('asset not found')


class FiatNotFoundError(NotFoundError):
	def __init__(self, asset: str, fiat: str):
		self.asset = asset
		self.fiat = fiat
		super().__init__('fiat not found')


class HistoryNotFoundError(NotFoundError):
	def __init__(self, asset: str, fiat: str):
		self.asset = asset
		self.fiat = fiat
		super().__init__('history not found')


class ProviderError(RatesException):
	pass


class NodeConnectionError(RatesException):
	pass


class BalanceRetrievalError(RatesException):
	pass
