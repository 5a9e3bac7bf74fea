from .balance_service import BalanceService
from .rate_service import RateService

__all__ = ['BalanceService', 'RateService']
