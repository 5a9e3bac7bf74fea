from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from api.dependencies import get_balance_service
from api.schemas import BalanceResponse
from application.services import BalanceService

router = APIRouter(prefix='/balance', tags=['balance'])


@router.get(
	'/{address}',
	response_model=BalanceResponse,
	status_code=status.HTTP_200_OK,
	summary='Get the ether balance of an address',
)
async def get_balance(
	address: Annotated[str, Path(pattern=r'^(0x)?[0-9a-fA-F]{40}$')],
	service: Annotated[BalanceService, Depends(get_balance_service)],
) -> BalanceResponse:
	result = await service.get_balance(address)
	return BalanceResponse(
		address=result.address,
		balance=result.balance,
		balance_wei=str(result.balance_wei),
	)
