import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from domain.exceptions.rates import BalanceRetrievalError, NodeConnectionError, NotFoundError

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
	@app.exception_handler(NotFoundError)
	async def not_found_handler(request: Request, exc: NotFoundError):
		return JSONResponse(status_code=404, content={'detail': str(exc)})

	@app.exception_handler(NodeConnectionError)
	async def node_connection_handler(request: Request, exc: NodeConnectionError):
		logger.error(f'Ethereum node connection error: {exc}')
		return JSONResponse(status_code=500, content={'detail': 'failed to connect'})

	@app.exception_handler(BalanceRetrievalError)
	async def balance_retrieval_handler(request: Request, exc: BalanceRetrievalError):
		logger.error(f'Balance retrieval error: {exc}')
		return JSONResponse(status_code=500, content={'detail': 'failed to retrieve balance'})
