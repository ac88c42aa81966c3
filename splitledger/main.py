from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from splitledger.api.v1.routes.balances import router as balances_router
from splitledger.api.v1.routes.expense import router as expense_router
from splitledger.api.v1.routes.settlement import router as settlement_router
from splitledger.api.v1.routes.system import router as system_router
from splitledger.core.config import settings
from splitledger.core.exceptions import LedgerImbalanceError, UnknownCurrencyError
from splitledger.core.logging_config import setup_logging

logger = setup_logging()

app = FastAPI(title=settings.APP_NAME)

@app.exception_handler(LedgerImbalanceError)
async def ledger_imbalance_handler(request: Request, exc: LedgerImbalanceError):
    logger.warning("Rejected unbalanced ledger on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=409, content={"detail": str(exc)})

@app.exception_handler(UnknownCurrencyError)
async def unknown_currency_handler(request: Request, exc: UnknownCurrencyError):
    return JSONResponse(status_code=400, content={"detail": str(exc)})

@app.get("/")
async def root():
    return {"message": f"{settings.APP_NAME} is live"}

app.include_router(system_router, prefix="/api/v1/system")
app.include_router(balances_router, prefix="/api/v1/balances")
app.include_router(expense_router, prefix="/api/v1/expense")
app.include_router(settlement_router, prefix="/api/v1/settlement")
