from fastapi import APIRouter
from splitledger.core.config import settings
from splitledger.schemas.balances import Balance, GroupLedgerIn
from splitledger.schemas.settlements import Settlement, SettlementValidateRequest
from splitledger.services.settlement_service import suggest_settlement, validate_settlement

router = APIRouter()

@router.post("/validate", response_model=Settlement)
async def validate(data: SettlementValidateRequest):
    return validate_settlement(data.settlement, data.members)

# null when everyone is settled up
@router.post("/suggest", response_model=Balance | None)
async def suggest(data: GroupLedgerIn):
    return suggest_settlement(
        data.members,
        data.expenses,
        data.settlements,
        strict=settings.STRICT_BALANCES
    )
