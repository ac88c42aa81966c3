from splitledger.core.config import settings

async def system_health():
    return {
        "status": "ok"
    }

async def system_config():
    return {
        "app": settings.APP_NAME,
        "currency": settings.DEFAULT_CURRENCY,
        "locale": settings.DEFAULT_LOCALE,
        "strict_balances": settings.STRICT_BALANCES
    }
