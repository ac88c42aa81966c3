from fastapi import APIRouter
from splitledger.services.system_services import system_health, system_config

router = APIRouter()

@router.get("/health")
async def health():
    return await system_health()

@router.get("/config")
async def config():
    return await system_config()
