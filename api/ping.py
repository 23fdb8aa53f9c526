from fastapi import APIRouter
from api.models import PingResponse

router = APIRouter()


@router.get("/ping", response_model=PingResponse, summary="Test Summary")
async def ping():
    """
    Test Description
    """
    return {"ping": "pong"}
