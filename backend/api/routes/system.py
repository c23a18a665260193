from fastapi import APIRouter

from api.models import HealthResponse, WelcomeResponse


router = APIRouter(tags=["system"])


@router.get("/", response_model=WelcomeResponse)
def read_root():
    return WelcomeResponse(message="Welcome to the Message backend. Use /message/ to fetch the message.")


@router.get("/healthz", response_model=HealthResponse)
def healthz():
    return HealthResponse(ok=True)
