from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from message_service import MessageService


router = APIRouter(tags=["message"])


@router.get("/", response_class=PlainTextResponse)
def get_message(request: Request):
    service: MessageService = request.app.state.message_service
    return service.get_message()
