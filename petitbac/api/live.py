# petitbac/api/live.py
import logging

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect
from pydantic import ValidationError
from starlette.websockets import WebSocketState

from petitbac.api import deps
from petitbac.models.validation import LiveValidationRequest, ValidationOutcome
from petitbac.services.live_validation import LiveValidationRunner
from petitbac.services.validation_service import ValidationService

logger = logging.getLogger("petitbac.api.live")  # Logger for this module
router = APIRouter()

@router.websocket("/ws/validate")
async def live_validation_endpoint(
    websocket: WebSocket,
    service: ValidationService = Depends(deps.get_validation_service),
):
    """
    Keystroke-level validation. The client sends {"field", "category", "word"}
    on every change; only the result for the latest word of each field is sent back.
    """
    await websocket.accept()

    async def send_result(field: str, word: str, outcome: ValidationOutcome):
        if websocket.client_state != WebSocketState.CONNECTED:
            return
        await websocket.send_json({"field": field, "word": word, "result": outcome.model_dump(mode="json")})

    runner = LiveValidationRunner(service, send_result)
    try:
        while True:
            message = await websocket.receive_text()
            try:
                # Bad JSON and bad fields are both reported as a ValidationError
                request = LiveValidationRequest.model_validate_json(message)
            except ValidationError as e:
                logger.warning(f"Malformed live validation message: {message!r}")
                await websocket.send_json({"error": "Invalid message", "details": e.errors(include_url=False)})
                continue
            runner.submit(request.field, request.category, request.word)
    except WebSocketDisconnect:
        logger.info("Live validation client disconnected.")
    finally:
        await runner.cancel_all()
