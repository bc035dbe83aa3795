"""Function endpoints: alert-manager and thingspeak-service.

Both take a JSON body with an ``action`` field and answer
``{"success": true, ...}``. Failures surface as HTTP 400 with
``{"success": false, "error": "<message>"}`` (see the FireProtectError
handler in main).
"""

import logging
from typing import Any, TypeVar

from fastapi import APIRouter, Depends, Header, Request, Response
from pydantic import BaseModel, Field, ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from fireprotect.database import get_db
from fireprotect.dependencies import get_alert_evaluator, get_sensor_gateway
from fireprotect.errors import InvalidActionError, RequestValidationError
from fireprotect.schemas.alert import AlertOut, EvaluateRequest, UpdateRequest
from fireprotect.schemas.sensor import LocationRef
from fireprotect.services.alert_evaluator import AlertEvaluator, EvaluationResult
from fireprotect.services.auth_service import parse_bearer
from fireprotect.services.thingspeak import (
    DEFAULT_HISTORY_RESULTS,
    MAX_HISTORY_RESULTS,
    ThingSpeakClient,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/functions", tags=["functions"])

ModelT = TypeVar("ModelT", bound=BaseModel)


class LatestRequest(BaseModel):
    action: str
    location: LocationRef


class HistoryRequest(BaseModel):
    action: str
    location: LocationRef
    results: int = Field(DEFAULT_HISTORY_RESULTS, ge=1, le=MAX_HISTORY_RESULTS)


async def _read_payload(request: Request) -> dict[str, Any]:
    try:
        payload = await request.json()
    except ValueError:
        raise RequestValidationError("Request body must be valid JSON") from None
    if not isinstance(payload, dict):
        raise RequestValidationError("Request body must be a JSON object")
    return payload


def _validate(model: type[ModelT], payload: dict[str, Any]) -> ModelT:
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or "body"
        raise RequestValidationError(f"Invalid '{field}': {first['msg']}") from None


def _evaluation_response(result: EvaluationResult) -> dict[str, Any]:
    if result.outcome == "no_data":
        return {"success": True, "message": "No sensor data available"}
    if result.outcome == "normal":
        return {
            "success": True,
            "message": "All sensors within normal range",
            "sensors": result.reading.model_dump(),
        }
    return {
        "success": True,
        "alert": AlertOut.model_validate(result.alert).model_dump(mode="json"),
        "created": result.created,
    }


# --- alert-manager ---


@router.options("/alert-manager")
async def alert_manager_preflight() -> Response:
    return Response(status_code=200)


@router.post("/alert-manager")
async def alert_manager(
    request: Request,
    authorization: str | None = Header(None),
    session: AsyncSession = Depends(get_db),
    evaluator: AlertEvaluator = Depends(get_alert_evaluator),
) -> dict[str, Any]:
    """Evaluate a location's sensors or update an alert's status."""
    payload = await _read_payload(request)
    action = payload.get("action")
    logger.info(
        f"Alert manager request: action={action}, "
        f"locationId={payload.get('locationId')}, alertId={payload.get('alertId')}"
    )

    if action == "evaluate":
        body = _validate(EvaluateRequest, payload)
        result = await evaluator.evaluate(session, body.location_id)
        return _evaluation_response(result)

    if action == "update":
        body = _validate(UpdateRequest, payload)
        await evaluator.update(session, body.alert_id, body.status, parse_bearer(authorization))
        return {"success": True, "message": "Alert updated successfully"}

    raise InvalidActionError("Invalid action")


# --- thingspeak-service ---


@router.options("/thingspeak-service")
async def thingspeak_service_preflight() -> Response:
    return Response(status_code=200)


@router.post("/thingspeak-service")
async def thingspeak_service(
    request: Request,
    gateway: ThingSpeakClient = Depends(get_sensor_gateway),
) -> dict[str, Any]:
    """Read the latest entry or recent history of a location's channel."""
    payload = await _read_payload(request)
    action = payload.get("action")
    location = payload.get("location")
    location_name = location.get("name") if isinstance(location, dict) else None
    logger.info(f"ThingSpeak service request: action={action}, location={location_name}")

    if action == "latest":
        body = _validate(LatestRequest, payload)
        reading = await gateway.latest(body.location)
        return {"success": True, "data": reading.model_dump() if reading else None}

    if action == "history":
        body = _validate(HistoryRequest, payload)
        readings = await gateway.history(body.location, body.results)
        return {"success": True, "data": [reading.model_dump() for reading in readings]}

    raise InvalidActionError('Invalid action. Use "latest" or "history"')
