"""Notification endpoints.

Endpoints:
  POST /api/send-approval   Email a shop owner that their business was approved
"""
import logging
from typing import Annotated

from fastapi import APIRouter, Body, Depends, Request, status
from fastapi.responses import JSONResponse

from easybizness_mail.api.deps import get_app_settings, get_transport
from easybizness_mail.core.config import Settings
from easybizness_mail.core.errors import ValidationError
from easybizness_mail.core.limiter import limiter, send_approval_limit
from easybizness_mail.schemas.notification import (
    ApprovalNotificationIn,
    ErrorResponse,
    SendApprovalResponse,
)
from easybizness_mail.services.email import build_dashboard_url, send_approval_email
from easybizness_mail.services.mail_transport import Address, MailTransport

logger = logging.getLogger(__name__)

router = APIRouter()

SEND_FAILED_MESSAGE = "Failed to send email"


@router.post(
    "/send-approval",
    response_model=SendApprovalResponse,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Send a business-approved notification email",
)
@limiter.limit(send_approval_limit)
async def send_approval(
    request: Request,
    settings: Annotated[Settings, Depends(get_app_settings)],
    transport: Annotated[MailTransport, Depends(get_transport)],
    payload: Annotated[ApprovalNotificationIn | None, Body()] = None,
):
    host = request.headers.get("host") or request.url.netloc
    try:
        await send_approval_email(
            payload,
            dashboard_url=build_dashboard_url(request.url.scheme, host),
            sender=Address(settings.MAILTRAP_FROM_EMAIL, settings.MAILTRAP_FROM_NAME),
            transport=transport,
        )
    except ValidationError as exc:
        logger.info("send-approval rejected: %s", exc)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": str(exc)})
    except Exception:
        logger.exception("send-approval error")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": SEND_FAILED_MESSAGE},
        )
    return SendApprovalResponse(ok=True)
