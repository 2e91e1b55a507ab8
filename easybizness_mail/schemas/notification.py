from pydantic import BaseModel, ConfigDict, Field


class ApprovalNotificationIn(BaseModel):
    """Request body for POST /api/send-approval.

    Fields are optional at the schema level so that missing values surface as
    a 400 with a readable message instead of FastAPI's default 422.
    """

    model_config = ConfigDict(populate_by_name=True)

    to_email: str | None = Field(default=None, alias="toEmail")
    to_name: str | None = Field(default=None, alias="toName")
    shop_name: str | None = Field(default=None, alias="shopName")


class SendApprovalResponse(BaseModel):
    ok: bool = True


class ErrorResponse(BaseModel):
    error: str
