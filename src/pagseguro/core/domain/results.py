"""Result models decoded from service responses.

Each model names the root element it is decoded from (`xml_root`) and maps
element names to attributes through aliases. Instances come out of
`pagseguro.core.conversion.decoder.decode`; calling code only reads them.
"""

from __future__ import annotations

from datetime import datetime
from typing import ClassVar
from urllib.parse import urlencode

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from pagseguro.core.config import Environment


class ResultModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    xml_root: ClassVar[str]


class RegisteredAuthorization(ResultModel):
    """Authorization request accepted; the seller still has to approve it."""

    xml_root: ClassVar[str] = "authorizationRequest"

    code: str = Field(..., min_length=1, description="Authorization request code.")
    date: datetime = Field(..., description="Registration timestamp.")

    def redirect_url(self, environment: Environment = Environment.PRODUCTION) -> str:
        """Page where the seller approves the requested permissions."""

        query = urlencode({"code": self.code})
        return f"{environment.approval_host}/v2/authorization/request.jhtml?{query}"


class SubscribedPreApproval(ResultModel):
    xml_root: ClassVar[str] = "preApproval"

    code: str = Field(..., min_length=1, description="Subscription (pre-approval) code.")
    date: datetime | None = None


class CancelledPreApprovalSubscription(ResultModel):
    xml_root: ClassVar[str] = "result"

    date: datetime
    status: str = Field(..., min_length=1)

    @property
    def ok(self) -> bool:
        return self.status.upper() == "OK"


class ChargedPreApproval(ResultModel):
    xml_root: ClassVar[str] = "result"

    transaction_code: str = Field(..., alias="transactionCode", min_length=1)
    date: datetime
