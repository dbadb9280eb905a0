"""Pre-approvals (recurring payments): subscription, cancellation and charge."""

from __future__ import annotations

from typing import Any, Mapping

from pagseguro.adapters.resources.base import BaseResource
from pagseguro.core.conversion.map_converters import (
    pre_approval_charge_to_map,
    pre_approval_subscription_to_map,
)
from pagseguro.core.domain.requests import PreApprovalCharge, PreApprovalSubscription
from pagseguro.core.domain.results import (
    CancelledPreApprovalSubscription,
    ChargedPreApproval,
    SubscribedPreApproval,
)
from pagseguro.core.endpoints import (
    PRE_APPROVAL_CANCEL,
    PRE_APPROVAL_PAYMENT,
    PRE_APPROVALS,
    build_url,
)
from pagseguro.core.errors import RequestValidationError


class PreApprovalsResource(BaseResource):
    def subscribe(
        self,
        subscription: PreApprovalSubscription | Mapping[str, Any],
    ) -> SubscribedPreApproval:
        """Adhere a buyer to an existing plan."""

        subscription = PreApprovalSubscription.coerce(subscription)
        fields = pre_approval_subscription_to_map(subscription)

        self._log.info("pre_approval_subscribe_started", plan=subscription.plan)
        response = self._send(
            "POST",
            build_url(PRE_APPROVALS, host=self._settings.host),
            params=self._settings.seller_credentials(),
            form=fields,
        )
        result = self._decode(response, SubscribedPreApproval)
        self._log.info("pre_approval_subscribed", code=result.code)
        return result

    def cancel_by_code(self, code: str) -> CancelledPreApprovalSubscription:
        """Cancel a subscription, identified by the code `subscribe` returned."""

        code = (code or "").strip()
        if not code:
            raise RequestValidationError.missing("code")

        self._log.info("pre_approval_cancel_started", code=code)
        response = self._send(
            "PUT",
            build_url(PRE_APPROVAL_CANCEL, host=self._settings.host, code=code),
            params=self._settings.seller_credentials(),
        )
        result = self._decode(response, CancelledPreApprovalSubscription)
        self._log.info("pre_approval_cancelled", code=code, status=result.status)
        return result

    def charge(self, charge: PreApprovalCharge | Mapping[str, Any]) -> ChargedPreApproval:
        """Bill an active pre-approval for the given items."""

        charge = PreApprovalCharge.coerce(charge)
        fields = pre_approval_charge_to_map(charge)

        self._log.info("pre_approval_charge_started", code=charge.code, items=len(charge.items))
        response = self._send(
            "POST",
            build_url(PRE_APPROVAL_PAYMENT, host=self._settings.host),
            params=self._settings.seller_credentials(),
            form=fields,
        )
        result = self._decode(response, ChargedPreApproval)
        self._log.info("pre_approval_charged", transaction_code=result.transaction_code)
        return result
