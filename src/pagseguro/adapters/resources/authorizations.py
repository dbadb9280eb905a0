"""Authorization registration: an application asking a seller for permissions."""

from __future__ import annotations

from typing import Any, Mapping

from pagseguro.adapters.resources.base import BaseResource
from pagseguro.core.conversion.map_converters import authorization_registration_to_map
from pagseguro.core.conversion.xml_converters import (
    authorization_registration_to_xml,
    serialize_xml,
)
from pagseguro.core.domain.requests import AuthorizationRegistration
from pagseguro.core.domain.results import RegisteredAuthorization
from pagseguro.core.endpoints import AUTHORIZATION_REQUEST, build_url


class AuthorizationsResource(BaseResource):
    def register(
        self,
        registration: AuthorizationRegistration | Mapping[str, Any],
    ) -> RegisteredAuthorization:
        """Register an authorization request (form-encoded).

        Returns the registered authorization; send the seller to
        `RegisteredAuthorization.redirect_url()` to approve it.
        """

        registration = AuthorizationRegistration.coerce(registration)
        fields = authorization_registration_to_map(registration)

        self._log.info("authorization_register_started", reference=registration.reference)
        response = self._send(
            "POST",
            build_url(AUTHORIZATION_REQUEST, host=self._settings.host),
            params=self._settings.application_credentials(),
            form=fields,
        )
        result = self._decode(response, RegisteredAuthorization)
        self._log.info("authorization_registered", code=result.code)
        return result

    def register_with_suggestion(
        self,
        registration: AuthorizationRegistration | Mapping[str, Any],
    ) -> RegisteredAuthorization:
        """Register an authorization request as XML, pre-filling the seller account."""

        registration = AuthorizationRegistration.coerce(registration)
        body = serialize_xml(authorization_registration_to_xml(registration), self._settings.charset)

        self._log.info(
            "authorization_register_started",
            reference=registration.reference,
            suggestion=registration.account is not None,
        )
        response = self._send(
            "POST",
            build_url(AUTHORIZATION_REQUEST, host=self._settings.host),
            params=self._settings.application_credentials(),
            xml=body,
        )
        result = self._decode(response, RegisteredAuthorization)
        self._log.info("authorization_registered", code=result.code)
        return result
