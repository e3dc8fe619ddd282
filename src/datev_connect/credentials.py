"""
DATEVconnect API credential: field schema, validation and connection test.
"""
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

import requests
from pydantic import BaseModel, ConfigDict, Field, SecretStr, ValidationError, field_validator

from node_registry.models import CredentialDefinition

from .errors import DatevConnectError
from .transport import authenticate

CREDENTIAL_NAME = "datevConnectApi"

MISSING_CREDENTIALS_MESSAGE = "DATEVconnect credentials are missing"
INCOMPLETE_CREDENTIALS_MESSAGE = "All DATEVconnect credential fields must be provided"


class DatevConnectCredentials(BaseModel):
    """Validated credential values; every field must be non-empty."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    host: str = Field(..., description="Base URL of the DATEVconnect gateway")
    email: str = Field(..., description="Login email")
    password: SecretStr = Field(..., description="Login password")
    client_instance_id: str = Field(..., alias="clientInstanceId", description="Client instance id")

    @field_validator("host", "email", "client_instance_id")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("must not be empty")
        return v.strip()

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value():
            raise ValueError("must not be empty")
        return v


class CredentialsError(DatevConnectError):
    """Credentials are absent or incomplete."""


def load_credentials(data: Optional[Mapping[str, Any]]) -> DatevConnectCredentials:
    """
    Validate raw credential values supplied by the host.

    Raises:
        CredentialsError: When nothing was supplied or a field is empty.
    """
    if not data:
        raise CredentialsError(MISSING_CREDENTIALS_MESSAGE)
    try:
        return DatevConnectCredentials.model_validate(dict(data))
    except ValidationError as e:
        raise CredentialsError(INCOMPLETE_CREDENTIALS_MESSAGE) from e


class DatevConnectApiCredential:
    """DATEVconnect email/password credential with a login-based test."""

    name = CREDENTIAL_NAME
    display_name = "DATEVconnect API"
    documentation_url = "https://developer.datev.de/"
    properties = [
        {
            "name": "host",
            "displayName": "Host",
            "type": "string",
            "required": True,
            "default": "",
            "placeholder": "https://datevconnect.example.com",
            "description": "Base URL of the DATEVconnect gateway",
        },
        {
            "name": "email",
            "displayName": "Email",
            "type": "string",
            "required": True,
            "default": "",
        },
        {
            "name": "password",
            "displayName": "Password",
            "type": "string",
            "typeOptions": {"password": True},
            "required": True,
            "default": "",
        },
        {
            "name": "clientInstanceId",
            "displayName": "Client Instance ID",
            "type": "string",
            "required": True,
            "default": "",
            "description": "Sent as x-client-instance-id with every request",
        },
    ]

    def __init__(self, data: Optional[Mapping[str, Any]] = None) -> None:
        self.data = dict(data or {})

    @classmethod
    def definition(cls) -> CredentialDefinition:
        return CredentialDefinition(
            name=cls.name,
            display_name=cls.display_name,
            documentation_url=cls.documentation_url,
            properties=cls.properties,
        )

    def validate(self) -> Dict[str, Any]:
        """Check that every required field is present."""
        try:
            load_credentials(self.data)
        except CredentialsError as e:
            return {"valid": False, "message": e.message}
        return {"valid": True, "message": "Credential fields are complete"}

    def test(self, session: Optional[requests.Session] = None) -> Dict[str, Any]:
        """
        Test the credential by logging in.

        Returns:
            Dictionary with ``success`` and ``message``
        """
        validation = self.validate()
        if not validation["valid"]:
            return {"success": False, "message": validation["message"]}

        credentials = load_credentials(self.data)
        try:
            authenticate(
                credentials.host,
                credentials.email,
                credentials.password.get_secret_value(),
                session=session,
            )
        except DatevConnectError as e:
            return {"success": False, "message": e.message}
        return {"success": True, "message": "Successfully authenticated with DATEVconnect"}


__all__ = [
    "CREDENTIAL_NAME",
    "DatevConnectCredentials",
    "DatevConnectApiCredential",
    "CredentialsError",
    "load_credentials",
]
