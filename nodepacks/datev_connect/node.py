"""
DatevConnectNode - execution flow shared by the DATEVconnect nodes.

Credentials are validated and exchanged for a bearer token once per
execution; the items are then processed one after another, each routed
to the handler registered for its resource.
"""

from __future__ import annotations

from typing import Dict, List, Type

import requests

from datev_connect.config import get_settings
from datev_connect.credentials import CREDENTIAL_NAME, CredentialsError, DatevConnectCredentials, load_credentials
from datev_connect.errors import DatevConnectError
from datev_connect.logging import get_logger, with_node_context
from datev_connect.transport import AuthContext, authenticate
from node_sdk.basenode import BaseNode, NodeApiError, NodeExecutionData, NodeOperationError

from .base import BaseResourceHandler


logger = get_logger(__name__)


class DatevConnectNode(BaseNode):
    """Base class for nodes that talk to DATEVconnect."""

    resource_handlers: Dict[str, Type[BaseResourceHandler]] = {}
    default_resource = "client"

    def execute(self) -> List[List[NodeExecutionData]]:
        items = self.get_input_data()
        credentials = self.load_credentials()
        return_data: List[NodeExecutionData] = []

        with requests.Session() as session:
            auth = self.authenticate(credentials, session)

            for item_index in range(len(items)):
                resource = self.get_node_parameter("resource", item_index, self.default_resource)
                operation = self.get_node_parameter("operation", item_index, "getAll")

                handler_class = self.resource_handlers.get(resource)
                if handler_class is None:
                    raise NodeOperationError(
                        f'The resource "{resource}" is not supported.',
                        node=self,
                        item_index=item_index,
                    )

                context = self.build_context(auth, resource, operation, item_index)
                handler_class(self, item_index).execute(operation, context, return_data)

        logger.info(
            "Processed %d items into %d records",
            len(items),
            len(return_data),
            extra=with_node_context(node_type=self.type),
        )
        return [return_data]

    def load_credentials(self) -> DatevConnectCredentials:
        try:
            return load_credentials(self.get_credentials(CREDENTIAL_NAME))
        except CredentialsError as e:
            raise NodeOperationError(e.message, node=self) from e

    def authenticate(
        self,
        credentials: DatevConnectCredentials,
        session: requests.Session,
    ) -> AuthContext:
        """Exchange credentials for a token; failure aborts the execution."""
        timeout = get_settings().request_timeout_s
        try:
            response = authenticate(
                credentials.host,
                credentials.email,
                credentials.password.get_secret_value(),
                session=session,
                timeout=timeout,
            )
        except DatevConnectError as e:
            logger.error("Authentication failed: %s", e.message, extra=with_node_context(node_type=self.type))
            raise NodeApiError(
                e.message,
                node=self,
                status_code=getattr(e, "status_code", None),
                response_body=getattr(e, "response_body", None),
            ) from e

        return AuthContext(
            host=credentials.host,
            token=response["access_token"],
            client_instance_id=credentials.client_instance_id,
            session=session,
            timeout=timeout,
        )

    def build_context(
        self,
        auth: AuthContext,
        resource: str,
        operation: str,
        item_index: int,
    ) -> AuthContext:
        """Per-item request context; subclasses add path identifiers."""
        return auth
