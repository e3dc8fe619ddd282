"""
DATEVconnect client - transport, authentication and endpoint wrappers.

Modules:
- transport: URL/header building, response classification, authenticate()
- master_data: ``datevconnect/master-data/v1`` wrappers
- accounting: ``datevconnect/accounting/v1`` wrappers
- credentials: credential schema and validation
- config / logging: settings and structured logging
"""

__version__ = "0.1.0"

from .errors import DatevConnectError, DatevConnectRequestError, DatevConnectTimeoutError
from .transport import AuthContext, RequestContext, authenticate, send_request

__all__ = [
    "__version__",
    "AuthContext",
    "RequestContext",
    "DatevConnectError",
    "DatevConnectRequestError",
    "DatevConnectTimeoutError",
    "authenticate",
    "send_request",
]
