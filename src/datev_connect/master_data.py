"""
Master-data endpoint wrappers (``datevconnect/master-data/v1``).

Each wrapper takes the AuthContext first, then path identifiers, then
keyword query/body arguments. ``fetch_*`` wrappers require a response
body; ``create_*`` and ``update_*`` return the body or None.
"""

from __future__ import annotations

from typing import Any, List, Optional, Union

from .transport import (
    AuthContext,
    JsonObject,
    Query,
    fetch_payload,
    quote_segment,
    send_request,
)

BASE_PATH = "datevconnect/master-data/v1"

Payload = Union[JsonObject, List[Any]]


def _path(*segments: Any) -> str:
    return "/".join([BASE_PATH, *(str(segment) for segment in segments)])


def _list_query(
    top: Optional[int] = None,
    skip: Optional[int] = None,
    select: Optional[str] = None,
    filter: Optional[str] = None,
) -> Query:
    return {"top": top, "skip": skip, "select": select, "filter": filter}


# ==============================================================================
# Clients
# ==============================================================================

def fetch_clients(
    auth: AuthContext,
    top: Optional[int] = None,
    skip: Optional[int] = None,
    select: Optional[str] = None,
    filter: Optional[str] = None,
) -> Payload:
    return fetch_payload(auth, _path("clients"), "clients", _list_query(top, skip, select, filter))


def fetch_client(auth: AuthContext, client_id: str, select: Optional[str] = None) -> Payload:
    return fetch_payload(auth, _path("clients", quote_segment(client_id)), "client", {"select": select})


def create_client(
    auth: AuthContext,
    client: Any,
    max_number: Optional[int] = None,
) -> Optional[Payload]:
    """Create a client; ``max_number`` bounds the number DATEV assigns."""
    return send_request(
        auth, _path("clients"), method="POST", query={"max-number": max_number}, body=client,
    )


def update_client(auth: AuthContext, client_id: str, client: Any) -> Optional[Payload]:
    return send_request(auth, _path("clients", quote_segment(client_id)), method="PUT", body=client)


def fetch_client_responsibilities(
    auth: AuthContext, client_id: str, select: Optional[str] = None,
) -> Payload:
    return fetch_payload(
        auth,
        _path("clients", quote_segment(client_id), "responsibilities"),
        "client responsibilities",
        {"select": select},
    )


def update_client_responsibilities(
    auth: AuthContext, client_id: str, responsibilities: Any,
) -> Optional[Payload]:
    return send_request(
        auth,
        _path("clients", quote_segment(client_id), "responsibilities"),
        method="PUT",
        body=responsibilities,
    )


def fetch_client_categories(
    auth: AuthContext, client_id: str, select: Optional[str] = None,
) -> Payload:
    return fetch_payload(
        auth,
        _path("clients", quote_segment(client_id), "client-categories"),
        "client categories",
        {"select": select},
    )


def update_client_categories(
    auth: AuthContext, client_id: str, categories: Any,
) -> Optional[Payload]:
    return send_request(
        auth,
        _path("clients", quote_segment(client_id), "client-categories"),
        method="PUT",
        body=categories,
    )


def fetch_client_groups(
    auth: AuthContext, client_id: str, select: Optional[str] = None,
) -> Payload:
    return fetch_payload(
        auth,
        _path("clients", quote_segment(client_id), "client-groups"),
        "client groups",
        {"select": select},
    )


def update_client_groups(auth: AuthContext, client_id: str, groups: Any) -> Optional[Payload]:
    return send_request(
        auth,
        _path("clients", quote_segment(client_id), "client-groups"),
        method="PUT",
        body=groups,
    )


def fetch_client_deletion_log(
    auth: AuthContext,
    top: Optional[int] = None,
    skip: Optional[int] = None,
    select: Optional[str] = None,
    filter: Optional[str] = None,
) -> Payload:
    return fetch_payload(
        auth,
        _path("clients", "deletion-log"),
        "client deletion log",
        _list_query(top, skip, select, filter),
    )


def fetch_next_free_client_number(
    auth: AuthContext,
    start: int,
    range: Optional[int] = None,
) -> Payload:
    """Ask DATEV for the next unused client number at or after ``start``."""
    return fetch_payload(
        auth,
        _path("clients", "next-free-number"),
        "next free client number",
        {"start": start, "range": range},
    )


# ==============================================================================
# Reference data
# ==============================================================================

def fetch_tax_authorities(
    auth: AuthContext, select: Optional[str] = None, filter: Optional[str] = None,
) -> Payload:
    return fetch_payload(auth, _path("tax-authorities"), "tax authorities", {"select": select, "filter": filter})


def fetch_relationships(
    auth: AuthContext, select: Optional[str] = None, filter: Optional[str] = None,
) -> Payload:
    return fetch_payload(auth, _path("relationships"), "relationships", {"select": select, "filter": filter})


def fetch_relationship_types(
    auth: AuthContext, select: Optional[str] = None, filter: Optional[str] = None,
) -> Payload:
    return fetch_payload(
        auth, _path("relationship-types"), "relationship types", {"select": select, "filter": filter},
    )


def fetch_legal_forms(
    auth: AuthContext, select: Optional[str] = None, national_right: Optional[str] = None,
) -> Payload:
    return fetch_payload(
        auth, _path("legal-forms"), "legal forms", {"select": select, "national-right": national_right},
    )


def fetch_country_codes(
    auth: AuthContext, select: Optional[str] = None, filter: Optional[str] = None,
) -> Payload:
    return fetch_payload(auth, _path("country-codes"), "country codes", {"select": select, "filter": filter})


def fetch_banks(
    auth: AuthContext, select: Optional[str] = None, filter: Optional[str] = None,
) -> Payload:
    return fetch_payload(auth, _path("banks"), "banks", {"select": select, "filter": filter})


def fetch_areas_of_responsibility(
    auth: AuthContext, select: Optional[str] = None, filter: Optional[str] = None,
) -> Payload:
    return fetch_payload(
        auth,
        _path("area-of-responsibilities"),
        "areas of responsibility",
        {"select": select, "filter": filter},
    )


# ==============================================================================
# Corporate structures
# ==============================================================================

def fetch_corporate_structures(
    auth: AuthContext, select: Optional[str] = None, filter: Optional[str] = None,
) -> Payload:
    return fetch_payload(
        auth, _path("corporate-structures"), "corporate structures", {"select": select, "filter": filter},
    )


def fetch_corporate_structure(
    auth: AuthContext, organization_id: str, select: Optional[str] = None,
) -> Payload:
    return fetch_payload(
        auth,
        _path("corporate-structures", quote_segment(organization_id)),
        "corporate structure",
        {"select": select},
    )


def fetch_establishment(
    auth: AuthContext,
    organization_id: str,
    establishment_id: str,
    select: Optional[str] = None,
) -> Payload:
    return fetch_payload(
        auth,
        _path(
            "corporate-structures",
            quote_segment(organization_id),
            "establishments",
            quote_segment(establishment_id),
        ),
        "establishment",
        {"select": select},
    )


# ==============================================================================
# Employees
# ==============================================================================

def fetch_employees(
    auth: AuthContext, select: Optional[str] = None, filter: Optional[str] = None,
) -> Payload:
    return fetch_payload(auth, _path("employees"), "employees", {"select": select, "filter": filter})


def fetch_employee(auth: AuthContext, employee_id: str, select: Optional[str] = None) -> Payload:
    return fetch_payload(auth, _path("employees", quote_segment(employee_id)), "employee", {"select": select})


def create_employee(auth: AuthContext, employee: Any) -> Optional[Payload]:
    return send_request(auth, _path("employees"), method="POST", body=employee)


def update_employee(auth: AuthContext, employee_id: str, employee: Any) -> Optional[Payload]:
    return send_request(
        auth, _path("employees", quote_segment(employee_id)), method="PUT", body=employee,
    )


# ==============================================================================
# Client group types / client category types
# ==============================================================================

def fetch_client_group_types(
    auth: AuthContext, select: Optional[str] = None, filter: Optional[str] = None,
) -> Payload:
    return fetch_payload(
        auth, _path("client-group-types"), "client group types", {"select": select, "filter": filter},
    )


def fetch_client_group_type(
    auth: AuthContext, client_group_type_id: str, select: Optional[str] = None,
) -> Payload:
    return fetch_payload(
        auth,
        _path("client-group-types", quote_segment(client_group_type_id)),
        "client group type",
        {"select": select},
    )


def create_client_group_type(auth: AuthContext, client_group_type: Any) -> Optional[Payload]:
    return send_request(auth, _path("client-group-types"), method="POST", body=client_group_type)


def update_client_group_type(
    auth: AuthContext, client_group_type_id: str, client_group_type: Any,
) -> Optional[Payload]:
    return send_request(
        auth,
        _path("client-group-types", quote_segment(client_group_type_id)),
        method="PUT",
        body=client_group_type,
    )


def fetch_client_category_types(
    auth: AuthContext, select: Optional[str] = None, filter: Optional[str] = None,
) -> Payload:
    return fetch_payload(
        auth,
        _path("client-category-types"),
        "client category types",
        {"select": select, "filter": filter},
    )


def fetch_client_category_type(
    auth: AuthContext, client_category_type_id: str, select: Optional[str] = None,
) -> Payload:
    return fetch_payload(
        auth,
        _path("client-category-types", quote_segment(client_category_type_id)),
        "client category type",
        {"select": select},
    )


def create_client_category_type(auth: AuthContext, client_category_type: Any) -> Optional[Payload]:
    return send_request(
        auth, _path("client-category-types"), method="POST", body=client_category_type,
    )


def update_client_category_type(
    auth: AuthContext, client_category_type_id: str, client_category_type: Any,
) -> Optional[Payload]:
    return send_request(
        auth,
        _path("client-category-types", quote_segment(client_category_type_id)),
        method="PUT",
        body=client_category_type,
    )


# ==============================================================================
# Addressees
# ==============================================================================

def fetch_addressees(
    auth: AuthContext,
    top: Optional[int] = None,
    skip: Optional[int] = None,
    select: Optional[str] = None,
    filter: Optional[str] = None,
) -> Payload:
    return fetch_payload(auth, _path("addressees"), "addressees", _list_query(top, skip, select, filter))


def fetch_addressee(
    auth: AuthContext,
    addressee_id: str,
    select: Optional[str] = None,
    expand: Optional[str] = None,
) -> Payload:
    return fetch_payload(
        auth,
        _path("addressees", quote_segment(addressee_id)),
        "addressee",
        {"select": select, "expand": expand},
    )


def create_addressee(
    auth: AuthContext,
    addressee: Any,
    national_right: Optional[str] = None,
) -> Optional[Payload]:
    return send_request(
        auth,
        _path("addressees"),
        method="POST",
        query={"national-right": national_right},
        body=addressee,
    )


def update_addressee(auth: AuthContext, addressee_id: str, addressee: Any) -> Optional[Payload]:
    return send_request(
        auth, _path("addressees", quote_segment(addressee_id)), method="PUT", body=addressee,
    )


def fetch_addressees_deletion_log(
    auth: AuthContext,
    top: Optional[int] = None,
    skip: Optional[int] = None,
    select: Optional[str] = None,
    filter: Optional[str] = None,
) -> Payload:
    return fetch_payload(
        auth,
        _path("addressees", "deletion-log"),
        "addressee deletion log",
        _list_query(top, skip, select, filter),
    )
