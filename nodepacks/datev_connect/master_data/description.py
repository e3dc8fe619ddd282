"""
Descriptor for the DATEVconnect Master Data node.
"""

from __future__ import annotations

from ..description import (
    json_parameter,
    list_parameters,
    node_description,
    operation_property,
    parameter,
    resource_property,
)

DESCRIPTION = node_description(
    "masterData",
    "DATEVconnect: Master Data",
    "Read and maintain DATEV master data (clients, addressees, employees, reference data)",
)

RESOURCES = [
    ("addressee", "Addressee"),
    ("areaOfResponsibility", "Area of Responsibility"),
    ("bank", "Bank"),
    ("client", "Client"),
    ("clientCategoryType", "Client Category Type"),
    ("clientGroupType", "Client Group Type"),
    ("corporateStructure", "Corporate Structure"),
    ("countryCode", "Country Code"),
    ("employee", "Employee"),
    ("legalForm", "Legal Form"),
    ("relationship", "Relationship"),
    ("taxAuthority", "Tax Authority"),
]

_CRUD = [("getAll", "Get Many"), ("get", "Get"), ("create", "Create"), ("update", "Update")]
_GET_MANY = [("getAll", "Get Many")]

OPERATIONS = {
    "client": [
        ("getAll", "Get Many"),
        ("get", "Get"),
        ("create", "Create"),
        ("update", "Update"),
        ("getResponsibilities", "Get Responsibilities"),
        ("updateResponsibilities", "Update Responsibilities"),
        ("getClientCategories", "Get Categories"),
        ("updateClientCategories", "Update Categories"),
        ("getClientGroups", "Get Groups"),
        ("updateClientGroups", "Update Groups"),
        ("getDeletionLog", "Get Deletion Log"),
        ("getNextFreeNumber", "Get Next Free Number"),
    ],
    "taxAuthority": _GET_MANY,
    "relationship": [("getAll", "Get Many"), ("getTypes", "Get Types")],
    "legalForm": _GET_MANY,
    "corporateStructure": [
        ("getAll", "Get Many"),
        ("get", "Get Organization"),
        ("getEstablishment", "Get Establishment"),
    ],
    "employee": _CRUD,
    "countryCode": _GET_MANY,
    "clientGroupType": _CRUD,
    "clientCategoryType": _CRUD,
    "bank": _GET_MANY,
    "areaOfResponsibility": _GET_MANY,
    "addressee": _CRUD + [("getDeletionLog", "Get Deletion Log")],
}

_PAGED = {"resource": ["client", "addressee"], "operation": ["getAll", "getDeletionLog"]}
_SELECTABLE = {"resource": [value for value, _ in RESOURCES]}
_FILTERABLE = {
    "resource": [
        "client", "addressee", "taxAuthority", "relationship", "corporateStructure", "employee",
        "countryCode", "clientGroupType", "clientCategoryType", "bank", "areaOfResponsibility",
    ],
    "operation": ["getAll", "getDeletionLog", "getTypes"],
}
_CLIENT_ID_OPERATIONS = [
    "get", "update", "getResponsibilities", "updateResponsibilities",
    "getClientCategories", "updateClientCategories", "getClientGroups", "updateClientGroups",
]


def _build_parameters() -> list:
    params = [resource_property(RESOURCES, "client")]
    params.extend(operation_property(resource, choices) for resource, choices in OPERATIONS.items())
    params.extend(list_parameters(_PAGED))
    params.extend([
        parameter(
            "select", "Select Fields", _SELECTABLE,
            description="Comma-separated list of fields to return",
        ),
        parameter("filter", "Filter", _FILTERABLE, description="OData-style filter expression"),
        parameter(
            "clientId", "Client ID", {"resource": ["client"], "operation": _CLIENT_ID_OPERATIONS},
            required=True,
        ),
        json_parameter(
            "clientData", "Client Data", {"resource": ["client"], "operation": ["create", "update"]},
            "Client payload as JSON",
        ),
        parameter(
            "maxNumber", "Max Number", {"resource": ["client"], "operation": ["create"]},
            type="number", default=None,
            description="Highest client number DATEV may assign",
        ),
        json_parameter(
            "responsibilitiesData", "Responsibilities",
            {"resource": ["client"], "operation": ["updateResponsibilities"]},
            "Responsibilities payload as JSON",
        ),
        json_parameter(
            "categoriesData", "Client Categories",
            {"resource": ["client"], "operation": ["updateClientCategories"]},
            "Client categories payload as JSON",
        ),
        json_parameter(
            "groupsData", "Client Groups",
            {"resource": ["client"], "operation": ["updateClientGroups"]},
            "Client groups payload as JSON",
        ),
        parameter(
            "start", "Start", {"resource": ["client"], "operation": ["getNextFreeNumber"]},
            type="number", default=1, required=True,
            description="First client number to consider",
        ),
        parameter(
            "range", "Range", {"resource": ["client"], "operation": ["getNextFreeNumber"]},
            type="number", default=None,
            description="How many numbers after Start to search",
        ),
        parameter(
            "nationalRight", "National Right",
            {"resource": ["legalForm", "addressee"], "operation": ["getAll", "create"]},
            type="options", default="german",
            options=[{"name": "German", "value": "german"}, {"name": "Austrian", "value": "austrian"}],
        ),
        parameter(
            "organizationId", "Organization ID",
            {"resource": ["corporateStructure"], "operation": ["get", "getEstablishment"]},
            required=True,
        ),
        parameter(
            "establishmentId", "Establishment ID",
            {"resource": ["corporateStructure"], "operation": ["getEstablishment"]},
            required=True,
        ),
        parameter(
            "employeeId", "Employee ID", {"resource": ["employee"], "operation": ["get", "update"]},
            required=True,
        ),
        json_parameter(
            "employeeData", "Employee Data", {"resource": ["employee"], "operation": ["create", "update"]},
            "Employee payload as JSON",
        ),
        parameter(
            "clientGroupTypeId", "Client Group Type ID",
            {"resource": ["clientGroupType"], "operation": ["get", "update"]},
            required=True,
        ),
        json_parameter(
            "clientGroupTypeData", "Client Group Type Data",
            {"resource": ["clientGroupType"], "operation": ["create", "update"]},
            "Client group type payload as JSON",
        ),
        parameter(
            "clientCategoryTypeId", "Client Category Type ID",
            {"resource": ["clientCategoryType"], "operation": ["get", "update"]},
            required=True,
        ),
        json_parameter(
            "clientCategoryTypeData", "Client Category Type Data",
            {"resource": ["clientCategoryType"], "operation": ["create", "update"]},
            "Client category type payload as JSON",
        ),
        parameter(
            "addresseeId", "Addressee ID", {"resource": ["addressee"], "operation": ["get", "update"]},
            required=True,
        ),
        json_parameter(
            "addresseeData", "Addressee Data", {"resource": ["addressee"], "operation": ["create", "update"]},
            "Addressee payload as JSON",
        ),
        parameter(
            "expand", "Expand", {"resource": ["addressee"], "operation": ["get"]},
            description="Related entities to embed in the response",
        ),
    ])
    return params


PROPERTIES = {
    "parameters": _build_parameters(),
    "credentials": DESCRIPTION["credentials"],
}
