"""
Resource handlers for the DATEVconnect Master Data node.
"""

from __future__ import annotations

from typing import Any

from datev_connect import master_data as api
from datev_connect.transport import AuthContext

from ..base import DEFAULT_TOP, BaseResourceHandler


class MasterDataResourceHandler(BaseResourceHandler):
    """Master-data lists pass top/skip through as configured."""

    def list_options(self) -> dict:
        return {
            "top": self.get_number_parameter("top", DEFAULT_TOP),
            "skip": self.get_number_parameter("skip", 0),
            "select": self.get_optional_string("select"),
            "filter": self.get_optional_string("filter"),
        }

    def select_filter(self) -> dict:
        return {
            "select": self.get_optional_string("select"),
            "filter": self.get_optional_string("filter"),
        }


class ClientResourceHandler(MasterDataResourceHandler):
    resource = "client"
    operations = {
        "getAll": "get_all",
        "get": "get",
        "create": "create",
        "update": "update",
        "getResponsibilities": "get_responsibilities",
        "updateResponsibilities": "update_responsibilities",
        "getClientCategories": "get_client_categories",
        "updateClientCategories": "update_client_categories",
        "getClientGroups": "get_client_groups",
        "updateClientGroups": "update_client_groups",
        "getDeletionLog": "get_deletion_log",
        "getNextFreeNumber": "get_next_free_number",
    }

    def get_all(self, auth: AuthContext) -> Any:
        return api.fetch_clients(auth, **self.list_options())

    def get(self, auth: AuthContext) -> Any:
        return api.fetch_client(
            auth, self.get_required_string("clientId"), select=self.get_optional_string("select"),
        )

    def create(self, auth: AuthContext) -> Any:
        client = self.get_json_parameter("clientData", "Client Data")
        return api.create_client(auth, client, max_number=self.get_number_parameter("maxNumber"))

    def update(self, auth: AuthContext) -> Any:
        client_id = self.get_required_string("clientId")
        client = self.get_json_parameter("clientData", "Client Data")
        return api.update_client(auth, client_id, client)

    def get_responsibilities(self, auth: AuthContext) -> Any:
        return api.fetch_client_responsibilities(
            auth, self.get_required_string("clientId"), select=self.get_optional_string("select"),
        )

    def update_responsibilities(self, auth: AuthContext) -> Any:
        client_id = self.get_required_string("clientId")
        responsibilities = self.get_json_parameter("responsibilitiesData", "Responsibilities")
        return api.update_client_responsibilities(auth, client_id, responsibilities)

    def get_client_categories(self, auth: AuthContext) -> Any:
        return api.fetch_client_categories(
            auth, self.get_required_string("clientId"), select=self.get_optional_string("select"),
        )

    def update_client_categories(self, auth: AuthContext) -> Any:
        client_id = self.get_required_string("clientId")
        categories = self.get_json_parameter("categoriesData", "Client Categories")
        return api.update_client_categories(auth, client_id, categories)

    def get_client_groups(self, auth: AuthContext) -> Any:
        return api.fetch_client_groups(
            auth, self.get_required_string("clientId"), select=self.get_optional_string("select"),
        )

    def update_client_groups(self, auth: AuthContext) -> Any:
        client_id = self.get_required_string("clientId")
        groups = self.get_json_parameter("groupsData", "Client Groups")
        return api.update_client_groups(auth, client_id, groups)

    def get_deletion_log(self, auth: AuthContext) -> Any:
        return api.fetch_client_deletion_log(auth, **self.list_options())

    def get_next_free_number(self, auth: AuthContext) -> Any:
        # range is sent whenever set, 0 included
        return api.fetch_next_free_client_number(
            auth,
            start=self.get_number_parameter("start", 1),
            range=self.get_number_parameter("range"),
        )


class TaxAuthorityResourceHandler(MasterDataResourceHandler):
    resource = "taxAuthority"
    operations = {"getAll": "get_all"}

    def get_all(self, auth: AuthContext) -> Any:
        return api.fetch_tax_authorities(auth, **self.select_filter())


class RelationshipResourceHandler(MasterDataResourceHandler):
    resource = "relationship"
    operations = {"getAll": "get_all", "getTypes": "get_types"}

    def get_all(self, auth: AuthContext) -> Any:
        return api.fetch_relationships(auth, **self.select_filter())

    def get_types(self, auth: AuthContext) -> Any:
        return api.fetch_relationship_types(auth, **self.select_filter())


class LegalFormResourceHandler(MasterDataResourceHandler):
    resource = "legalForm"
    operations = {"getAll": "get_all"}

    def get_all(self, auth: AuthContext) -> Any:
        return api.fetch_legal_forms(
            auth,
            select=self.get_optional_string("select"),
            national_right=self.get_optional_string("nationalRight"),
        )


class CorporateStructureResourceHandler(MasterDataResourceHandler):
    resource = "corporateStructure"
    operations = {"getAll": "get_all", "get": "get", "getEstablishment": "get_establishment"}

    def get_all(self, auth: AuthContext) -> Any:
        return api.fetch_corporate_structures(auth, **self.select_filter())

    def get(self, auth: AuthContext) -> Any:
        return api.fetch_corporate_structure(
            auth,
            self.get_required_string("organizationId"),
            select=self.get_optional_string("select"),
        )

    def get_establishment(self, auth: AuthContext) -> Any:
        return api.fetch_establishment(
            auth,
            self.get_required_string("organizationId"),
            self.get_required_string("establishmentId"),
            select=self.get_optional_string("select"),
        )


class EmployeeResourceHandler(MasterDataResourceHandler):
    resource = "employee"
    operations = {"getAll": "get_all", "get": "get", "create": "create", "update": "update"}

    def get_all(self, auth: AuthContext) -> Any:
        return api.fetch_employees(auth, **self.select_filter())

    def get(self, auth: AuthContext) -> Any:
        return api.fetch_employee(
            auth, self.get_required_string("employeeId"), select=self.get_optional_string("select"),
        )

    def create(self, auth: AuthContext) -> Any:
        return api.create_employee(auth, self.get_json_parameter("employeeData", "Employee Data"))

    def update(self, auth: AuthContext) -> Any:
        employee_id = self.get_required_string("employeeId")
        employee = self.get_json_parameter("employeeData", "Employee Data")
        return api.update_employee(auth, employee_id, employee)


class CountryCodeResourceHandler(MasterDataResourceHandler):
    resource = "countryCode"
    operations = {"getAll": "get_all"}

    def get_all(self, auth: AuthContext) -> Any:
        return api.fetch_country_codes(auth, **self.select_filter())


class ClientGroupTypeResourceHandler(MasterDataResourceHandler):
    resource = "clientGroupType"
    operations = {"getAll": "get_all", "get": "get", "create": "create", "update": "update"}

    def get_all(self, auth: AuthContext) -> Any:
        return api.fetch_client_group_types(auth, **self.select_filter())

    def get(self, auth: AuthContext) -> Any:
        return api.fetch_client_group_type(
            auth,
            self.get_required_string("clientGroupTypeId"),
            select=self.get_optional_string("select"),
        )

    def create(self, auth: AuthContext) -> Any:
        return api.create_client_group_type(
            auth, self.get_json_parameter("clientGroupTypeData", "Client Group Type Data"),
        )

    def update(self, auth: AuthContext) -> Any:
        type_id = self.get_required_string("clientGroupTypeId")
        data = self.get_json_parameter("clientGroupTypeData", "Client Group Type Data")
        return api.update_client_group_type(auth, type_id, data)


class ClientCategoryTypeResourceHandler(MasterDataResourceHandler):
    resource = "clientCategoryType"
    operations = {"getAll": "get_all", "get": "get", "create": "create", "update": "update"}

    def get_all(self, auth: AuthContext) -> Any:
        return api.fetch_client_category_types(auth, **self.select_filter())

    def get(self, auth: AuthContext) -> Any:
        return api.fetch_client_category_type(
            auth,
            self.get_required_string("clientCategoryTypeId"),
            select=self.get_optional_string("select"),
        )

    def create(self, auth: AuthContext) -> Any:
        return api.create_client_category_type(
            auth, self.get_json_parameter("clientCategoryTypeData", "Client Category Type Data"),
        )

    def update(self, auth: AuthContext) -> Any:
        type_id = self.get_required_string("clientCategoryTypeId")
        data = self.get_json_parameter("clientCategoryTypeData", "Client Category Type Data")
        return api.update_client_category_type(auth, type_id, data)


class BankResourceHandler(MasterDataResourceHandler):
    resource = "bank"
    operations = {"getAll": "get_all"}

    def get_all(self, auth: AuthContext) -> Any:
        return api.fetch_banks(auth, **self.select_filter())


class AreaOfResponsibilityResourceHandler(MasterDataResourceHandler):
    resource = "areaOfResponsibility"
    operations = {"getAll": "get_all"}

    def get_all(self, auth: AuthContext) -> Any:
        return api.fetch_areas_of_responsibility(auth, **self.select_filter())


class AddresseeResourceHandler(MasterDataResourceHandler):
    resource = "addressee"
    operations = {
        "getAll": "get_all",
        "get": "get",
        "create": "create",
        "update": "update",
        "getDeletionLog": "get_deletion_log",
    }

    def get_all(self, auth: AuthContext) -> Any:
        return api.fetch_addressees(auth, **self.list_options())

    def get(self, auth: AuthContext) -> Any:
        return api.fetch_addressee(
            auth,
            self.get_required_string("addresseeId"),
            select=self.get_optional_string("select"),
            expand=self.get_optional_string("expand"),
        )

    def create(self, auth: AuthContext) -> Any:
        addressee = self.get_json_parameter("addresseeData", "Addressee Data")
        return api.create_addressee(
            auth, addressee, national_right=self.get_optional_string("nationalRight"),
        )

    def update(self, auth: AuthContext) -> Any:
        addressee_id = self.get_required_string("addresseeId")
        addressee = self.get_json_parameter("addresseeData", "Addressee Data")
        return api.update_addressee(auth, addressee_id, addressee)

    def get_deletion_log(self, auth: AuthContext) -> Any:
        return api.fetch_addressees_deletion_log(auth, **self.list_options())


RESOURCE_HANDLERS = {
    handler.resource: handler
    for handler in (
        AddresseeResourceHandler,
        AreaOfResponsibilityResourceHandler,
        BankResourceHandler,
        ClientResourceHandler,
        ClientCategoryTypeResourceHandler,
        ClientGroupTypeResourceHandler,
        CorporateStructureResourceHandler,
        CountryCodeResourceHandler,
        EmployeeResourceHandler,
        LegalFormResourceHandler,
        RelationshipResourceHandler,
        TaxAuthorityResourceHandler,
    )
}
