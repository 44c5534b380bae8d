"""
Contact Service.
"""

from tenantcrm.backend.models.contact import Contact
from tenantcrm.backend.repositories.account import AccountRepository
from tenantcrm.backend.repositories.contact import ContactRepository
from tenantcrm.backend.services.base import EntityService


class ContactService(EntityService[Contact]):
    entity = "contact"
    repository_class = ContactRepository
    required_fields = ("name",)
    reference_fields = {"account_id": AccountRepository}
