"""Use cases for the administration ticket workflow."""

from .catalog import list_city_services, list_statuses
from .update_ticket import update_ticket

__all__ = ["list_city_services", "list_statuses", "update_ticket"]
