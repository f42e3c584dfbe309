"""Menu service."""

from application.shared.resource_service import TenantResourceService
from domain.menu.entity import Menu


class MenuService(TenantResourceService[Menu, Menu]):
    resource_name = "Menu"
