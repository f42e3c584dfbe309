"""Menu section service."""

from application.shared.resource_service import TenantResourceService
from domain.menu_section.entity import MenuSection


class MenuSectionService(TenantResourceService[MenuSection, MenuSection]):
    resource_name = "MenuSection"
