"""Menu item service."""

from typing import List, Sequence

from application.enrichment.service import EnrichmentService
from application.enrichment.views import MenuItemView
from application.membership.service import MembershipService
from application.shared.resource_service import TenantResourceService
from domain.menu_item.entity import MenuItem
from infrastructure.persistence.repositories.menu_item import MenuItemRepository


class MenuItemService(TenantResourceService[MenuItem, MenuItemView]):
    """Menu items are returned with ingredient names and their allergy rollup."""

    resource_name = "MenuItem"

    def __init__(
        self,
        repository: MenuItemRepository,
        membership: MembershipService,
        enrichment: EnrichmentService,
    ) -> None:
        super().__init__(repository, membership)
        self.enrichment = enrichment

    async def present(self, entities: Sequence[MenuItem]) -> List[MenuItemView]:
        return await self.enrichment.enrich_menu_items(entities)
