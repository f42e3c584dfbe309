"""Equipment service.

Equipment is a global catalog: reads are open, writes are admin-only.
"""

from application.shared.resource_service import GlobalResourceService
from domain.equipment.entity import Equipment


class EquipmentService(GlobalResourceService[Equipment, Equipment]):
    resource_name = "Equipment"
    admin_only_writes = True
