from cms_sites.services import (
    provisioning_service,
    site_service,
)

__all__ = [
    'provisioning_service',
    'site_service',
]
