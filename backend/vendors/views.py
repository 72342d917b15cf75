from backend.core.repository import OwnedRepository
from backend.core.resources import owned_resource_views
from .filters import VendorFilter
from .models import Vendor
from .serializers import VendorSerializer

vendor_repository = OwnedRepository(Vendor, ordering=['created_at'])

vendor_list_create, vendor_detail = owned_resource_views(
    'Vendor', vendor_repository, VendorSerializer, filterset_class=VendorFilter,
)
