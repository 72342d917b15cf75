from backend.core.repository import OwnedRepository
from backend.core.resources import owned_resource_views
from .filters import PlanningTaskFilter
from .models import Milestone, PlanningTask, Payment
from .serializers import MilestoneSerializer, PlanningTaskSerializer, PaymentSerializer

milestone_repository = OwnedRepository(Milestone, ordering=['sort_order', 'created_at'])
planning_task_repository = OwnedRepository(PlanningTask, ordering=['created_at'])
payment_repository = OwnedRepository(Payment, ordering=['sort_order', 'created_at'])

milestone_list_create, milestone_detail = owned_resource_views(
    'Milestone', milestone_repository, MilestoneSerializer, allow_bulk=True,
)
planning_task_list_create, planning_task_detail = owned_resource_views(
    'Planning task', planning_task_repository, PlanningTaskSerializer, filterset_class=PlanningTaskFilter,
)
payment_list_create, payment_detail = owned_resource_views(
    'Payment', payment_repository, PaymentSerializer, allow_bulk=True,
)
