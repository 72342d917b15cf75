from django.urls import path
from .views import (
    milestone_list_create, milestone_detail,
    planning_task_list_create, planning_task_detail,
    payment_list_create, payment_detail
)

urlpatterns = [
    # Milestone endpoints
    path('milestones', milestone_list_create, name='milestone-list-create'),
    path('milestones/<str:pk>', milestone_detail, name='milestone-detail'),

    # Planning task endpoints
    path('planning-tasks', planning_task_list_create, name='planning-task-list-create'),
    path('planning-tasks/<str:pk>', planning_task_detail, name='planning-task-detail'),

    # Payment timeline endpoints
    path('payments', payment_list_create, name='payment-list-create'),
    path('payments/<str:pk>', payment_detail, name='payment-detail'),
]
