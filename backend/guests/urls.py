from django.urls import path
from .views import guest_list_create, guest_detail, guest_import, guest_summary

urlpatterns = [
    path('guests', guest_list_create, name='guest-list-create'),
    path('guests/import', guest_import, name='guest-import'),
    path('guests/summary', guest_summary, name='guest-summary'),
    path('guests/<str:pk>', guest_detail, name='guest-detail'),
]
