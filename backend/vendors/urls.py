from django.urls import path
from .views import vendor_list_create, vendor_detail

urlpatterns = [
    path('vendors', vendor_list_create, name='vendor-list-create'),
    path('vendors/<str:pk>', vendor_detail, name='vendor-detail'),
]
