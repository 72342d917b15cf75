"""
URL configuration for the wedding planner backend.

Every app mounts its routes under ``/api/``; paths carry no trailing slash.
"""
from django.contrib import admin
from django.urls import path, include

admin.site.site_header = "Wedding Planner Admin Panel"
admin.site.site_title = "Wedding Planner Admin Portal"
admin.site.index_title = "Welcome to the Wedding Planner Admin Panel"

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/', include('backend.core.urls')),
    path('api/', include('backend.guests.urls')),
    path('api/', include('backend.vendors.urls')),
    path('api/', include('backend.notes.urls')),
    path('api/', include('backend.planning.urls')),
    path('api/', include('backend.budget.urls')),
]
