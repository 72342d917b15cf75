from django.urls import path
from .views import current_user, register, login_view, logout_view

urlpatterns = [
    # Session endpoints
    path('user', current_user, name='current-user'),
    path('register', register, name='register'),
    path('login', login_view, name='login'),
    path('logout', logout_view, name='logout'),
]
