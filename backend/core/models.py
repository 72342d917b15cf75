import uuid

from django.conf import settings
from django.contrib.auth.models import AbstractUser
from django.db import models


def generate_id():
    return str(uuid.uuid4())


class User(AbstractUser):
    """Account that owns every planner record"""
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'users'


class OwnedModel(models.Model):
    """
    Base for every record scoped to a single user.

    Ids are opaque strings so that lookups with arbitrary client-supplied
    values never raise; ownership is always checked on the owner column.
    """
    id = models.CharField(primary_key=True, max_length=36, default=generate_id, editable=False)
    owner = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='+')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        abstract = True
