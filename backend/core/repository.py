"""
Owner-scoped storage shared by every planner entity.

A repository wraps one model and exposes list/create/update/delete calls that
always filter on the owning user. Missing or foreign records are reported
with ``None``/``False``; only unexpected database faults raise.
"""
import logging

from django.db import transaction
from django.utils import timezone

logger = logging.getLogger(__name__)


class OwnedRepository:
    """CRUD access to one ``OwnedModel`` subclass, filtered by owner"""

    def __init__(self, model, ordering=('created_at',), touch_field=None):
        self.model = model
        self.ordering = tuple(ordering)
        # Timestamp refreshed on every update unless the caller supplies it
        self.touch_field = touch_field

    @property
    def label(self):
        return self.model.__name__

    def _owned(self, owner):
        return self.model.objects.filter(owner=owner)

    def list_for_owner(self, owner):
        return self._owned(owner).order_by(*self.ordering)

    def get_for_owner(self, pk, owner):
        return self._owned(owner).filter(pk=pk).first()

    def create(self, owner, data):
        record = self.model(owner=owner, **data)
        record.save(force_insert=True)
        logger.debug(f"Created {self.label} {record.pk} for user {owner.pk}")
        return record

    def create_many(self, owner, rows):
        with transaction.atomic():
            records = [self.create(owner, row) for row in rows]
        logger.debug(f"Created {len(records)} {self.label} records for user {owner.pk}")
        return records

    def update(self, pk, owner, data):
        with transaction.atomic():
            record = self._owned(owner).select_for_update().filter(pk=pk).first()
            if record is None:
                return None
            changed = list(data)
            for field, value in data.items():
                setattr(record, field, value)
            if self.touch_field and self.touch_field not in data:
                setattr(record, self.touch_field, timezone.now())
                changed.append(self.touch_field)
            if changed:
                record.save(update_fields=changed)
        return record

    def delete(self, pk, owner):
        # Related rows declared with on_delete=CASCADE go in the same transaction
        with transaction.atomic():
            record = self._owned(owner).select_for_update().filter(pk=pk).first()
            if record is None:
                return False
            record.delete()
        return True


class SingletonRepository:
    """Storage for a model holding at most one row per owner"""

    def __init__(self, model, value_field, stamp_field='updated_at'):
        self.model = model
        self.value_field = value_field
        self.stamp_field = stamp_field

    def get(self, owner):
        return self.model.objects.filter(owner=owner).first()

    def upsert(self, owner, value):
        with transaction.atomic():
            record, created = self.model.objects.update_or_create(
                owner=owner,
                defaults={self.value_field: value, self.stamp_field: timezone.now()},
            )
        logger.debug(f"{'Created' if created else 'Updated'} {self.model.__name__} for user {owner.pk}")
        return record
