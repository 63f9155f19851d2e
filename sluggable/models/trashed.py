__all__ = ["SoftDeleteModel", "SoftDeleteManager", "SoftDeleteQuerySet"]

from django.db import models
from django.utils import timezone

from ..query import SluggableQuerySet


class SoftDeleteQuerySet(SluggableQuerySet):
    def delete(self):
        return self.update(deleted=timezone.now())

    def force_delete(self):
        return super().delete()

    def restore(self):
        return self.update(deleted=None)


class SoftDeleteManager(models.Manager.from_queryset(SoftDeleteQuerySet)):
    def __init__(self, *args, with_trashed=False, **kwargs):
        super().__init__(*args, **kwargs)
        self.with_trashed = with_trashed

    def get_queryset(self):
        queryset = super().get_queryset()
        if self.with_trashed: return queryset
        return queryset.filter(deleted__isnull=True)


class SoftDeleteModel(models.Model):
    class Meta:
        abstract = True

    supports_soft_delete = True

    deleted = models.DateTimeField(null=True, blank=True, editable=False)

    objects = SoftDeleteManager()
    all_objects = SoftDeleteManager(with_trashed=True)

    @classmethod
    def with_trashed(cls):
        return cls.all_objects.all()

    @property
    def trashed(self):
        return self.deleted is not None

    def delete(self, using=None, keep_parents=False):
        self.deleted = timezone.now()
        self.save(using=using, update_fields=['deleted'])

    def force_delete(self, *args, **kwargs):
        return super().delete(*args, **kwargs)

    def restore(self):
        self.deleted = None
        self.save(update_fields=['deleted'])
