from django.db import models

from .utils import is_identifier


class SluggableQuerySet(models.QuerySet):
    def where_slug(self, slug):
        return self.model.scope_where_slug(self, slug)

    def where_id_or_slug(self, value):
        return self.model.scope_where_id_or_slug(self, value)


class SluggableManager(models.Manager.from_queryset(SluggableQuerySet)):
    pass


def slug_filter(queryset, save_to, slug):
    return queryset.filter(**{save_to: slug})

def id_or_slug_filter(queryset, save_to, value):
    if is_identifier(value): return queryset.filter(pk=int(value))
    return slug_filter(queryset, save_to, value)
