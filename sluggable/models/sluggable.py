__all__ = ["SluggableModel"]

from django.core.cache import caches
from django.core.cache.backends.base import DEFAULT_TIMEOUT
from django.core.exceptions import FieldDoesNotExist
from django.db import models
import hashlib
import logging

from ..config import get_config
from ..exceptions import ConfigurationError
from ..query import SluggableManager, slug_filter, id_or_slug_filter
from ..utils import is_identifier, parse_increment


CACHE_PREFIX = 'sluggable:'


def cache_key(slug):
    # memcached rejects keys over 250 characters or containing spaces
    return CACHE_PREFIX + hashlib.md5(slug.encode()).hexdigest()


class SluggableModel(models.Model):
    """
    Abstract mixin that keeps a slug field filled in.

    Subclasses override the `sluggable` dict to change any of the options in
    `sluggable.config.DEFAULTS`. The slug is assigned by the pre_save
    receiver in `sluggable.signals`, or explicitly with `sluggify()`.
    """

    class Meta:
        abstract = True

    sluggable = {}
    sluggable_auto = True # set False to only slug on explicit sluggify()
    logger = logging.getLogger('sluggable')

    objects = SluggableManager()

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # value of the slug field as last read from or written to the db
        self._loaded_slug = None

    @classmethod
    def from_db(cls, db, field_names, values):
        instance = super().from_db(db, field_names, values)
        instance.sync_loaded_slug()
        return instance

    def refresh_from_db(self, using=None, fields=None, **kwargs):
        super().refresh_from_db(using=using, fields=fields, **kwargs)

        field = self._slug_field()
        if fields is None or field.name in fields or field.attname in fields:
            self.sync_loaded_slug()

    @classmethod
    def get_sluggable_config(cls):
        config = get_config(cls.sluggable)
        try: cls._meta.get_field(config.save_to)
        except FieldDoesNotExist as e:
            msg = f'Sluggable save_to "{config.save_to}" is not a field ' \
                  f'of {cls._meta.label}.'
            raise ConfigurationError(msg) from e
        return config

    @classmethod
    def _slug_field(cls, config=None):
        if config is None: config = cls.get_sluggable_config()
        return cls._meta.get_field(config.save_to)

    def sync_loaded_slug(self, config=None):
        field = self._slug_field(config)
        if field.attname in self.get_deferred_fields(): return

        self._loaded_slug = getattr(self, field.attname)

    def slug_is_dirty(self, config):
        value = getattr(self, config.save_to)
        # nothing was loaded for a new record, so any value was set by hand
        if self._state.adding: return bool(value)

        return value != self._loaded_slug

    def needs_slugging(self, config):
        if not getattr(self, config.save_to): return True
        if self.slug_is_dirty(config): return False

        return self._state.adding or bool(config.on_update)

    def get_slug_source(self, config):
        if config.build_from is None: return str(self)

        values = []
        for name in config.build_from:
            value = getattr(self, name, None)
            values.append('' if value is None else str(value))
        return ' '.join(values)

    def generate_slug(self, source, config):
        slug = config.slug_method(source, config.separator)

        max_length = config.max_length
        if isinstance(slug, str) and max_length and max_length > 0:
            # truncated before the reserved and uniqueness checks
            slug = slug[:max_length]
        return slug

    def validate_slug(self, slug, config):
        words = config.reserved_rule.words(self)
        if words is None: return slug

        if slug in words: return slug + config.separator + '1'
        return slug

    def make_slug_unique(self, slug, config):
        if not config.unique: return slug

        if config.use_cache: return self._cached_unique_slug(slug, config)

        existing = self.get_existing_slugs(slug, config)
        if not existing or slug not in existing.values(): return slug
        # re-saving a record doesn't collide with itself
        if self.pk is not None and existing.get(self.pk) == slug: return slug

        prefix = len(slug + config.separator)
        increment = max(parse_increment(value[prefix:])
                        for value in existing.values()) + 1

        self.logger.debug('Slug "%s" is taken on %s; using suffix %d.',
                          slug, self._meta.label, increment)
        return f'{slug}{config.separator}{increment}'

    def _cached_unique_slug(self, slug, config):
        # only as good as the cache: evictions or separate cache instances can
        # hand out a slug that is already stored
        cache = caches[config.cache_alias]
        timeout = config.use_cache
        if timeout is True: timeout = DEFAULT_TIMEOUT

        key = cache_key(slug)
        if cache.add(key, 0, timeout): return slug

        try: increment = cache.incr(key)
        except ValueError: # expired between add and incr
            cache.add(key, 0, timeout)
            return slug
        cache.touch(key, timeout)

        self.logger.debug('Slug "%s" counter at %d in cache "%s".',
                          slug, increment, config.cache_alias)
        return f'{slug}{config.separator}{increment}'

    def get_existing_slugs(self, slug, config):
        cls = self.__class__
        if config.include_trashed and getattr(cls, 'supports_soft_delete',
                                              False):
            queryset = cls.with_trashed()
        else: queryset = cls._default_manager.all()

        queryset = queryset.filter(**{config.save_to + '__startswith': slug})
        return dict(queryset.values_list('pk', config.save_to))

    def set_slug(self, slug, config):
        setattr(self, config.save_to, slug)
        self.logger.debug('Set %s.%s to "%s".', self._meta.label,
                          config.save_to, slug)

    def get_slug(self):
        return getattr(self, self.get_sluggable_config().save_to)

    def sluggify(self, force=False):
        config = self.get_sluggable_config()

        if force or self.needs_slugging(config):
            source = self.get_slug_source(config)
            slug = self.generate_slug(source, config)

            slug = self.validate_slug(slug, config)
            slug = self.make_slug_unique(slug, config)

            self.set_slug(slug, config)

        return self

    def resluggify(self):
        return self.sluggify(force=True)

    @classmethod
    def scope_where_slug(cls, queryset, slug):
        return slug_filter(queryset, cls.get_sluggable_config().save_to, slug)

    @classmethod
    def scope_where_id_or_slug(cls, queryset, value):
        save_to = cls.get_sluggable_config().save_to
        return id_or_slug_filter(queryset, save_to, value)

    @classmethod
    def get_by_slug(cls, slug):
        return cls.scope_where_slug(cls._default_manager.all(), slug)

    @classmethod
    def find_by_slug(cls, slug):
        return cls.get_by_slug(slug).first()

    @classmethod
    def find_by_slug_or_fail(cls, slug):
        instance = cls.find_by_slug(slug)
        if instance is None:
            msg = f'No {cls._meta.object_name} with slug "{slug}".'
            raise cls.DoesNotExist(msg)
        return instance

    @classmethod
    def find_by_slug_or_id(cls, value):
        if is_identifier(value):
            return cls._default_manager.filter(pk=int(value)).first()
        return cls.find_by_slug(value)

    @classmethod
    def find_by_slug_or_id_or_fail(cls, value):
        if is_identifier(value): return cls._default_manager.get(pk=int(value))
        return cls.find_by_slug_or_fail(value)
