from django.conf import settings
from django.core.cache import DEFAULT_CACHE_ALIAS
from django.utils.functional import cached_property
from django.utils.module_loading import import_string

from .exceptions import ConfigurationError
from .utils import default_slugify

__all__ = ["DEFAULTS", "SluggableConfig", "get_config", "DefaultMethod",
           "CustomMethod", "NoReserved", "ReservedList", "ComputedReserved"]


DEFAULTS = {
    'build_from': None,
    'save_to': 'slug',
    'method': None,
    'separator': '-',
    'max_length': None,
    'unique': True,
    'reserved': None,
    'use_cache': False,
    'cache_alias': DEFAULT_CACHE_ALIAS,
    'include_trashed': False,
    'on_update': False,
}


class DefaultMethod:
    def __call__(self, source, separator):
        return default_slugify(source, separator)

    def __repr__(self):
        return 'DefaultMethod()'


class CustomMethod:
    def __init__(self, function):
        self.function = function

    def __call__(self, source, separator):
        return self.function(source, separator)

    def __repr__(self):
        return f'CustomMethod({self.function!r})'


class NoReserved:
    def words(self, record):
        return None


class ReservedList:
    def __init__(self, words):
        self.reserved = tuple(words)

    def words(self, record):
        return self.reserved


class ComputedReserved:
    def __init__(self, function):
        self.function = function

    def words(self, record):
        words = self.function(record)
        if words is None: return None
        if isinstance(words, (list, tuple, set, frozenset)): return words

        msg = 'Sluggable reserved callable must return None or a list, ' \
              f'not {type(words).__name__}.'
        raise ConfigurationError(msg)


def method_variant(method):
    if method is None: return DefaultMethod()
    if isinstance(method, str):
        try: method = import_string(method)
        except ImportError as e:
            raise ConfigurationError(f'Cannot import sluggable method '
                                     f'"{method}".') from e
    if callable(method): return CustomMethod(method)

    raise ConfigurationError('Sluggable method is not callable or None.')

def reserved_variant(reserved):
    if reserved is None: return NoReserved()
    if isinstance(reserved, (list, tuple, set, frozenset)):
        return ReservedList(reserved)
    if callable(reserved): return ComputedReserved(reserved)

    raise ConfigurationError('Sluggable reserved is not None, a list, or a '
                             'callable that returns None or a list.')


class SluggableConfig:
    """
    Resolved options for one sluggify call.

    Built by a shallow merge of DEFAULTS, the SLUGGABLE setting, and the
    model's own `sluggable` dict, in that order. The `method` and `reserved`
    options are normalized into variant objects (`slug_method`,
    `reserved_rule`) the first time they are used, so a bad value only
    fails the step that needs it.
    """

    def __init__(self, **options):
        unknown = set(options) - set(DEFAULTS)
        if unknown:
            names = ', '.join(sorted(unknown))
            raise ConfigurationError(f'Unknown sluggable options: {names}.')

        values = dict(DEFAULTS)
        values.update(options)
        self.options = values

        build_from = values['build_from']
        if isinstance(build_from, str): build_from = (build_from,)
        elif build_from is not None: build_from = tuple(build_from)
        self.build_from = build_from

        self.save_to = values['save_to']
        if not self.save_to or not isinstance(self.save_to, str):
            raise ConfigurationError('Sluggable save_to must name a field.')

        self.separator = values['separator']
        self.max_length = values['max_length']
        self.unique = values['unique']
        self.use_cache = values['use_cache']
        self.cache_alias = values['cache_alias']
        self.include_trashed = values['include_trashed']
        self.on_update = values['on_update']

        self.method = values['method']
        self.reserved = values['reserved']

    @cached_property
    def slug_method(self):
        return method_variant(self.method)

    @cached_property
    def reserved_rule(self):
        return reserved_variant(self.reserved)

    @classmethod
    def merge(cls, defaults, overrides):
        options = dict(defaults or {})
        options.update(overrides or {})
        return cls(**options)

    def __getitem__(self, key):
        return self.options[key]

    def __repr__(self):
        return f'SluggableConfig({self.options!r})'


def get_config(overrides=None):
    return SluggableConfig.merge(getattr(settings, 'SLUGGABLE', {}), overrides)
