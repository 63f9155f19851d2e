from django.core.exceptions import ImproperlyConfigured, ObjectDoesNotExist

__all__ = ["ConfigurationError", "NotFoundError"]


class ConfigurationError(ImproperlyConfigured):
    pass


# Model.DoesNotExist subclasses this, so callers can catch either one
NotFoundError = ObjectDoesNotExist
