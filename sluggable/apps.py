from django.apps import AppConfig


class SluggableAppConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'sluggable'
    verbose_name = 'Sluggable'
    
    def ready(self):
        from . import signals
