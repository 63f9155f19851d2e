from django.db.models.signals import pre_save, post_save
from django.dispatch import receiver

from .models import SluggableModel


def saves_slug(sender, update_fields):
    if update_fields is None: return True
    return sender.get_sluggable_config().save_to in update_fields

@receiver(pre_save)
def sluggable_pre_save(sender, instance, raw, update_fields=None, **kwargs):
    if raw or not isinstance(instance, SluggableModel): return
    if not sender.sluggable_auto: return
    
    # a partial save that leaves out the slug couldn't store a new one anyway
    if not saves_slug(sender, update_fields): return
    
    instance.sluggify()

@receiver(post_save)
def sluggable_post_save(sender, instance, update_fields=None, **kwargs):
    if not isinstance(instance, SluggableModel): return
    
    if saves_slug(sender, update_fields): instance.sync_loaded_slug()
