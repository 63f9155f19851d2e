from django.apps import apps
from django.core.management.base import BaseCommand, CommandError

from sluggable.models import SluggableModel


class Command(BaseCommand):
    help = 'Fill in (or, with --force, regenerate) slugs for existing rows'

    def add_arguments(self, parser):
        parser.add_argument('models', nargs='+', metavar='app_label.Model',
                            help='Sluggable models to process')
        parser.add_argument('--force', action='store_true',
                            help='Regenerate slugs even where one is set')

    def get_model(self, label):
        try: model = apps.get_model(label)
        except (LookupError, ValueError) as e:
            raise CommandError(f'Unknown model "{label}".') from e
        
        if not issubclass(model, SluggableModel):
            raise CommandError(f'{model._meta.label} is not sluggable.')
        return model

    def handle(self, *args, **options):
        models = [ self.get_model(label) for label in options['models'] ]
        
        for model in models:
            save_to = model.get_sluggable_config().save_to
            changed, total = 0, 0
            for instance in model._default_manager.order_by('pk'):
                total += 1
                old_slug = getattr(instance, save_to)
                instance.sluggify(force=options['force'])
                if getattr(instance, save_to) == old_slug: continue
                
                instance.save(update_fields=[save_to])
                changed += 1
            
            msg = f'{model._meta.label}: updated {changed} of {total} slugs.'
            self.stdout.write(self.style.SUCCESS(msg))
