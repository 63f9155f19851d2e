from django.core.management import call_command
from django.core.management.base import CommandError
from io import StringIO
import pytest

from testapp.models import Post, Book

pytestmark = pytest.mark.django_db


def test_fills_missing_slugs():
    Post.objects.create(title='First')
    Post.objects.create(title='Second')
    Post.objects.create(title='Third')
    Post.objects.exclude(title='Third').update(slug='')
    
    out = StringIO()
    call_command('sluggify', 'testapp.Post', stdout=out)
    
    assert 'updated 2 of 3' in out.getvalue()
    slugs = Post.objects.order_by('pk').values_list('slug', flat=True)
    assert list(slugs) == ['first', 'second', 'third']

def test_force_regenerates():
    Post.objects.create(title='Old Title')
    Post.objects.update(title='New Title')
    
    call_command('sluggify', 'testapp.Post', stdout=StringIO())
    assert Post.objects.get().slug == 'old-title'
    
    call_command('sluggify', 'testapp.Post', '--force', stdout=StringIO())
    assert Post.objects.get().slug == 'new-title'

def test_several_models():
    Book.objects.create(title='Emma', author='Jane Austen')
    Book.objects.update(handle='')
    
    out = StringIO()
    call_command('sluggify', 'testapp.Post', 'testapp.Book', stdout=out)
    assert 'testapp.Post: updated 0 of 0' in out.getvalue()
    assert Book.objects.get().handle == 'emma-jane-austen'

@pytest.mark.parametrize('label', [
    'testapp.Nope', 'nodots', 'contenttypes.ContentType',
])
def test_bad_model(label):
    with pytest.raises(CommandError):
        call_command('sluggify', label, stdout=StringIO())
