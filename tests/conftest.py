import pytest


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import caches
    
    for cache in caches.all(): cache.clear()
    yield

@pytest.fixture
def sluggable_options(monkeypatch):
    def set_options(model, **options):
        merged = dict(model.sluggable)
        merged.update(options)
        monkeypatch.setattr(model, 'sluggable', merged)
    return set_options
