import pytest

from sluggable.config import DEFAULTS, SluggableConfig, get_config, \
    DefaultMethod, CustomMethod, NoReserved, ReservedList, ComputedReserved
from sluggable.exceptions import ConfigurationError


def test_defaults():
    config = SluggableConfig()
    
    assert config.build_from is None
    assert config.save_to == 'slug'
    assert config.separator == '-'
    assert config.unique
    assert not config.use_cache
    assert not config.on_update
    assert isinstance(config.slug_method, DefaultMethod)
    assert isinstance(config.reserved_rule, NoReserved)

def test_merge_is_shallow_override():
    defaults = {'separator': '_', 'unique': False, 'max_length': 20}
    config = SluggableConfig.merge(defaults, {'separator': '.'})
    
    assert config.separator == '.'
    assert config.unique is False
    assert config.max_length == 20
    assert config['on_update'] == DEFAULTS['on_update']

def test_settings_defaults_then_model_overrides(settings):
    settings.SLUGGABLE = {'separator': '_', 'on_update': True}
    config = get_config({'on_update': False})
    
    assert config.separator == '_'
    assert config.on_update is False

def test_build_from_normalized():
    assert SluggableConfig(build_from='title').build_from == ('title',)
    assert SluggableConfig(build_from=['a', 'b']).build_from == ('a', 'b')

def test_unknown_option():
    with pytest.raises(ConfigurationError, match='build_form'):
        SluggableConfig(build_form='title')

def test_empty_save_to():
    with pytest.raises(ConfigurationError):
        SluggableConfig(save_to='')

def test_custom_method():
    config = SluggableConfig(method=lambda source, sep: source[::-1])
    
    assert isinstance(config.slug_method, CustomMethod)
    assert config.slug_method('abc', '-') == 'cba'

def test_method_by_import_path():
    config = SluggableConfig(method='sluggable.utils.default_slugify')
    assert config.slug_method('Hello There', '+') == 'hello+there'

def test_method_bad_import_path():
    config = SluggableConfig(method='sluggable.utils.does_not_exist')
    with pytest.raises(ConfigurationError): config.slug_method

def test_method_not_callable():
    config = SluggableConfig(method=42)
    with pytest.raises(ConfigurationError, match='not callable'):
        config.slug_method

def test_reserved_variants():
    assert isinstance(SluggableConfig(reserved=['new']).reserved_rule,
                      ReservedList)
    rule = SluggableConfig(reserved=lambda record: ['edit']).reserved_rule
    assert isinstance(rule, ComputedReserved)
    assert rule.words(None) == ['edit']

def test_reserved_bad_value():
    config = SluggableConfig(reserved='new')
    with pytest.raises(ConfigurationError): config.reserved_rule

def test_computed_reserved_bad_result():
    rule = SluggableConfig(reserved=lambda record: 'new').reserved_rule
    with pytest.raises(ConfigurationError): rule.words(None)
