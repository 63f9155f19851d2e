from django.utils.text import slugify
import re


increment_pattern = re.compile(r'\d+')
identifier_pattern = re.compile(r'[0-9]+')

# largest value a BigAutoField primary key can hold
MAX_IDENTIFIER = 2**63 - 1


def default_slugify(source, separator='-'):
    # django's slugify keeps underscores; fold them into the separator too
    slug = slugify(str(source).replace('_', ' '))
    return separator.join(token for token in slug.split('-') if token)

def parse_increment(value):
    m = increment_pattern.match(value)
    if not m: return 0
    return int(m.group())

def is_identifier(value):
    if isinstance(value, bool): return False
    if isinstance(value, int): return 0 < value <= MAX_IDENTIFIER
    if not isinstance(value, str): return False
    
    if not identifier_pattern.fullmatch(value): return False
    return 0 < int(value) <= MAX_IDENTIFIER
