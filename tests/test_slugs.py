from services.slugs import generate_unique_slug, slugify


def test_slugify():
    assert slugify('Grandma\'s Apple Pie!') == 'grandmas-apple-pie'
    assert slugify('  Spicy   Thai_Curry -- v2 ') == 'spicy-thai-curry-v2'
    assert slugify('---') == ''


def test_unique_slug_without_collision():
    assert generate_unique_slug('Banana Bread', ['pancakes']) == 'banana-bread'


def test_unique_slug_appends_counter():
    existing = ['banana-bread', 'banana-bread-2', 'banana-bread-3']
    assert generate_unique_slug('Banana Bread', existing) == 'banana-bread-4'


def test_unique_slug_for_untitled_text():
    assert generate_unique_slug('!!!') == 'recipe'


def test_slugify_keeps_only_ascii_word_characters():
    assert slugify('Crème brûlée') == 'crme-brle'
    assert generate_unique_slug('日本') == 'recipe'
