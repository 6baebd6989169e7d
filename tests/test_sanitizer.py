from utils.sanitizer import (
    sanitize_ingredient,
    sanitize_instructions,
    sanitize_recipe_title,
    sanitize_tags,
    sanitize_text,
    sanitize_url,
)


def test_sanitize_text_escapes_html():
    assert sanitize_text('<script>alert(1)</script>') == '&lt;script&gt;alert(1)&lt;/script&gt;'
    assert sanitize_text(None) == ''
    assert sanitize_text('abcdef', max_length=3) == 'abc...'


def test_sanitize_url():
    assert sanitize_url('https://example.com/recipe') == 'https://example.com/recipe'
    assert sanitize_url('javascript:alert(1)') == ''
    assert sanitize_url('data:text/html;base64,xyz') == ''
    assert sanitize_url('ftp://example.com') == ''
    assert sanitize_url(None) == ''


def test_sanitize_recipe_title():
    assert sanitize_recipe_title('  Mac   &  Cheese ') == 'Mac &amp; Cheese'
    assert sanitize_recipe_title('\x00\x01') == ''
    assert sanitize_recipe_title(None) == ''
    assert len(sanitize_recipe_title('x' * 500)) == 200


def test_sanitize_instructions_accepts_text_or_list():
    assert sanitize_instructions('Boil water\n\nAdd <pasta>') == ['Boil water', 'Add &lt;pasta&gt;']
    assert sanitize_instructions(['  Stir ', None, '']) == ['Stir']
    assert sanitize_instructions(None) == []


def test_sanitize_ingredient():
    assert sanitize_ingredient({'name': 'Flour', 'amount': 2, 'unit': 'cup'}) == {
        'item': 'Flour', 'amount': 2, 'unit': 'cup', 'notes': None,
    }
    assert sanitize_ingredient({'item': '<b>salt</b>', 'amount': ' 1/2 '})['item'] == '&lt;b&gt;salt&lt;/b&gt;'
    assert sanitize_ingredient({'item': 'salt', 'amount': ' 1/2 '})['amount'] == '1/2'
    assert sanitize_ingredient({'amount': '1'}) is None
    assert sanitize_ingredient('flour') is None


def test_sanitize_tags():
    assert sanitize_tags('vegan, gluten-free, vegan') == ['vegan', 'gluten-free']
    assert sanitize_tags(['', 'keto']) == ['keto']
    assert sanitize_tags(None) == []
