"""
Tests for the infinity_utils.strings file.
"""

from infinity_utils.strings import escape, replace_all, unescape, uuid
import string
import pytest


def test_uuid():
    ids = [uuid() for _ in range(100)]
    assert all(len(i) == 32 for i in ids)
    assert all(c in string.ascii_letters + string.digits for i in ids for c in i)
    assert len(set(ids)) == 100

    assert len(uuid(8)) == 8
    assert len(uuid(0)) == 32

    with pytest.raises(ValueError):
        uuid(-1)
    with pytest.raises(TypeError):
        uuid(True)
    with pytest.raises(TypeError):
        uuid(False)
    with pytest.raises(TypeError):
        uuid(8.0)


def test_replace_all():
    assert replace_all('a.b.c', '.', '/') == 'a/b/c'
    assert replace_all('aaa', 'aa', 'a') == 'a'
    assert replace_all('abc', 'x', 'y') == 'abc'
    assert replace_all('', 'x', 'y') == ''

    # Nothing to replace, so a replacement containing the searched text is fine
    assert replace_all('abc', 'x', 'xx') == 'abc'

    with pytest.raises(ValueError):
        replace_all('abc', 'a', 'ab')
    with pytest.raises(ValueError):
        replace_all('abc', '', 'x')


def test_escape():
    assert escape('<a href="x">\'&\'</a>') == '&lt;a href=&quot;x&quot;&gt;&#039;&amp;&#039;&lt;/a&gt;'
    assert escape('plain') == 'plain'
    assert escape('&lt;') == '&amp;lt;'


def test_unescape():
    assert unescape('&lt;a href=&quot;x&quot;&gt;&#039;&amp;&#039;&lt;/a&gt;') == '<a href="x">\'&\'</a>'
    assert unescape('&amp;lt;') == '&lt;'

    # Only unescaped once
    assert unescape('&amp;amp;') == '&amp;'
    assert unescape('plain') == 'plain'

    for s in ['', '<>', 'a & b', '"quoted" \'single\'', '&amp;']:
        assert unescape(escape(s)) == s
