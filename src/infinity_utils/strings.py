"""
Small string helpers: random ids, repeated replacement and html escaping.
"""

import random
import string
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from typing import Optional


_UUID_CHARS = string.digits + string.ascii_uppercase + string.ascii_lowercase
_DEFAULT_UUID_LEN = 32

# Order matters: '&' must be escaped first and unescaped last
_HTML_ESCAPES = (
    ('&', '&amp;'),
    ('<', '&lt;'),
    ('>', '&gt;'),
    ('"', '&quot;'),
    ("'", '&#039;'),
)


def uuid(length: 'Optional[int]' = None) -> 'str':
    """Generates a random alphanumeric id

    NOTE: this is not a RFC 4122 uuid, and it is not suited for anything security related. Uniqueness only becomes
    likely for long enough ids.

    Args:
        length (Optional[int]): the number of characters, defaults to 32 if None or 0
    """
    if isinstance(length, bool) or (length is not None and not isinstance(length, int)):
        raise TypeError("`length` must be an int, not %s" % repr(type(length).__name__))
    if not length:
        length = _DEFAULT_UUID_LEN
    if length < 0:
        raise ValueError("`length` must be a non-negative int: %s" % repr(length))
    return ''.join(random.choices(_UUID_CHARS, k=length))


def replace_all(value: 'str', what: 'str', with_: 'str') -> 'str':
    """Replaces `what` with `with_` in `value` until there is no occurrence of `what` left

    Unlike ``str.replace()``, occurrences created by a replacement are replaced as well, eg:
    ``replace_all('aaa', 'aa', 'a') == 'a'``.
    """
    if what == '':
        raise ValueError("Cannot replace the empty string, replacement would never end")
    if what not in value:
        return value
    if what in with_:
        raise ValueError("Cannot replace %s with %s, replacement would never end" % (repr(what), repr(with_)))
    result = value
    while what in result:
        result = result.replace(what, with_)
    return result


def escape(html: 'str') -> 'str':
    """Escapes the characters & < > " ' of a string"""
    for char, entity in _HTML_ESCAPES:
        html = html.replace(char, entity)
    return html


def unescape(html: 'str') -> 'str':
    """Reverts :func:`escape`

    NOTE: each entity is replaced in a single pass, '&amp;' last, so text is only unescaped once:
    ``unescape('&amp;amp;') == '&amp;'``, where replacing until no entity is left (eg: with :func:`replace_all`)
    would give '&'.
    """
    for char, entity in reversed(_HTML_ESCAPES):
        html = html.replace(entity, char)
    return html
