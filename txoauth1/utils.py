from collections import namedtuple

__all__ = ['Token', 'to_unicode', 'iter_parameters']


Token = namedtuple('Token', ['key', 'secret'])
"""
A key/secret credential pair. The same type represents the consumer (the
application) and the access token (the user the request acts on behalf of).
"""


def to_unicode(s):
    """
    Return s as text. Bytes are decoded as UTF-8; anything else, and bytes
    which are not UTF-8, raise TypeError.
    """
    if isinstance(s, str):
        return s
    if not isinstance(s, bytes):
        raise TypeError("oauth values are required to be str or bytes, not %s" % (type(s),))
    try:
        return s.decode('utf-8')
    except UnicodeDecodeError as le:
        raise TypeError("oauth values are required to be UTF-8 encoded: %r (%s)" % (s, le))


def iter_parameters(params):
    """
    Yield (name, value) pairs out of params, which is None, a mapping, or an
    iterable of pairs. A mapping value which is not a string is unpacked into
    one pair per element, so multi-valued parameters are all signed.
    """
    if params is None:
        return
    if hasattr(params, 'items'):
        for k, v in params.items():
            if isinstance(v, (str, bytes)):
                yield (k, v)
            else:
                for e in v:
                    yield (k, e)
    else:
        for k, v in params:
            yield (k, v)
