# OAuth 1.0a (RFC 5849) HMAC-SHA1 signing, and the Authorization header
# built from it.

import base64, hashlib, hmac
from urllib.parse import quote

from twisted.python import log

from txoauth1 import sources
from txoauth1.utils import iter_parameters, to_unicode

SIGNATURE_METHOD = 'HMAC-SHA1'

ENCODED_AMP = '%26' # escape('&')
ENCODED_EQ = '%3D' # escape('=')

def escape(s):
    """
    Percent-encode s, including any /. Only A-Z a-z 0-9 - _ . ~ are left
    alone; every other UTF-8 octet becomes %XX with uppercase hex, so a
    space is %20 and never +.
    """
    return quote(to_unicode(s).encode('utf-8'), safe='~')

def escape_to(s, output):
    """
    Append the escaped form of s to output, a list of text chunks which
    the caller joins once at the end. This is a convenience for building
    the base string; quote() still makes one string per call.
    """
    output.append(escape(s))

def signature_base(method, uri, params):
    """
    Return the signature base string for a request. uri must already be
    normalized by the caller: lowercase scheme and host, no default port,
    no query string.

    params are decoded to text, sorted by name, then by value, exactly as
    they are given and then escaped, so values which already contain %XX escapes get
    escaped a second time.
    """
    result = []
    escape_to(method, result)
    result.append('&')
    escape_to(uri, result)
    result.append('&')

    first = True
    for k, v in sorted((to_unicode(k), to_unicode(v)) for k, v in iter_parameters(params)):
        if first:
            first = False
        else:
            result.append(ENCODED_AMP)

        escape_to(k, result)
        result.append(ENCODED_EQ)
        escape_to(v, result)

    return ''.join(result)

def sign(base, consumer_secret, token_secret=None):
    """
    HMAC-SHA1 of the base string. The key is the two secrets, unescaped,
    joined by '&'; the token secret is empty when there is no token.
    Returns the raw digest.
    """
    key = '%s&%s' % (to_unicode(consumer_secret), to_unicode(token_secret or ''))
    return hmac.new(key.encode('utf-8'), to_unicode(base).encode('utf-8'), hashlib.sha1).digest()

def encode_signature(mac):
    return base64.b64encode(mac).decode('ascii')

def build_auth_params(method, uri, timestamp, nonce, consumer, token=None, params=None):
    """
    Return the list of (name, value) oauth parameters for a request, in the
    order they go into the header: consumer key, token (only if there is
    one), signature method, timestamp, nonce and finally the signature.
    Values are already escaped.
    """
    oauth_params = [
        ('oauth_consumer_key', escape(consumer.key)),
        ('oauth_signature_method', SIGNATURE_METHOD),
        ('oauth_timestamp', escape(timestamp)),
        ('oauth_nonce', escape(nonce)),
        ]
    if token is not None:
        oauth_params.insert(1, ('oauth_token', escape(token.key)))

    extra_params = [(escape(k), escape(v)) for k, v in iter_parameters(params)]

    base = signature_base(method, uri, oauth_params + extra_params)

    token_secret = token.secret if token is not None else None
    signature = encode_signature(sign(base, consumer.secret, token_secret))
    oauth_params.append(('oauth_signature', escape(signature)))

    return oauth_params

def render_header(params, realm=None):
    """
    Render oauth params, whose values are already escaped, as an
    Authorization header value. realm is quoted: any \\ or " in it is
    backslash-escaped.
    """
    header_params = ['%s="%s"' % (k, v) for k, v in params]
    if realm is not None:
        realm = to_unicode(realm).replace('\\', '\\\\').replace('"', '\\"')
        header_params.insert(0, 'realm="%s"' % (realm,))
    return 'OAuth ' + ', '.join(header_params)

def authorize(method, uri, consumer, token=None, params=None, clock=None, nonce_source=None, realm=None):
    """
    Sign a request and return the value for its Authorization header.

    The timestamp is read from clock (an IClock, SystemClock by default)
    and the nonce from nonce_source (an INonceSource, UUIDNonceSource by
    default). Everything else is a pure function of the arguments.
    """
    if clock is None:
        clock = sources.SystemClock()
    if nonce_source is None:
        nonce_source = sources.UUIDNonceSource()

    oauth_params = build_auth_params(method, uri, sources.timestamp(clock), nonce_source.nonce(),
                                     consumer, token, params)

    log.msg(format="Signed %(method)s request to %(uri)s for consumer %(consumer)s (token: %(has_token)s)",
            method=method, uri=uri, consumer=consumer.key, has_token=token is not None)

    return render_header(oauth_params, realm)
