__all__ = ['Signer', 'Token', 'authorize', 'build_auth_params', 'escape',
           'render_header', 'sign', 'signature_base', 'to_unicode']

from txoauth1._version import __version__
__version__ # hush pyflakes

from pyutil.assertutil import precondition

from twisted.web.http_headers import Headers

from txoauth1.oauth import (authorize, build_auth_params, escape, render_header,
                            sign, signature_base)
from txoauth1.sources import SystemClock, UUIDNonceSource
from txoauth1.utils import Token, to_unicode


def is_token(t):
    return hasattr(t, 'key') and hasattr(t, 'secret')

class Signer(object):
    """
    Signs requests on behalf of one consumer and, optionally, one access
    token.

    clock is anything with a seconds() method (an IClock, or any Twisted
    IReactorTime provider such as the reactor); nonce_source is an
    INonceSource. When realm is given every header starts with it.

    Signer instances are never modified after construction, so one can be
    shared freely between callers.
    """
    def __init__(self, consumer, token=None, clock=None, nonce_source=None, realm=None):
        precondition(is_token(consumer), "consumer is required to be a Token, or anything else with key and secret attributes", consumer=consumer)
        precondition(token is None or is_token(token), "token is required to be None or a Token, or anything else with key and secret attributes", token=token)
        if clock is None:
            clock = SystemClock()
        if nonce_source is None:
            nonce_source = UUIDNonceSource()
        self.consumer = consumer
        self.token = token
        self.clock = clock
        self.nonce_source = nonce_source
        self.realm = realm

    def authorize(self, method, uri, params=None):
        """
        Return the Authorization header value for a request. uri is the
        normalized base URI and params the query and form body parameters
        to be signed along with it.
        """
        return authorize(method, uri, self.consumer, self.token, params,
                         clock=self.clock, nonce_source=self.nonce_source,
                         realm=self.realm)

    def headers(self, method, uri, params=None, headers=None):
        """
        Return a twisted.web.http_headers.Headers, a copy of headers if
        that is given, with Authorization set. Pass it as the headers
        argument of twisted.web.client.Agent.request().
        """
        if headers is None:
            headers = Headers()
        elif not isinstance(headers, Headers):
            raise TypeError("headers is required to be None or a twisted.web.http_headers.Headers, not %s" % (type(headers),))
        else:
            headers = headers.copy()

        headers.setRawHeaders(b'Authorization', [self.authorize(method, uri, params).encode('utf-8')])
        return headers
