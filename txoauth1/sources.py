"""
The two collaborators that make signing nondeterministic: a clock for
oauth_timestamp and a nonce source for oauth_nonce.

Any Twisted IReactorTime provider, e.g. the reactor itself or
twisted.internet.task.Clock, can be used as the clock.
"""

import uuid

from zope.interface import Interface, implementer

from twisted.python import runtime

__all__ = ['IClock', 'INonceSource', 'SystemClock', 'UUIDNonceSource', 'timestamp']


class IClock(Interface):
    def seconds():
        """
        Return the current time in seconds since the epoch.
        """


class INonceSource(Interface):
    def nonce():
        """
        Return a fresh, unpredictable token as text. Every call must
        return a different value.
        """


@implementer(IClock)
class SystemClock(object):
    def seconds(self):
        return runtime.seconds()


@implementer(INonceSource)
class UUIDNonceSource(object):
    """
    Nonces are random (version 4) UUIDs rendered as 32 hex digits.
    """
    def nonce(self):
        return uuid.uuid4().hex


def timestamp(clock):
    """Whole seconds since the epoch, as decimal text."""
    return "%d" % (int(clock.seconds()),)
