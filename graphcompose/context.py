import contextlib
import logging
import threading

from .errors import GraphError


_logger = logging.getLogger(__name__)

default_context_type = object

_missing = object()


class RequestContext(object):
    """
    Binds one context value to every dispatch made during a single request.

    The value itself is owned by the caller: it is passed unchanged to each
    resolver and never copied or mutated. Request-scoped provider instances
    are created at most once per request and released when the request
    ends, including when it ends with an error or is cancelled.
    """

    def __init__(self, value=None):
        self.value = value
        self._lock = threading.Lock()
        self._providers = {}
        self._closed = False

    def provider(self, key, create):
        instance = self._providers.get(key, _missing)
        if instance is not _missing:
            return instance

        with self._lock:
            if self._closed:
                raise GraphError("request has already ended")

            instance = self._providers.get(key, _missing)
            if instance is _missing:
                instance = create()
                self._providers[key] = instance

            return instance

    @property
    def closed(self):
        return self._closed

    def close(self):
        with self._lock:
            if self._closed:
                return
            self._closed = True
            providers = list(self._providers.values())
            self._providers.clear()

        with contextlib.ExitStack() as stack:
            for provider in providers:
                release_on_exit(stack, provider)

        _logger.debug("released %s request-scoped providers", len(providers))

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        self.close()

    def __repr__(self):
        return "RequestContext(value={!r})".format(self.value)


class _UnboundContext(object):
    def __init__(self, value):
        self.value = value


def release_on_exit(stack, provider):
    close = getattr(provider, "close", None)
    if callable(close):
        stack.callback(close)


def adapt_context(context):
    if isinstance(context, (RequestContext, _UnboundContext)):
        return context
    else:
        return _UnboundContext(context)
