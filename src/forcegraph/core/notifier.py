"""
Notifier: publish/subscribe registry for simulation observers.

A ForceGraph owns one Notifier and publishes itself after every tick.
Subscribers are called synchronously, in subscription order.

A failing subscriber never prevents delivery to the ones after it: the
exception is logged and handed to the optional on_error hook.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Optional
import inspect
import logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Subscription:
    """One registered observer."""

    callback: Callable[..., Any]
    context: Any = None

    def deliver(self, publisher: Any) -> None:
        """
        Invoke the callback for publisher.

        With a context the call is callback(context, publisher), so an
        unbound method can be registered together with its instance. A
        method already bound to that same context is called as is.
        """
        bound_to_context = inspect.ismethod(self.callback) and self.callback.__self__ is self.context
        if self.context is None or bound_to_context:
            self.callback(publisher)
        else:
            self.callback(self.context, publisher)


ErrorHook = Callable[[Subscription, Exception], None]


class Notifier:
    """Registry of callbacks invoked on every publish()."""

    def __init__(self, publisher: Any = None, on_error: Optional[ErrorHook] = None):
        """
        Args:
            publisher: Object handed to subscribers (defaults to the notifier)
            on_error: Called with (subscription, exception) when a
                      subscriber raises
        """
        self.publisher = self if publisher is None else publisher
        self.on_error = on_error
        self._subscriptions: list[Subscription] = []
        self._publishing = False

    @property
    def subscriptions(self) -> tuple[Subscription, ...]:
        return tuple(self._subscriptions)

    def __len__(self) -> int:
        return len(self._subscriptions)

    def subscribe(self, callback: Callable[..., Any], context: Any = None) -> Subscription:
        """Register callback. The same callback may be registered twice."""
        subscription = Subscription(callback, context)
        self._subscriptions.append(subscription)
        return subscription

    def unsubscribe(self, callback: Callable[..., Any]) -> None:
        """Remove the first registration of callback, if any."""
        for i, subscription in enumerate(self._subscriptions):
            if subscription.callback == callback:
                del self._subscriptions[i]
                return

    def publish(self) -> None:
        """Deliver the publisher to every subscriber."""
        if self._publishing:
            logger.warning("Re-entrant publish dropped for %r", self.publisher)
            return

        self._publishing = True
        try:
            # Subscribers may (un)subscribe while being notified
            for subscription in list(self._subscriptions):
                try:
                    subscription.deliver(self.publisher)
                except Exception as exc:
                    logger.exception("Subscriber %r failed", subscription.callback)
                    self._report(subscription, exc)
        finally:
            self._publishing = False

    def _report(self, subscription: Subscription, exc: Exception) -> None:
        if self.on_error is None:
            return
        try:
            self.on_error(subscription, exc)
        except Exception:
            logger.exception("Error hook failed for subscriber %r", subscription.callback)
