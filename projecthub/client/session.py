"""
Session holder: the single source of "current identity or none".

Downstream components subscribe to identity changes and must unsubscribe
(or the holder must be closed) when they are torn down.
"""

import inspect
import logging
from enum import Enum
from typing import Any, Callable, List, Optional

from .api_client import ProjectHubClient
from .errors import ProjectHubError
from .models import Identity

logger = logging.getLogger(__name__)


class SessionEvent(str, Enum):
    INITIAL_SESSION = "INITIAL_SESSION"
    SIGNED_IN = "SIGNED_IN"
    SIGNED_OUT = "SIGNED_OUT"
    TOKEN_REFRESHED = "TOKEN_REFRESHED"


SessionCallback = Callable[[SessionEvent, Optional[Identity]], Any]


class Subscription:
    def __init__(self, holder: "SessionHolder", callback: SessionCallback):
        self._holder = holder
        self.callback = callback
        self.active = True

    def unsubscribe(self):
        if self.active:
            self.active = False
            self._holder._detach(self)


class SessionHolder:
    def __init__(self, client: ProjectHubClient):
        self.client = client
        self.identity: Optional[Identity] = None
        self._subscriptions: List[Subscription] = []

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)

    def subscribe(self, callback: SessionCallback) -> Subscription:
        subscription = Subscription(self, callback)
        self._subscriptions.append(subscription)
        return subscription

    def _detach(self, subscription: Subscription):
        if subscription in self._subscriptions:
            self._subscriptions.remove(subscription)

    def close(self):
        for subscription in list(self._subscriptions):
            subscription.unsubscribe()

    async def _emit(self, event: SessionEvent):
        for subscription in list(self._subscriptions):
            if not subscription.active:
                continue
            try:
                outcome = subscription.callback(event, self.identity)
                if inspect.isawaitable(outcome):
                    await outcome
            except Exception:
                logger.exception(f"Session subscriber failed on {event.value}")

    async def initialize(self) -> Optional[Identity]:
        """Resolve the identity once; any failure means no identity"""
        identity = None
        if self.client.authenticated:
            try:
                identity = await self.client.me()
            except ProjectHubError as e:
                logger.warning(f"Could not load current identity: {e.code}")
        self.identity = identity
        await self._emit(SessionEvent.INITIAL_SESSION)
        return identity

    async def sign_up(
        self,
        email: str,
        password: str,
        username: str,
        display_name: Optional[str] = None,
    ) -> Identity:
        self.identity = await self.client.sign_up(email, password, username, display_name)
        await self._emit(SessionEvent.SIGNED_IN)
        return self.identity

    async def sign_in(self, login: str, password: str) -> Identity:
        self.identity = await self.client.sign_in(login, password)
        await self._emit(SessionEvent.SIGNED_IN)
        return self.identity

    async def sign_out(self):
        try:
            await self.client.sign_out()
        except ProjectHubError as e:
            logger.warning(f"Sign-out request failed, clearing local session: {e.code}")
        self.identity = None
        await self._emit(SessionEvent.SIGNED_OUT)

    async def refresh(self):
        try:
            await self.client.refresh()
        except ProjectHubError:
            self.client.set_tokens(None, None)
            self.identity = None
            await self._emit(SessionEvent.SIGNED_OUT)
            raise
        await self._emit(SessionEvent.TOKEN_REFRESHED)
