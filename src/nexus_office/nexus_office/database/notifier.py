from __future__ import annotations

from typing import Callable, List, Protocol

Callback = Callable[[], None]
KeyListener = Callable[[str], None]
Detach = Callable[[], None]


class ChangeNotifier:
    """In-process observer list.

    Callbacks carry no payload: observers re-query whatever they display.
    """

    def __init__(self):
        self._subscribers: List[Callback] = []

    def subscribe(self, callback: Callback) -> Detach:
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            self._subscribers = [cb for cb in self._subscribers if cb is not callback]

        return unsubscribe

    def notify(self) -> None:
        # Snapshot so callbacks may unsubscribe while being notified.
        for callback in list(self._subscribers):
            callback()

    def __len__(self) -> int:
        return len(self._subscribers)


class ExternalChangeSource(Protocol):
    """Where writes made by other contexts (tabs, processes) are reported.

    `attach` registers a listener receiving raw backend keys and returns a
    detach function. `announce` is called by a store after each of its own
    writes; sources driven by the platform itself can ignore it.
    """

    def attach(self, listener: KeyListener) -> Detach:
        raise NotImplementedError

    def announce(self, key: str) -> None:
        raise NotImplementedError


class NullChangeSource(ExternalChangeSource):
    """No other contexts exist."""

    def attach(self, listener: KeyListener) -> Detach:
        return lambda: None

    def announce(self, key: str) -> None:
        return None


class LocalChangeChannel:
    """In-process stand-in for the browser's cross-tab storage event.

    Each store attaches its own endpoint. An announce from one endpoint reaches
    the listeners of every other endpoint, never the announcing one.
    """

    def __init__(self):
        self._endpoints: List["ChannelEndpoint"] = []

    def endpoint(self) -> "ChannelEndpoint":
        ep = ChannelEndpoint(self)
        self._endpoints.append(ep)
        return ep

    def _broadcast(self, key: str, *, origin: "ChannelEndpoint") -> None:
        for ep in list(self._endpoints):
            if ep is not origin:
                ep._deliver(key)


class ChannelEndpoint(ExternalChangeSource):
    def __init__(self, channel: LocalChangeChannel):
        self._channel = channel
        self._listeners: List[KeyListener] = []

    def attach(self, listener: KeyListener) -> Detach:
        self._listeners.append(listener)

        def detach() -> None:
            self._listeners = [fn for fn in self._listeners if fn is not listener]

        return detach

    def announce(self, key: str) -> None:
        self._channel._broadcast(key, origin=self)

    def _deliver(self, key: str) -> None:
        for listener in list(self._listeners):
            listener(key)


class RevisionCounter:
    """Subscriber counting change notifications.

    Polling clients compare revisions to know when to re-read.
    """

    def __init__(self):
        self.revision = 0

    def __call__(self) -> None:
        self.revision += 1
