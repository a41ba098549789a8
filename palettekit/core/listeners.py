from typing import Callable, Dict, List, Optional

from palettekit.logging import get_logger

logger = get_logger(__name__)

ListenerId = int
Listener = Callable[[], None]


class ListenerSet:
    """
    Callbacks keyed by a monotonically increasing id (1, 2, ...).

    Ids are never reused, so removing a listener while a broadcast is in
    progress can't collide with a listener added later.
    """
    def __init__(self):
        self._listeners: Dict[ListenerId, Listener] = {}
        self._next_id: ListenerId = 1

    def add(self, callback: Listener) -> ListenerId:
        """
        Registers a callback and returns its id.
        """
        listener_id = self._next_id
        self._next_id += 1
        self._listeners[listener_id] = callback
        return listener_id

    def remove(self, listener_id: ListenerId) -> None:
        """
        Unregisters a callback. Unknown ids are ignored.
        """
        self._listeners.pop(listener_id, None)

    def notify(self) -> int:
        """
        Invokes every registered callback and returns how many ran.

        The id list is captured before iterating and each id is looked up
        again right before its call, so callbacks removed mid-broadcast are
        skipped and callbacks added mid-broadcast wait for the next one.

        A failing callback doesn't stop the broadcast: every remaining
        callback still runs, then the first error is re-raised.
        """
        ids: List[ListenerId] = list(self._listeners)
        called = 0
        first_error: Optional[BaseException] = None
        for listener_id in ids:
            callback = self._listeners.get(listener_id)
            if callback is None:
                continue
            try:
                callback()
            except Exception as e:
                logger.warning(f"Listener {listener_id} failed: {e}")
                if first_error is None:
                    first_error = e
                continue
            called += 1

        if first_error is not None:
            raise first_error
        return called

    def __contains__(self, listener_id: ListenerId) -> bool:
        return listener_id in self._listeners

    def __len__(self) -> int:
        return len(self._listeners)
