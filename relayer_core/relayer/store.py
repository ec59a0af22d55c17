from __future__ import annotations

from collections.abc import Callable

from relayer_core.logs.structlog import logger
from relayer_core.relayer.actions import Action
from relayer_core.relayer.reducer import relayer_reducer
from relayer_core.relayer.state import RelayerState

Listener = Callable[[RelayerState], None]


class RelayerStore:
    """
    Holds the current RelayerState and applies dispatched actions to it.

    Dispatch is synchronous, so actions are applied one at a time in the order
    they are dispatched.
    """

    def __init__(self, state: RelayerState | None = None) -> None:
        self._state = state if state is not None else RelayerState()
        self._listeners: list[Listener] = []
        self.logger = logger.bind(component=self.__class__.__name__)

    @property
    def state(self) -> RelayerState:
        return self._state

    def dispatch(self, action: Action) -> RelayerState:
        previous = self._state
        self._state = relayer_reducer(previous, action)
        if self._state is previous:
            self.logger.debug(f"ignored action {action.type}")
            return self._state

        self.logger.debug(
            f"applied action {action.type}",
            orders=len(self._state.orders),
            products=len(self._state.products),
            tokens=len(self._state.tokens),
        )
        for listener in list(self._listeners):
            try:
                listener(self._state)
            except Exception as e:
                self.logger.error(f"state listener failed: {e}", exc_info=True)
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register listener for state changes; returns a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
