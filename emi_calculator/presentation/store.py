"""Form store: holds the current FormState and notifies subscribers on change"""

import logging
from typing import Callable, List

from emi_calculator.domain.form_state import FormEvent, initial_state, transition
from emi_calculator.domain.models import FormState

logger = logging.getLogger(__name__)

Subscriber = Callable[[FormState, FormEvent], None]


class FormStore:
    """
    Single owner of a calculator form's state.

    dispatch() runs the reducer, stores the new state, then calls each
    subscriber in subscription order. Not thread-safe; one store per form.
    """

    def __init__(self, state: FormState | None = None, allow_zero_rate: bool = True):
        self._state = state if state is not None else initial_state()
        self._allow_zero_rate = allow_zero_rate
        self._subscribers: List[Subscriber] = []

    @property
    def state(self) -> FormState:
        return self._state

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a callback; returns a function that removes it"""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def dispatch(self, event: FormEvent) -> FormState:
        self._state = transition(self._state, event, allow_zero_rate=self._allow_zero_rate)
        logger.debug(
            "Form transition",
            extra={"event": type(event).__name__, "status": self._state.status.value},
        )

        # Copy so callbacks may unsubscribe while being notified
        for callback in list(self._subscribers):
            callback(self._state, event)

        return self._state
