from .errors import BuilderConsumedError


class ConsumableBuilder:
    """
    Two-state lifecycle shared by the record builders.

    A builder starts out configurable. build() moves it to the consumed state,
    after which every setter and build() raise BuilderConsumedError.
    """

    def __init__(self):
        self._consumed = False

    @property
    def consumed(self) -> bool:
        return self._consumed

    def _ensure_configurable(self):
        if self._consumed:
            raise BuilderConsumedError(type(self).__name__)

    def _consume(self):
        self._ensure_configurable()
        self._consumed = True
