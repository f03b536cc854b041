from dataclasses import replace

from .consumable import ConsumableBuilder
from .embed_models import EmbedField


class EmbedFieldBuilder(ConsumableBuilder):
    """Create an embed field with a builder. Fields are not inline by default."""

    def __init__(self, name: str, value: str):
        super().__init__()
        self._field = EmbedField(name=str(name), value=str(value))

    def inline(self):
        """Display the field next to its neighbours instead of on its own row."""
        self._ensure_configurable()
        self._field = replace(self._field, inline=True)
        return self

    def build(self) -> EmbedField:
        self._consume()
        return self._field

    def __eq__(self, other):
        if not isinstance(other, EmbedFieldBuilder):
            return NotImplemented
        return self._field == other._field and self._consumed == other._consumed

    def __repr__(self):
        return f"EmbedFieldBuilder({self._field!r})"
