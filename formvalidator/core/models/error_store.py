"""
ErrorStore holding the messages produced by a validation run.
"""

DEFAULT_START_DELIM = '<li class="error">'
DEFAULT_END_DELIM = "</li>"


class ErrorStore:
    """
    Ordered per-field lists of error messages.

    Fields keep the order in which their first error was recorded, which the
    engine guarantees is rule-set order. Messages for a field append in rule
    order and are never overwritten.

    The formatted accessors wrap every message as start_delim + message +
    end_delim and join the results with no separator. A field without
    errors formats as "".
    """

    def __init__(self):
        self._errors: dict[str, list[str]] = {}

    def add(self, field_name: str, message: str) -> None:
        """Append a message to a field's error list."""
        self._errors.setdefault(field_name, []).append(message)

    def clear(self) -> None:
        self._errors.clear()

    def as_dict(self) -> dict[str, list[str]]:
        """Copy of the raw errors, safe for callers to mutate."""
        return {field: list(messages) for field, messages in self._errors.items()}

    def field_errors(self, field_name: str) -> list[str]:
        return list(self._errors.get(field_name, []))

    def count(self) -> int:
        """Number of fields with at least one error."""
        return len(self._errors)

    def is_empty(self) -> bool:
        return not self._errors

    # =======================
    # FORMATTED VIEWS
    # =======================

    def first_field_error(
        self,
        field_name: str,
        start_delim: str = DEFAULT_START_DELIM,
        end_delim: str = DEFAULT_END_DELIM,
    ) -> str:
        """First error recorded for a field, wrapped."""
        messages = self._errors.get(field_name)
        if not messages:
            return ""
        return _wrap(messages[:1], start_delim, end_delim)

    def all_field_errors(
        self,
        field_name: str,
        start_delim: str = DEFAULT_START_DELIM,
        end_delim: str = DEFAULT_END_DELIM,
    ) -> str:
        """Every error recorded for a field, each wrapped."""
        return _wrap(self._errors.get(field_name, []), start_delim, end_delim)

    def all_first_errors(
        self,
        start_delim: str = DEFAULT_START_DELIM,
        end_delim: str = DEFAULT_END_DELIM,
    ) -> str:
        """The first error of every failing field, each wrapped."""
        firsts = [messages[0] for messages in self._errors.values() if messages]
        return _wrap(firsts, start_delim, end_delim)

    def all_errors(
        self,
        start_delim: str = DEFAULT_START_DELIM,
        end_delim: str = DEFAULT_END_DELIM,
    ) -> str:
        """Every error of every field, each wrapped."""
        every = [message for messages in self._errors.values() for message in messages]
        return _wrap(every, start_delim, end_delim)

    def __len__(self) -> int:
        return self.count()

    def __repr__(self) -> str:
        return f"ErrorStore({self._errors!r})"


def _wrap(messages: list[str], start_delim: str, end_delim: str) -> str:
    return "".join(f"{start_delim}{message}{end_delim}" for message in messages)
