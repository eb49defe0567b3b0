"""Modal dialogs and a validating builder for them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ina.builder import ValidatedBuilder
from ina.custom_id import COMPONENT_CUSTOM_ID_LENGTH

MODAL_INPUT_COUNT = 5
"""The maximum number of inputs in a single modal."""

MODAL_TITLE_LENGTH = 45
"""The maximum length of a modal title, in UTF-8 bytes."""


class ModalError(ValueError):
    """Base class for modal errors."""


class InvalidCustomIdError(ModalError):
    """The custom identifier is invalid."""

    def __init__(self, custom_id: str) -> None:
        super().__init__(f"an invalid custom identifier was provided: '{custom_id}'")
        self.custom_id = custom_id


class InvalidTitleError(ModalError):
    """The title is invalid."""

    def __init__(self, title: str) -> None:
        super().__init__(f"an invalid title was provided: '{title}'")
        self.title = title


class MaximumInputsError(ModalError):
    """More than the permitted number of inputs were added."""

    def __init__(self) -> None:
        super().__init__(f"a maximum of {MODAL_INPUT_COUNT} inputs is permitted")


class MissingInputError(ModalError):
    """No inputs were provided."""

    def __init__(self) -> None:
        super().__init__("a minimum of 1 input is required")


@dataclass
class Modal:
    """A modal dialog."""

    title: str
    custom_id: str
    components: list[Any] = field(default_factory=list)


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


class ModalBuilder(ValidatedBuilder):
    """Builds a :class:`Modal`."""

    def __init__(self, title: str, custom_id: str) -> None:
        self._inner = Modal(title, str(custom_id))

    def component(self, component: Any) -> ModalBuilder:
        """Add a component; builders are built first."""
        if isinstance(component, ValidatedBuilder):
            component = component.build()
        self._inner.components.append(component)
        return self

    def build(self) -> Modal:
        """The modal as built so far."""
        return Modal(self._inner.title, self._inner.custom_id, list(self._inner.components))

    @classmethod
    def validate(cls, inner: Modal) -> None:
        """Raise a :class:`ModalError` if the modal is not valid."""
        if _byte_len(inner.title) > MODAL_TITLE_LENGTH:
            raise InvalidTitleError(inner.title)
        if _byte_len(inner.custom_id) > COMPONENT_CUSTOM_ID_LENGTH:
            raise InvalidCustomIdError(inner.custom_id)
        if len(inner.components) > MODAL_INPUT_COUNT:
            raise MaximumInputsError()

    def try_build(self) -> Modal:
        """Build the modal and return it if it is valid."""
        inner = self.build()
        self.validate(inner)
        return inner