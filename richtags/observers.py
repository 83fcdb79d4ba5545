"""
# Rich-Tags: observers.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Automatic formatting of text elements.
"""

from typing import NamedTuple, Protocol

from richtags.authorities import ExpansionAuthority


class TextElement(Protocol):
    text: str
    rich_text: bool


class CapturedState(NamedTuple):
    original_text: str
    original_rich_text: bool


class FormattingObserver:
    """
    Object formatting the text of elements while they are attached.

    On `attach(element)`, the original text of the element is captured (once),
    rich text rendering is enabled, and the text is replaced by its formatted version.
    On `detach(element)`, the original text and rich text flag are restored.
    """
    _expansion_authority: 'ExpansionAuthority'
    _captured_state_from_element_id: dict[int, 'CapturedState']
    _element_from_element_id: dict[int, 'TextElement']

    def __init__(self, expansion_authority: 'ExpansionAuthority'):
        self._expansion_authority = expansion_authority
        self._captured_state_from_element_id = {}
        self._element_from_element_id = {}

    def is_attached(self, element: 'TextElement') -> bool:
        return id(element) in self._captured_state_from_element_id

    def attach(self, element: 'TextElement'):
        element_id = id(element)
        captured_state = self._captured_state_from_element_id.get(element_id)
        if captured_state is None:
            captured_state = CapturedState(element.text, element.rich_text)
            self._captured_state_from_element_id[element_id] = captured_state
            self._element_from_element_id[element_id] = element

        element.rich_text = True
        element.text = self._expansion_authority.format(captured_state.original_text)

    def detach(self, element: 'TextElement'):
        element_id = id(element)
        captured_state = self._captured_state_from_element_id.pop(element_id, None)
        if captured_state is None:
            return

        del self._element_from_element_id[element_id]
        element.text = captured_state.original_text
        element.rich_text = captured_state.original_rich_text

    def refresh(self):
        for element_id, element in list(self._element_from_element_id.items()):
            captured_state = self._captured_state_from_element_id.get(element_id)
            if captured_state is None:
                continue

            element.text = self._expansion_authority.format(captured_state.original_text)
