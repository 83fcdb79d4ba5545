"""
# Rich-Tags: exceptions.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Exception and warning classes.
"""


class CircularDefinitionException(Exception):
    _tag_name: str

    def __init__(self, tag_name: str):
        super().__init__(
            f'error: circular reference in definition of tag `{tag_name}` '
            f'(expansion reintroduces `<{tag_name}>` or `</{tag_name}>`)'
        )
        self._tag_name = tag_name

    @property
    def tag_name(self) -> str:
        return self._tag_name


class CommittedMutateException(Exception):
    pass


class InvalidDefinitionsException(Exception):
    pass


class InvalidTagNameException(Exception):
    _tag_name: str

    def __init__(self, tag_name: str):
        super().__init__(f'error: invalid tag name `{tag_name}` (must be one or more word characters)')
        self._tag_name = tag_name

    @property
    def tag_name(self) -> str:
        return self._tag_name


class UncommittedApplyException(Exception):
    pass


class UnrecognisedTagException(Exception):
    pass


class TagWarning(UserWarning):
    pass
