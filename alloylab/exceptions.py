"""Engine exceptions."""

EMPTY_COMPOSITION = 'empty-composition'


class AlloyLabError(Exception):
    """Base class for alloy engine errors."""


class DomainError(AlloyLabError, ValueError):
    """Input lies outside the domain where a model is defined.

    Parameters
    ----------
    code : str
        Machine-readable error code, e.g. 'empty-composition'
    message : str, optional
        Human-readable description
    """

    def __init__(self, code: str, message: str = ''):
        self.code = code
        self.message = message or code
        super().__init__(f'{code}: {self.message}')
