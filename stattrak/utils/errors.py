# stattrak/utils/errors.py
class StatTrakError(RuntimeError):
    """Base class for errors raised at the stattrak integration seams."""


class UserInputError(StatTrakError):
    """
    Raised for invalid user-provided input (CLI arguments, lore files).
    Should NOT print traceback.
    """


class UnknownOccurrenceError(StatTrakError):
    """
    Raised when EventRouter.handle() receives an occurrence type
    it has no handler for.
    """
