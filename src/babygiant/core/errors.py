"""Exception hierarchy for babygiant."""


class BabyGiantError(Exception):
    """Base class for every error raised by babygiant."""


class DecodeError(BabyGiantError, ValueError):
    """A coordinate string is not a correctly framed hex field element."""


class InvalidPointError(BabyGiantError, ValueError):
    """Coordinates do not satisfy the curve equation."""


class HarnessError(BabyGiantError, RuntimeError):
    """The external test harness failed or its report could not be parsed."""


class SearchError(BabyGiantError, RuntimeError):
    """A search worker raised instead of reporting a result."""
