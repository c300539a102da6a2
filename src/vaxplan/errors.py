"""Exception hierarchy for the vaccination planner."""


class VaccinationError(Exception):
    """Base class for every error raised by vaxplan."""


class DuplicateKeyError(VaccinationError):
    """A person or hub with the same identifier is already registered."""


class DuplicateHubError(DuplicateKeyError):
    """A hub with the same name is already defined."""


class ConfigurationError(VaccinationError, ValueError):
    """Invalid staffing counts, working hours, age breaks or day index."""


class NotConfiguredError(VaccinationError, LookupError):
    """Unknown hub/person/interval, or a value queried before it was set."""


class HeaderError(VaccinationError):
    """The people CSV does not start with the expected header."""


class DivisionUndefinedError(VaccinationError, ZeroDivisionError):
    """A proportion was requested over an empty population."""
