class InvalidFilterError(ValueError):
    """A filter value could not be interpreted."""


class UnparseableQueryError(ValueError):
    """A natural language query was missing or produced no filters."""


class StringAlreadyExistsError(ValueError):
    """A record with the same fingerprint is already stored."""


class StringNotFoundError(ValueError):
    """No record is stored for the requested value."""
