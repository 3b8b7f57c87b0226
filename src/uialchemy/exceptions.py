class UIAlchemyException(Exception):
    """Base class of the errors raised while resolving a view."""

    message = 'View resolution error'

    def __init__(self, message: str = None):
        if message:
            self.message = message
        super().__init__(self.message)

    def __str__(self):
        return self.message


class UnsupportedKey(UIAlchemyException, KeyError):
    """A default value was requested for a key the resolver doesn't know."""

    def __init__(self, key):
        self.key = key
        super().__init__(f'No default value for key "{key}"')


class InvalidOption(UIAlchemyException, ValueError):
    """An option value doesn't have the expected shape."""


class SchemaError(UIAlchemyException, TypeError):
    """The object can't be described as a schema."""
