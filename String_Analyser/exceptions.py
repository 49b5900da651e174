class StringAnalyzerError(Exception):
    """Base class for recoverable errors raised by the string analyzer core."""

    code = 'error'
    default_message = 'String analyzer error'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInput(StringAnalyzerError):
    code = 'invalid_input'
    default_message = '"value" must be a string'


class AlreadyExists(StringAnalyzerError):
    code = 'conflict'
    default_message = 'String already exists.'


class NotFound(StringAnalyzerError):
    code = 'not_found'
    default_message = 'String not found.'


class InvalidFilter(StringAnalyzerError):
    code = 'invalid_filter'
    default_message = 'Invalid filter parameter.'


class EmptyQuery(StringAnalyzerError):
    code = 'empty_query'
    default_message = 'Query parameter is required.'
