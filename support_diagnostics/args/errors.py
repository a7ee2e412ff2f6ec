class ParseFailure(Exception):
    """Base class for every outcome of argument parsing that is not a config.

    Attributes:
        message: Text to show the user
        usage: Rendered help text of the parser that failed
        exit_code: Process exit status the entrypoint should use
    """

    exit_code = 1

    def __init__(self, message: str, usage: str = ""):
        super().__init__(message)
        self.message = message
        self.usage = usage


class HelpRequested(ParseFailure):
    """Raised when the user asked for help. Not an error."""

    exit_code = 0

    def __init__(self, usage: str):
        super().__init__(usage, usage)


class ValidationFailure(ParseFailure):
    """Raised when the supplied arguments break the option schema."""


class MissingRequiredOption(ValidationFailure):
    """Exception raised when an option is given without a usable value."""

    def __init__(self, option: str, usage: str = ""):
        super().__init__(f"option {option} expects exactly one non-empty value", usage)
        self.option = option


class PatternMismatch(ValidationFailure):
    """Exception raised when an option value does not match its pattern."""

    def __init__(self, option: str, value: str, pattern: str, usage: str = ""):
        super().__init__(
            f"invalid value {value!r} for option {option}: must match pattern '{pattern}'",
            usage,
        )
        self.option = option
        self.value = value
        self.pattern = pattern


class UnknownOption(ValidationFailure):
    """Exception raised for a token that no option recognizes."""

    def __init__(self, token: str, usage: str = ""):
        super().__init__(f"unknown option: {token}", usage)
        self.token = token


class AmbiguousShortOption(ValidationFailure):
    """Exception raised when two schema entries claim the same flag."""

    def __init__(self, flag: str, options: tuple[str, ...]):
        super().__init__(f"flag {flag} is claimed by more than one option: {', '.join(options)}")
        self.flag = flag
        self.options = options
