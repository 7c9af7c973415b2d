LIBRARY_NAME = "EloArg"
HELP_HINT = "Use option '--help' for more information."


class EloArgError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message

class ConfigurationError(EloArgError):
    pass

class ParseError(EloArgError):
    def __init__(self, option: str, message: str):
        super().__init__(message)
        self.option = option

class MissingIdentifierError(ConfigurationError):
    def __init__(self):
        super().__init__("You must enter either the short or long option.")

class MissingDescriptionError(ConfigurationError):
    def __init__(self, option: str):
        super().__init__(f"You must set the description for option '{option}'.")
        self.option = option

class OptionExistsError(ConfigurationError):
    def __init__(self, kind: str, option: str):
        super().__init__(f"You've already set the {kind} option '{option}'.")
        self.kind = kind
        self.option = option

class OptionTooLongError(ConfigurationError):
    def __init__(self, field: str, limit: int):
        super().__init__(f"The maximum length of the {field} is {limit}.")
        self.field = field
        self.limit = limit

class ContextActiveError(ConfigurationError):
    def __init__(self):
        super().__init__("A process-wide context is already active; close it first.")

class UnknownOptionError(ParseError):
    def __init__(self, option: str, cluster: bool = False):
        if cluster:
            message = f"Unknown option '{option}'.\n{HELP_HINT}"
        else:
            message = f"Unknown option: {option}.\n{HELP_HINT}"
        super().__init__(option, message)

class MissingValueError(ParseError):
    def __init__(self, option: str):
        super().__init__(option, f"Missing value for option: {option}")

class UnexpectedValueError(ParseError):
    def __init__(self, option: str, value: str):
        super().__init__(option, f"option '{option}' doesn't allow an argument.")
        self.value = value

class MissingRequiredError(ParseError):
    def __init__(self, option: str):
        super().__init__(option, f"Missing required option: '{option}'\n{HELP_HINT}")

class AllocationFailure(EloArgError):
    def __init__(self, detail: str):
        super().__init__(f"Cannot allocate memory for '{detail}'.")
        self.detail = detail
