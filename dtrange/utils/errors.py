# dtrange/utils/errors.py
class UserInputError(RuntimeError):
    """
    Raised for invalid user-provided input (date strings, timezone ids, config).
    Should NOT print traceback.
    """


class ParseError(UserInputError):
    """
    Raw local input is not a ``YYYY-MM-DDTHH:mm`` string.
    """

    def __init__(self, raw: str, reason: str = "expected YYYY-MM-DDTHH:mm"):
        self.raw = raw
        super().__init__(f"Cannot parse local date-time {raw!r}: {reason}")


class UnknownTimezoneError(UserInputError):
    """
    Timezone id is not a recognized IANA identifier, or not in the configured set.
    """

    def __init__(self, timezone_id: str, reason: str = "not a recognized IANA timezone"):
        self.timezone_id = timezone_id
        super().__init__(f"Unknown timezone {timezone_id!r}: {reason}")
