"""Custom exceptions for the i18n system.

Missing translations are never exceptions: the translator degrades to the
raw key. These errors cover misuse that should fail loudly instead.
"""


class I18nError(Exception):
    """Base exception for all i18n errors.

    Example:
        try:
            t("cart.total", {"price": "12"})
        except I18nError as e:
            logger.error("i18n_error", error=str(e))
    """

    pass


class ArgumentTypeError(I18nError, TypeError):
    """Raised when a typed placeholder receives a value of the wrong kind.

    Example:
        >>> t("cart.total", {"price": "12"})
        Traceback (most recent call last):
        ...
        ArgumentTypeError: Invalid argument type for parameter 'price': ...
    """

    def __init__(self, param: str, expected: str, received: object):
        self.param = param
        self.expected = expected
        self.received = type(received).__name__
        super().__init__(
            f"Invalid argument type for parameter '{param}': "
            f"expected {expected}, received {self.received}"
        )


class MissingParamOptionsError(I18nError):
    """Raised when a ``{name:plural}`` placeholder has no plural options declared."""

    def __init__(self, param: str, param_type: str = "plural"):
        self.param = param
        self.param_type = param_type
        super().__init__(
            f"{param_type.capitalize()} options must be defined for parameter "
            f"'{param}'. Declare them under '{param_type}' in the message options."
        )


class InvalidCatalogError(I18nError, ValueError):
    """Raised when a raw catalog mapping cannot be turned into catalog nodes."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid catalog entry at '{path}': {reason}")
