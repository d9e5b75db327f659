class CoercionError(Exception):
    """
    A codec could not convert between bytes and the requested type.
    `message` is the codec's own description, passed through unmodified.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class UnsupportedContentTypeError(CoercionError):
    """Raised only in strict mode, for inbound MIME strings outside the table."""

    def __init__(self, mime: str) -> None:
        super().__init__(f"unsupported content type: {mime!r}")
        self.mime = mime


class FunctionError(Exception):
    """The user handler raised while processing an invocation."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"function handler failed: {cause}")
        self.cause = cause
