class TransformError(Exception):
    """Raised when an upstream payload does not have the expected shape."""

    message = "Unexpected response format from upstream"

    def __init__(self, detail: str = ""):
        super().__init__(detail or self.message)
        self.detail = detail
