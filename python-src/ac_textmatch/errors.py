class InvalidArgumentError(ValueError):
    """
    Raised when a matcher receives an absent or malformed argument.
    """

    def __init__(self, param: str, message: str = "must not be None"):
        self.param = param
        super().__init__(f"Invalid argument '{param}': {message}")
