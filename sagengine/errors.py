"""Exception types raised by the engine."""


class OpenGLException(RuntimeError):
    """Raised when the graphics context or one of its resources fails."""


class InvalidArgumentException(RuntimeError):
    """Raised when a caller passes an argument the engine cannot use."""


class FileHelperException(RuntimeError):
    """Raised when a file needed by the engine cannot be read."""