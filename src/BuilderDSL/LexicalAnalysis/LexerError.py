class LexerError(Exception):
    """
    A LexerError is always fatal: it is raised before parsing starts, so no backtracking attempt can swallow it.
    """

    message: str
    start: int
    end: int

    def __init__(self, message: str, start: int, end: int) -> None:
        super().__init__(message)
        self.message = message
        self.start = start
        self.end = end


__all__ = ["LexerError"]
