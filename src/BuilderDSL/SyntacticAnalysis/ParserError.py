class ParserError(Exception):
    message: str
    start: int
    end: int

    def __init__(self, message: str, start: int, end: int) -> None:
        super().__init__(message)
        self.message = message
        self.start = start
        self.end = end


__all__ = ["ParserError"]
