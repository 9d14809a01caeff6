from typing import Tuple

from colorama import Fore, Style


class ErrorFormatter:
    _code: str
    _file_path: str

    def __init__(self, code: str, file_path: str) -> None:
        self._code = code
        self._file_path = file_path

    def location(self, pos: int) -> Tuple[int, int]:
        # 1-based line and column of a source offset: count the newlines before it.
        preceding = self._code[:pos]
        line_number = preceding.count("\n") + 1
        column_number = pos - preceding.rfind("\n")
        return line_number, column_number

    def error(self, start_pos: int, end_pos: int = -1, message: str = "", tag_message: str = "", minimal: bool = False, no_format: bool = False) -> str:
        if no_format:
            return message

        # Get the start and end of the line containing the error.
        error_line_start_pos = self._code.rfind("\n", 0, start_pos) + 1
        error_line_end_pos = self._code.find("\n", start_pos)
        error_line_end_pos = len(self._code) if error_line_end_pos == -1 else error_line_end_pos
        error_line_as_string = self._code[error_line_start_pos:error_line_end_pos]

        # Get the line number of the error
        error_line_number, error_column_number = self.location(start_pos)

        # The number of "^" is the length of the span on this line, and at least 1 for errors at the end of input.
        end_pos = start_pos + 1 if end_pos == -1 else min(end_pos, error_line_end_pos)
        carets = "^" * max(1, end_pos - start_pos)
        carets_line_as_string = " " * (start_pos - error_line_start_pos) + carets + f"{Fore.LIGHTWHITE_EX}{Style.BRIGHT} <- {tag_message}"

        left_padding = " " * len(str(error_line_number))
        final_error_message = "\n".join([
            f"{Fore.LIGHTWHITE_EX}{Style.BRIGHT}",
            f"Error in file '{self._file_path}', on line {error_line_number}, column {error_column_number}:" if not minimal else f"Info from file '{self._file_path}', on line {error_line_number}:",
            f"{Fore.LIGHTWHITE_EX}{left_padding} |",
            f"{Fore.LIGHTRED_EX if not minimal else Fore.LIGHTGREEN_EX}{error_line_number} | {error_line_as_string}",
            f"{Fore.LIGHTWHITE_EX}{left_padding} | {Style.NORMAL}{Fore.LIGHTRED_EX if not minimal else Fore.LIGHTGREEN_EX}{carets_line_as_string}\n",
            f"{Style.RESET_ALL}{Fore.LIGHTRED_EX}{message}{Style.RESET_ALL}" * (not minimal),
        ])

        return final_error_message


__all__ = ["ErrorFormatter"]
