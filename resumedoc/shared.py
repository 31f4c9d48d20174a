from enum import Enum


class Color(str, Enum):
    SUCCESS = "\033[92m"
    ERROR = "\033[91m"
    INFO = "\033[94m"
    WARNING = "\033[93m"
    RESET = "\033[0m"


def colored(text: str, color: Color) -> str:
    return f"{color.value}{text}{Color.RESET.value}"


def echo(text: str, color: Color = Color.INFO) -> None:
    print(colored(text, color))


class InvalidPaperSizeError(ValueError):
    def __init__(self, size_str: str):
        super().__init__(
            f"Invalid paper size: {size_str}. Valid sizes: {[s.name for s in PaperSize]}"
        )


class UnsupportedFormatError(ValueError):
    def __init__(self, name: str):
        super().__init__(
            f"Unsupported format: {name}. Use .json, .yaml, .md, .html or .pdf"
        )


class HtmlParseError(Exception):
    def __init__(self, reason: str):
        super().__init__(f"Could not parse HTML: {reason}")


class FileAlreadyExistsError(Exception):
    def __init__(self, path: str):
        super().__init__(f"File already exists: {path}. Use --overwrite to replace")


class IndexOutOfRangeError(IndexError):
    def __init__(self, kind: str, index: int, size: int):
        super().__init__(f"No {kind} at index {index} (have {size})")


class FieldNotFoundError(KeyError):
    def __init__(self, field: str):
        super().__init__(f"Field not found: {field}")

    def __str__(self) -> str:
        return self.args[0]


class LastFieldError(ValueError):
    def __init__(self, field: str):
        super().__init__(f"Cannot delete the only field in an item: {field}")


class ClipboardError(Exception):
    def __init__(self, expected: str, actual: str | None):
        held = actual or "nothing"
        super().__init__(f"Clipboard holds {held}, expected a {expected}")


class PaperSize(Enum):
    A4 = (595, 842)
    A5 = (420, 595)
    LETTER = (612, 792)
    LEGAL = (612, 1008)

    @property
    def width(self) -> int:
        return self.value[0]

    @property
    def height(self) -> int:
        return self.value[1]

    @staticmethod
    def from_string(size_str: str) -> "PaperSize":
        try:
            return PaperSize[size_str.upper()]
        except KeyError as exc:
            raise InvalidPaperSizeError(size_str) from exc
