"""ANSI color codes for terminal output."""


class Colors:
    """ANSI color codes used by the console reporter and logger."""

    HEADER = '\033[95m'
    OKBLUE = '\033[94m'
    OKCYAN = '\033[96m'
    OKGREEN = '\033[92m'
    WARNING = '\033[93m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'

    @classmethod
    def success(cls, text: str) -> str:
        """Return text in green."""
        return f"{cls.OKGREEN}{text}{cls.ENDC}"

    @classmethod
    def error(cls, text: str) -> str:
        """Return text in red."""
        return f"{cls.FAIL}{text}{cls.ENDC}"

    @classmethod
    def warning(cls, text: str) -> str:
        """Return text in yellow."""
        return f"{cls.WARNING}{text}{cls.ENDC}"

    @classmethod
    def info(cls, text: str) -> str:
        """Return text in cyan."""
        return f"{cls.OKCYAN}{text}{cls.ENDC}"

    @classmethod
    def bold(cls, text: str) -> str:
        return f"{cls.BOLD}{text}{cls.ENDC}"

    @classmethod
    def strip(cls, text: str) -> str:
        """Remove every color code from text (used for file output)."""
        for code in (cls.HEADER, cls.OKBLUE, cls.OKCYAN, cls.OKGREEN,
                     cls.WARNING, cls.FAIL, cls.ENDC, cls.BOLD):
            text = text.replace(code, '')
        return text
