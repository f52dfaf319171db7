from abc import ABC, abstractmethod
from typing import Iterable, List, Tuple


# ──────────────────────────────────────────────────────────────────────────────
# EXCEPTIONS
# ──────────────────────────────────────────────────────────────────────────────
class UnsupportedScriptError(ValueError):
    """Raised when a converter is requested for a script we cannot produce."""
    def __init__(self, script: str, supported: Tuple[str, ...]):
        super().__init__(
            f"Unsupported target script '{script}'. "
            f"Expected one of: {', '.join(supported)}"
        )
        self.script = script
        self.supported = supported


class BaseConverter(ABC):
    """Abstract base class for text-to-script converters.

    Converters are total: every string maps to a string and segments the
    converter does not understand are passed through untouched.
    """

    #: Name of the script produced by :meth:`convert`.
    script: str = ""

    @abstractmethod
    def convert(self, text: str) -> str:
        """Convert *text* into the converter's target script"""
        pass

    def convert_many(self, texts: Iterable[str]) -> List[str]:
        """Convert each string of *texts*, preserving order."""
        return [self.convert(text) for text in texts]
