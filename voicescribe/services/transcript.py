"""In-memory transcript text accumulated over a page view."""

from voicescribe.core.utils import count_words


class TranscriptBuffer:
    """Accumulated transcript text with word and character counters.

    Recognised text is appended followed by a single space; the user may
    also overwrite or clear the buffer. Nothing is persisted.
    """

    SEPARATOR = " "

    def __init__(self, text: str = "") -> None:
        self._text = text

    @property
    def text(self) -> str:
        return self._text

    @property
    def word_count(self) -> int:
        return count_words(self._text)

    @property
    def character_count(self) -> int:
        return len(self._text)

    def append(self, text: str) -> None:
        """Append recognised text plus the trailing separator."""
        self._text += text + self.SEPARATOR

    def set(self, text: str) -> None:
        """Replace the buffer with user-edited text."""
        self._text = text

    def clear(self) -> None:
        self._text = ""

    def __bool__(self) -> bool:
        return bool(self._text)

    def __str__(self) -> str:
        return self._text
