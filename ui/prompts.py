"""Validierte Zahleneingabe über rich.prompt.

Fragt so lange nach, bis eine syntaktisch gültige Zahl innerhalb der
(inklusiven) Grenzen eingegeben wurde. Eine fehlerhafte Zeile wird
komplett verworfen.
"""

from typing import Optional, TextIO, TypeVar, Union

from rich.console import Console
from rich.prompt import InvalidResponse, PromptBase
from rich.text import TextType

Number = TypeVar("Number", int, float)


class RangePrompt(PromptBase[Number]):
    """Prompt für eine Zahl im Bereich [minimum, maximum].

    Der Ergebnistyp folgt dem Typ von ``minimum`` (int oder float).
    """

    prompt_suffix = " "

    def __init__(
        self,
        prompt: TextType = "",
        minimum: Union[int, float] = 0,
        maximum: Union[int, float] = 0,
        *,
        console: Optional[Console] = None,
    ) -> None:
        super().__init__(prompt, console=console)
        self.minimum = minimum
        self.maximum = maximum
        self.response_type = type(minimum)
        if self.response_type is int:
            self.validate_error_message = "[prompt.invalid]Bitte eine ganze Zahl eingeben"
        else:
            self.validate_error_message = "[prompt.invalid]Bitte eine Zahl eingeben"

    @classmethod
    def get_input(cls, console: Console, prompt: TextType, password: bool,
                  stream: Optional[TextIO] = None) -> str:
        value = console.input(prompt, password=password, stream=stream)
        # readline() liefert am Dateiende "" statt einer (leeren) Zeile
        if stream is not None and value == "":
            raise EOFError("Eingabe beendet")
        return value

    def process_response(self, value: str) -> Number:
        text = value.strip()
        try:
            number = self.response_type(text)
        except ValueError:
            raise InvalidResponse(self.validate_error_message) from None
        # NaN besteht keinen der beiden Vergleiche
        if not self.minimum <= number <= self.maximum:
            raise InvalidResponse(
                f"[prompt.invalid]Ungültige Eingabe. Erlaubt: "
                f"{self.minimum} bis {self.maximum}"
            )
        return number


def get_validated_input(prompt: str, minimum: Number, maximum: Number, *,
                        console: Optional[Console] = None,
                        stream: Optional[TextIO] = None) -> Number:
    """Liest eine Zahl in [minimum, maximum]; wiederholt bei Fehlern.

    Raises:
        EOFError: Eingabestrom ist erschöpft.
    """
    return RangePrompt(prompt, minimum, maximum, console=console)(stream=stream)
