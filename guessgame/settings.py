from dataclasses import dataclass

from coleo import ConfigFile

DEFAULT_MINIMUM = 1
DEFAULT_MAXIMUM = 100
DEFAULT_ATTEMPTS = 5


class ConfigurationError(Exception):
    """Raised when game settings violate their invariants."""


def _integer(name, value):
    # cfg/ini files only hold strings
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            pass
    raise ConfigurationError(f"'{name}' must be an integer, not {value!r}")


@dataclass(frozen=True)
class GameSettings:
    """Bounds of the number to guess and the number of guesses allowed.

    Attributes:
        min_number: Smallest number that can be drawn (inclusive).
        max_number: Largest number that can be drawn (inclusive).
        max_attempts: Number of guesses the player gets. Zero is allowed and
            ends the game before the first guess.
    """

    min_number: int = DEFAULT_MINIMUM
    max_number: int = DEFAULT_MAXIMUM
    max_attempts: int = DEFAULT_ATTEMPTS

    def __post_init__(self):
        for name in ("min_number", "max_number", "max_attempts"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(
                    f"'{name}' must be an integer, not {value!r}"
                )
        if self.min_number > self.max_number:
            raise ConfigurationError(
                f"Empty range: minimum {self.min_number} is greater than"
                f" maximum {self.max_number}"
            )
        if self.max_attempts < 0:
            raise ConfigurationError(
                f"Number of attempts cannot be negative: {self.max_attempts}"
            )

    def contains(self, number):
        return self.min_number <= number <= self.max_number

    @classmethod
    def from_file(cls, filename):
        """Read settings from a json, yaml, toml or cfg file.

        The file uses the same keys as the command line options: ``minimum``,
        ``maximum`` and ``attempts``. Missing keys take their default value.
        """
        contents = ConfigFile(str(filename)).read()
        if not isinstance(contents, dict):
            raise ConfigurationError(
                f"Settings file '{filename}' must contain a mapping"
            )
        return cls(
            min_number=_integer(
                "minimum", contents.get("minimum", DEFAULT_MINIMUM)
            ),
            max_number=_integer(
                "maximum", contents.get("maximum", DEFAULT_MAXIMUM)
            ),
            max_attempts=_integer(
                "attempts", contents.get("attempts", DEFAULT_ATTEMPTS)
            ),
        )
