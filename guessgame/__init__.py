from .game import Game
from .generator import (
    FixedNumberGenerator,
    NumberGenerator,
    RandomNumberGenerator,
)
from .interface import ConsoleUserInterface, FileUserInterface, UserInterface
from .settings import ConfigurationError, GameSettings
from .version import version
