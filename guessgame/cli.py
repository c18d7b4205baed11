"""Command line entry point.

Example usage:
  guessgame
  guessgame --minimum 1 --maximum 10 --attempts 3
  guessgame --input-file guess.txt --output-file log.txt
  guessgame @settings.yaml

To see all options:
  guessgame -h

"""

import logging
import sys

from coleo import Option, default, run_cli
from ptera import tooled

from .game import Game
from .generator import FixedNumberGenerator, RandomNumberGenerator
from .interface import ConsoleUserInterface, FileUserInterface
from .settings import (
    DEFAULT_ATTEMPTS,
    DEFAULT_MAXIMUM,
    DEFAULT_MINIMUM,
    ConfigurationError,
    GameSettings,
)


@tooled
def play():
    """Guess the number."""
    # Smallest number that can be drawn
    minimum: Option & int = default(DEFAULT_MINIMUM)
    # Largest number that can be drawn
    maximum: Option & int = default(DEFAULT_MAXIMUM)
    # Number of guesses allowed
    # [alias: -n]
    attempts: Option & int = default(DEFAULT_ATTEMPTS)

    # [group: testing]
    # Seed for the random number generator
    seed: Option & int = default(None)
    # [group: testing]
    # Force the number to guess (defaults to random)
    target: Option & int = default(None)

    # [group: files]
    # Read each guess from this file instead of the console
    # [metavar: FILE]
    input_file: Option = default(None)
    # [group: files]
    # Append messages to this file (defaults to the input file)
    # [metavar: FILE]
    output_file: Option = default(None)

    # Log debug information to stderr
    verbose: Option & bool = default(False)

    if verbose:
        logging.basicConfig(stream=sys.stderr)
        logging.getLogger("guessgame").setLevel(logging.DEBUG)

    settings = GameSettings(minimum, maximum, attempts)

    if target is None:
        generator = RandomNumberGenerator(seed)
    elif settings.contains(target):
        generator = FixedNumberGenerator(target)
    else:
        raise ConfigurationError(
            f"Target {target} is outside of [{minimum}, {maximum}]"
        )

    if input_file is None:
        user_interface = ConsoleUserInterface()
    else:
        user_interface = FileUserInterface(input_file, output_file)

    Game(generator, settings, user_interface).play()


def main(argv=None):
    """Play one game with the options in argv (defaults to sys.argv[1:])."""
    try:
        run_cli(play, argv=argv, expand="@")
    except ConfigurationError as err:
        print(f"error: {err}", file=sys.stderr)
        sys.exit(1)
