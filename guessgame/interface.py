import logging
import os
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)

PROMPT = "Введите число: "


class UserInterface(ABC):
    @abstractmethod
    def get_user_guess(self):
        """Return the player's next guess as an integer.

        Raises ValueError if the input is not an integer.
        """

    @abstractmethod
    def show_message(self, message):
        """Display a message to the player."""


class ConsoleUserInterface(UserInterface):
    """Read guesses from standard input and print messages."""

    def __init__(self, prompt=PROMPT):
        self.prompt = prompt

    def get_user_guess(self):
        return int(input(self.prompt))

    def show_message(self, message):
        print(message)


class FileUserInterface(UserInterface):
    """Play through files instead of the console.

    Every guess request reads the whole input file as a single integer, so the
    file must be rewritten between guesses. Every message is appended to the
    output file as one line.

    Arguments:
        path: File holding the current guess.
        output_path: File receiving the messages. Defaults to ``path``.
        encoding: Encoding of both files.
    """

    def __init__(self, path, output_path=None, encoding="utf-8"):
        self.path = os.path.expanduser(path)
        self.output_path = (
            self.path if output_path is None else os.path.expanduser(output_path)
        )
        self.encoding = encoding

    def get_user_guess(self):
        with open(self.path, encoding=self.encoding) as f:
            contents = f.read()
        logger.debug("Read %r from %s", contents, self.path)
        return int(contents)

    def show_message(self, message):
        with open(self.output_path, "a", encoding=self.encoding) as f:
            f.write(f"{message}\n")
        logger.debug("Appended %r to %s", message, self.output_path)
