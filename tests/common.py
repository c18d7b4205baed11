from guessgame import UserInterface


class ScriptedUserInterface(UserInterface):
    """Feed guesses from a list and record every message."""

    def __init__(self, guesses=()):
        self.guesses = list(guesses)
        self.requests = 0
        self.messages = []

    def get_user_guess(self):
        self.requests += 1
        guess = self.guesses.pop(0)
        if isinstance(guess, str):
            return int(guess)
        return guess

    def show_message(self, message):
        self.messages.append(message)
