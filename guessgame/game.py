import logging

logger = logging.getLogger(__name__)

BANNER = "Угадайте число от {minimum} до {maximum}. У вас {attempts} попыток."
HIGHER = "Больше!"
LOWER = "Меньше!"
REMAINING = "Осталось попыток: {attempts}"
WIN = "Поздравляем! Вы угадали число!"
LOSS = "Попытки закончились. Загаданное число: {target}"


class Game:
    """One number guessing game.

    Arguments:
        number_generator: A NumberGenerator that draws the target number.
        settings: The GameSettings for the range and the number of attempts.
        user_interface: A UserInterface to get guesses from and to send
            messages to.
    """

    def __init__(self, number_generator, settings, user_interface):
        self.number_generator = number_generator
        self.settings = settings
        self.user_interface = user_interface

    def play(self):
        """Run a single playthrough until the number is found or attempts run out.

        The outcome is only reported through the user interface. Errors raised
        by the user interface, such as a guess that is not an integer, end the
        playthrough and propagate to the caller.
        """
        settings = self.settings
        ui = self.user_interface

        target = self.number_generator.generate(
            settings.min_number, settings.max_number
        )
        attempts_left = settings.max_attempts
        logger.debug(
            "Starting playthrough in [%s, %s] with %s attempts",
            settings.min_number,
            settings.max_number,
            attempts_left,
        )

        ui.show_message(
            BANNER.format(
                minimum=settings.min_number,
                maximum=settings.max_number,
                attempts=attempts_left,
            )
        )

        while attempts_left > 0:
            guess = ui.get_user_guess()

            if guess == target:
                ui.show_message(WIN)
                logger.info(
                    "Won with %s attempt(s) to spare", attempts_left - 1
                )
                return

            attempts_left -= 1
            ui.show_message(HIGHER if guess < target else LOWER)
            ui.show_message(REMAINING.format(attempts=attempts_left))

        ui.show_message(LOSS.format(target=target))
        logger.info("Lost, the number was %s", target)
