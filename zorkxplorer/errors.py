"""Exceptions raised while a story is being run."""


class RunnerQuit(Exception):
    """Raised when the player's input ends and the runner must stop."""


class RunnerInterrupt(Exception):
    """Raised when the player's input cannot be used; the message says why."""