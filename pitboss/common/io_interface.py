"""
This module contains the IOInterface abstract base class and its implementations.

Every yes/no question the game asks goes through `IOInterface.confirm`, which
keeps asking until it gets a `y` or an `n`.
"""

from abc import ABC, abstractmethod


class IOInterface(ABC):
    """
    Abstract base class for an IO interface.

    This class defines the interface for input/output operations in the game.
    """

    @abstractmethod
    def output(self, message: str) -> None:
        """Output a message to the interface."""
        pass

    @abstractmethod
    def input(self, prompt: str) -> str:
        """Get input from the user with a prompt."""
        pass

    def confirm(self, prompt: str) -> bool:
        """
        Ask a yes/no question.

        Answers other than a lowercase `y` or `n` (surrounding whitespace is
        ignored) are dropped and the question is asked again.
        """
        while True:
            answer = self.input(f"{prompt} (y/n): ").strip()
            if answer == "y":
                return True
            if answer == "n":
                return False


class DummyIOInterface(IOInterface):
    """
    A dummy IO interface for simulation purposes. Does not perform any actual IO.

    Every question is answered with `n`.
    """

    def output(self, message: str) -> None:
        """Simulates output operation."""
        pass

    def input(self, prompt: str) -> str:
        """Simulates input operation."""
        return "n"


class TestIOInterface(IOInterface):
    """
    A test IO interface for testing purposes. Collects output messages and
    replays queued input responses.

    Methods
    -------
    def output(self, message):
        Collect an output message.

    def input(self, prompt):
        Return the next queued response.

    def add_input(self, *responses):
        Queue responses for later prompts.
    """

    __test__ = False

    def __init__(self, responses=None):
        self.sent_messages = []
        self.prompts = []
        self.input_responses = list(responses or [])

    def output(self, message: str) -> None:
        self.sent_messages.append(message)

    def input(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.input_responses:
            return self.input_responses.pop(0)
        raise ValueError("No more input responses left in TestIOInterface queue.")

    def add_input(self, *responses: str) -> None:
        """Queue responses for later prompts."""
        self.input_responses.extend(responses)


class ConsoleIOInterface(IOInterface):
    """
    A console IO interface for interactive gameplay.

    Methods
    -------
    def output(self, message: str):
        Output a message to the console.

    def input(self, prompt: str):
        Get input from the console. End of input reads as `n`.
    """

    def output(self, message: str) -> None:
        print(message)

    def input(self, prompt: str) -> str:
        try:
            return input(prompt)
        except EOFError:
            print()
            return "n"


class LoggingIOInterface(IOInterface):
    """
    A logging IO interface for recording purposes. Writes output messages to a log file.

    Input is simulated: every question is logged and answered with `n`.
    """

    def __init__(self, log_file_path: str):
        self.log_file_path = log_file_path

    def output(self, message: str) -> None:
        """Write an output message to the log file."""
        with open(self.log_file_path, "a", encoding="utf-8") as log_file:
            log_file.write(message + "\n")

    def input(self, prompt: str) -> str:
        """Log the prompt and answer no."""
        self.output(f"[INPUT PROMPT] {prompt}")
        return "n"
