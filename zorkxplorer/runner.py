"""Runners that play a story: by numbered choices or by free-form text."""

from __future__ import annotations

import re
import string
import sys
from abc import ABC, abstractmethod
from os import PathLike
from typing import Optional, TextIO, Union

import yaml

from .errors import RunnerInterrupt, RunnerQuit
from .story import Story

_LEADING_NUMBER = re.compile(r"\s*\+?(\d+)")
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_WORD_SEPARATORS = re.compile(r"[^a-z0-9]+")
_PARDON = "I beg your pardon?"


class Runner(ABC):
    """Plays a story."""

    def __init__(self, story: Story) -> None:
        self.story = story

    @abstractmethod
    def run(self) -> None:
        """Play the story."""

    def _move_to(self, node) -> None:
        self.story.current = node
        self.story.store.active_node = node


class InteractiveRunner(Runner):
    """Plays a story by reading the player's lines and writing the script."""

    def __init__(
        self,
        story: Story,
        input: Optional[TextIO] = None,
        output: Optional[TextIO] = None,
    ) -> None:
        super().__init__(story)
        self.input = sys.stdin if input is None else input
        self.output = sys.stdout if output is None else output

    def run(self) -> None:
        """Loop until a node without choices is reached; RunnerQuit ends early."""
        while self.story.current is not None and self.story.current.list_choices():
            self.print_script()
            while True:
                self.output.write("> ")
                try:
                    self.process_input()
                except RunnerInterrupt as interrupt:
                    self.output.write(f"{interrupt}\n")
                else:
                    break
        self.print_script()

    def print_script(self) -> None:
        """Write the current node's text."""
        current = self.story.current
        if current is not None:
            self.output.write(f"{current.text}\n")

    @abstractmethod
    def process_input(self) -> None:
        """Read one line and act on it."""

    def _read_line(self) -> str:
        line = self.input.readline()
        if not line:
            raise RunnerQuit()
        return line[:-1] if line.endswith("\n") else line


class ChoiceRunner(InteractiveRunner):
    """Lists the choices by number and reads the chosen number."""

    def print_script(self) -> None:
        """Write the node's text followed by its numbered choices."""
        super().print_script()
        current = self.story.current
        if current is None:
            return
        choices = current.list_choices()
        if not choices:
            return
        listing = "".join(f"{number}. {text}\n" for number, text in enumerate(choices, 1))
        self.output.write(f"\n{listing}\n")

    def process_input(self) -> None:
        """Follow the numbered choice; raise RunnerInterrupt if it is not valid."""
        line = self._read_line()
        current = self.story.current
        if current is None:
            return
        count = len(current.list_choices())
        match = _LEADING_NUMBER.match(line)
        number = int(match.group(1)) if match else 0
        if not 1 <= number <= count:
            raise RunnerInterrupt(f"Please input an integer between 1 and {count}")
        self._move_to(current.get_choice(number - 1))


class SmartRunner(InteractiveRunner):
    """Matches free-form input against choice texts using known words and synonyms."""

    def __init__(
        self,
        story: Story,
        synonyms_path: Union[str, PathLike],
        input: Optional[TextIO] = None,
        output: Optional[TextIO] = None,
    ) -> None:
        super().__init__(story, input, output)
        self.synonyms: dict[str, set[str]] = {}
        self.known_words: set[str] = set()
        try:
            self._load_synonyms(synonyms_path)
        except Exception:
            pass

    def _load_synonyms(self, synonyms_path: Union[str, PathLike]) -> None:
        with open(synonyms_path, encoding="utf-8") as source:
            entries = yaml.safe_load(source)
        for entry in entries:
            word = _scalar(entry["word"])
            self.known_words.add(word)
            for synonym in entry.get("synonyms") or []:
                synonym = _scalar(synonym)
                self.synonyms.setdefault(word, set()).add(synonym)
                self.known_words.add(synonym)

    def process_input(self) -> None:
        """Follow the first choice the input matches; otherwise raise RunnerInterrupt."""
        user_tokens = self.tokenize(self._read_line())
        if not user_tokens:
            raise RunnerInterrupt(_PARDON)
        current = self.story.current
        if current is None:
            return
        for index, text in enumerate(current.list_choices()):
            if not self.has_unmatched_token(user_tokens, self.tokenize(text)):
                self._move_to(current.get_choice(index))
                return
        raise RunnerInterrupt(_PARDON)

    def tokenize(self, text: str) -> set[str]:
        """Return the known words of text, lower-cased, split on non-alphanumerics."""
        words = _WORD_SEPARATORS.split(text.translate(_ASCII_LOWER))
        return {word for word in words if word and word in self.known_words}

    def has_unmatched_token(self, user_tokens: set[str], choice_tokens: set[str]) -> bool:
        """Tell whether some choice token is absent from the input, synonyms included."""
        return any(
            token not in user_tokens
            and not (self.synonyms.get(token, set()) & user_tokens)
            for token in choice_tokens
        )


def _scalar(value: object) -> str:
    if isinstance(value, (dict, list)):
        raise TypeError(f"expected a scalar, got {value!r}")
    return str(value)


def make_choice_runner(
    story: Story, input: Optional[TextIO] = None, output: Optional[TextIO] = None
) -> ChoiceRunner:
    """Build a choice runner, reading stdin and writing stdout by default."""
    return ChoiceRunner(story, input, output)


def make_smart_runner(
    story: Story,
    synonyms_path: Union[str, PathLike],
    input: Optional[TextIO] = None,
    output: Optional[TextIO] = None,
) -> SmartRunner:
    """Build a smart runner with the synonyms file, reading stdin and writing stdout by default."""
    return SmartRunner(story, synonyms_path, input, output)