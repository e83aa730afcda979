"""Command line: read the options, load the story and print its graph."""

from __future__ import annotations

import enum
import getopt
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from .story import make_story

_SHORT_OPTIONS = "s:m:h:"
_LONG_OPTIONS = ["story=", "smart=", "html="]
_DEFAULT_NAME = "zorkxplorer"


class StoryType(enum.Enum):
    """How the story is to be played."""

    CHOICE = "choice"
    SMART = "smart"
    HTML = "html"


@dataclass
class Config:
    """Options read from the command line."""

    story_path: Optional[Path] = None
    story_type: StoryType = StoryType.CHOICE
    story_arg: Optional[Path] = None


def _usage(name: str) -> str:
    return (
        f"usage: {name} (--story <story.yml>)"
        " [--smart <synonyms.yml> | --html <directory/>]"
    )


def parse_options(argv: Sequence[str]) -> Config:
    """Parse a full argument vector (program name first); raise ValueError if invalid."""
    name = argv[0] if argv else _DEFAULT_NAME
    try:
        options, _operands = getopt.gnu_getopt(
            list(argv[1:]), _SHORT_OPTIONS, _LONG_OPTIONS
        )
    except getopt.GetoptError:
        raise ValueError(_usage(name)) from None

    config = Config()
    story_path = ""
    for option, value in options:
        if option in ("-s", "--story"):
            story_path = value
        elif option in ("-m", "--smart"):
            if config.story_type is StoryType.HTML:
                raise ValueError("incompatble options: `--smart` and `--html`")
            config.story_type = StoryType.SMART
            config.story_arg = Path(value)
        elif option in ("-h", "--html"):
            if config.story_type is StoryType.SMART:
                raise ValueError("incompatible options: `--smart` and `--html`")
            config.story_type = StoryType.HTML
            config.story_arg = Path(value)
        else:
            raise ValueError(_usage(name))

    if not story_path:
        raise ValueError("option '--story' is mandatory")
    config.story_path = Path(story_path)
    return config


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load the story named on the command line and print its graph in dot syntax."""
    if argv is None:
        argv = sys.argv
    try:
        config = parse_options(argv)
    except ValueError as error:
        sys.stderr.write(f"invalid options: {error}\n")
        return 1

    story = make_story(config.story_path)
    story.display(sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())