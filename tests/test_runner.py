import io

import pytest

from zorkxplorer.errors import RunnerInterrupt, RunnerQuit
from zorkxplorer.node import Node
from zorkxplorer.runner import (
    ChoiceRunner,
    SmartRunner,
    make_choice_runner,
    make_smart_runner,
)
from zorkxplorer.store import Store
from zorkxplorer.story import Story


def _story():
    start = Node("start", "Welcome")
    left = Node("left", "Left room")
    right = Node("right", "Right room")
    start.add_choice(left, "Go left")
    start.add_choice(right, "Go right")
    nodes = {"start": start, "left": left, "right": right}
    return Story("Test", nodes, start, Store(active_node=start))


SYNONYMS = """\
- word: go
  synonyms: [walk]
- word: left
  synonyms: [west]
- word: right
  synonyms: [east]
"""


@pytest.fixture
def synonyms_file(tmp_path):
    path = tmp_path / "synonyms.yml"
    path.write_text(SYNONYMS)
    return path


def test_choice_run_transcript():
    story = _story()
    out = io.StringIO()
    runner = make_choice_runner(story, io.StringIO("1\n"), out)
    runner.run()
    assert out.getvalue() == "Welcome\n\n1. Go left\n2. Go right\n\n> Left room\n"
    assert story.current is story.nodes["left"]
    assert story.store.active_node is story.nodes["left"]


def test_choice_runner_prints_numbered_choices():
    out = io.StringIO()
    runner = make_choice_runner(_story(), io.StringIO(), out)
    assert isinstance(runner, ChoiceRunner)
    runner.print_script()
    assert out.getvalue() == "Welcome\n\n1. Go left\n2. Go right\n\n"


@pytest.mark.parametrize("line", ["0", "3", "abc", "-1", ""])
def test_choice_invalid_input(line):
    runner = ChoiceRunner(_story(), io.StringIO(line + "\n"), io.StringIO())
    with pytest.raises(RunnerInterrupt, match="Please input an integer between 1 and 2"):
        runner.process_input()


def test_choice_leading_number_accepted():
    story = _story()
    runner = ChoiceRunner(story, io.StringIO("  2 please\n"), io.StringIO())
    runner.process_input()
    assert story.current is story.nodes["right"]


def test_choice_retries_after_invalid():
    story = _story()
    out = io.StringIO()
    ChoiceRunner(story, io.StringIO("9\n2\n"), out).run()
    assert "Please input an integer between 1 and 2\n> " in out.getvalue()
    assert story.current is story.nodes["right"]


def test_end_of_input_quits():
    runner = ChoiceRunner(_story(), io.StringIO(""), io.StringIO())
    with pytest.raises(RunnerQuit):
        runner.run()


def test_node_without_choices_only_prints_text():
    story = _story()
    story.current = story.nodes["right"]
    out = io.StringIO()
    ChoiceRunner(story, io.StringIO(""), out).run()
    assert out.getvalue() == "Right room\n"


def test_tokenize_keeps_known_words(synonyms_file):
    runner = make_smart_runner(_story(), synonyms_file, io.StringIO(), io.StringIO())
    assert isinstance(runner, SmartRunner)
    assert runner.tokenize("Walk WEST, now!") == {"walk", "west"}
    assert runner.tokenize("nothing here") == set()


def test_has_unmatched_token(synonyms_file):
    runner = SmartRunner(_story(), synonyms_file, io.StringIO(), io.StringIO())
    assert not runner.has_unmatched_token({"walk", "west"}, {"go", "left"})
    assert runner.has_unmatched_token({"walk"}, {"go", "left"})
    assert not runner.has_unmatched_token({"walk"}, set())


def test_smart_follows_synonyms(synonyms_file):
    story = _story()
    out = io.StringIO()
    SmartRunner(story, synonyms_file, io.StringIO("walk east\n"), out).run()
    assert story.current is story.nodes["right"]
    assert out.getvalue().endswith("> Right room\n")


@pytest.mark.parametrize("line", ["", "hello there", "go"])
def test_smart_pardon(synonyms_file, line):
    runner = SmartRunner(_story(), synonyms_file, io.StringIO(line + "\n"), io.StringIO())
    with pytest.raises(RunnerInterrupt, match=r"I beg your pardon\?"):
        runner.process_input()


def test_smart_missing_synonyms_file(tmp_path):
    runner = SmartRunner(_story(), tmp_path / "absent.yml", io.StringIO("go left\n"), io.StringIO())
    assert runner.known_words == set()
    with pytest.raises(RunnerInterrupt, match=r"I beg your pardon\?"):
        runner.process_input()


def test_smart_end_of_input_quits(synonyms_file):
    runner = SmartRunner(_story(), synonyms_file, io.StringIO(""), io.StringIO())
    with pytest.raises(RunnerQuit):
        runner.process_input()