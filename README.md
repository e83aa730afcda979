# zorkxplorer

A small engine for branching text adventures. A story is a set of named
scenes, each with a script of text and a list of choices leading to other
scenes. Stories are described in YAML.

## Installation

```
pip install .
```

## Writing a story

A story file gives a title, a directory of scripts and the scenes. The first
scene listed is where the story starts.

```yaml
title: The Cave
scripts-path: scripts        # relative to the story file's directory
story:
  - name: entrance
    script: entrance.txt
    choices:
      - text: Go into the cave
        target: cave
      - text: Walk away
        target: home
  - name: cave
    script: cave.txt
  - name: home
    script: home.txt
```

- `title` is optional and defaults to `Untitled`.
- A scene's text is the whole content of its script file; a script file that
  cannot be read gives an empty text.
- A choice whose `target` names no scene makes loading fail with
  `ValueError`.
- A scene with no choices ends the story.

## Command line

```
zorkxplorer --story story.yml [--smart synonyms.yml | --html directory/]
```

The short forms `-s`, `-m` and `-h` are accepted too. `--story` is
mandatory, and `--smart` and `--html` cannot be given together. Invalid
options print `invalid options: ...` on standard error and the command exits
with status 1.

The command loads the story and prints its graph of scenes in Graphviz DOT
form on standard output, scenes in order of name. A scene with one choice
gives a single edge, a scene with several a braced list, and a scene without
choices no line:

```
digraph story {
    "entrance" -> {"cave" "home"};
}
```

## Playing from Python

```python
from zorkxplorer.errors import RunnerQuit
from zorkxplorer.runner import make_choice_runner
from zorkxplorer.story import make_story

story = make_story("story.yml")
runner = make_choice_runner(story)
try:
    runner.run()
except RunnerQuit:
    pass
```

`runner.run()` shows the current scene and reads the player's answer until a
scene without choices is reached, whose text is shown last. An answer that
cannot be used prints a message and the prompt `> ` is shown again. End of
input raises `RunnerQuit`.

The choice runner (`ChoiceRunner`) lists the choices by number and takes the
number at the start of the player's line; anything outside the range prints
`Please input an integer between 1 and N`.

The smart runner (`SmartRunner`, built with
`make_smart_runner(story, "synonyms.yml")`) accepts free text instead. Text is
lower-cased and split on anything that is not a letter or digit, and only
words listed in the synonyms file count. The first choice all of whose known
words appear in the player's line, directly or through a synonym, is taken;
otherwise it prints `I beg your pardon?`. The synonyms file is a list of
entries:

```yaml
- word: go
  synonyms: [walk, enter]
- word: cave
```

A synonyms file that is missing or malformed leaves the runner with no known
words.

Both runners read from standard input and write to standard output unless
other streams are passed as `input` and `output`.

`Story.to_dot()` returns the DOT graph as a string and `Story.display(out)`
writes it to a stream. `story.current` is the scene the player is at, and
`story.store.active_node` follows it.

## Variables

`zorkxplorer.store.Store` holds named integer variables; an unset variable
reads as 0. `zorkxplorer.vars.make_action` builds an action that changes a
variable (`assign`, `add`, `sub`), and `make_condition` one that compares it
(`equal`, `not_equal`, `greater`, `lower`, `greater_equal`, `lower_equal`);
an unknown operation or comparison raises `ValueError` when applied.
`Store.inventory()` returns the positive variables whose names do not end in
an underscore, sorted by name.

## What it does not do

- The command only prints the story graph; it does not play the story.
  `--smart` and `--html` are checked but have no effect.
- There is no HTML output.
- Conditions and actions can be attached to a choice with `Node.add_choice`,
  but choices are always listed and followed without evaluating them, and
  story files cannot declare them.
- There is no saving, restoring or undoing of a game.

## Tests

```
pip install .[test]
pytest
```