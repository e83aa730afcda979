"""Branching text-adventure engine: YAML stories, choice and free-text runners, DOT graphs."""

__version__ = "0.1.0"