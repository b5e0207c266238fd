"""
Shared test fixtures for the json-terminal test suite.
"""

import pytest

from json_terminal import CommandTable, Terminal

TOMATO_COMMANDS = [
    {
        "name": "feed-tomato",
        "options": [
            {"longName": "smile", "shortName": "s", "format": None},
            {"longName": "variety", "shortName": "v", "format": None},
            {"longName": "quantity", "shortName": "q", "format": None},
            {"longName": "matching", "shortName": "m", "format": "{size, color, variety}"},
            {"longName": "to", "shortName": "t", "format": "[]"},
            {
                "longName": "method",
                "shortName": "d",
                "format": "{name, parameters{duration, bothHands}, numTomatos}",
            },
            {"longName": "make-soup", "shortName": "p", "format": "{name, ingredients[]}"},
            {
                "longName": "matching-all",
                "shortName": "a",
                "format": "[{size, color, variety}]",
            },
        ],
    },
    {"name": "water-tomato", "options": [{"longName": "litres", "shortName": "l"}]},
]


@pytest.fixture
def tomato_commands():
    """Plain-dict command descriptions in the camel-cased JSON layout."""
    return TOMATO_COMMANDS


@pytest.fixture
def command_table(tomato_commands):
    """A fresh CommandTable for each test."""
    return CommandTable(tomato_commands)


@pytest.fixture
def terminal(command_table):
    """A Terminal over the tomato command table."""
    return Terminal(command_table)


@pytest.fixture
def feed_tomato(command_table):
    """The registered feed-tomato CommandDefinition."""
    return command_table.match("feed-tomato")
