"""Behaviour tests for parsing hand-written content documents.

The scenarios cover the parts of the grammar authors most often trip over:
nested sequences of mappings, hash signs inside quotes and indentation
mistakes that must be reported with a line number.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path
from textwrap import dedent

import pytest
from pytest_bdd import given, parsers, scenarios, then, when

from folio_content import ContentParseError, ParseOptions, parse_document
from folio_content.values import to_python

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "content_parsing.feature"
)
scenarios(FEATURE_FILE)

ScenarioState = dict[str, typ.Any]


@pytest.fixture
def scenario_state() -> ScenarioState:
    """Share the document text and parse outcome between steps."""
    return {}


@given("a content document with a nested project list")
def given_project_list(scenario_state: ScenarioState) -> None:
    scenario_state["text"] = dedent(
        """\
        projects:
          - id: snakeai
            title: SnakeAI
            tags: [Python, "Machine Learning"]
          - id: pixel-engine
            title: Pixel Engine
        """
    )


@given("a content document with a quoted hash sign")
def given_quoted_hash(scenario_state: ScenarioState) -> None:
    scenario_state["text"] = 'site:\n  title: "Issue #42: fixed"  # changelog\n'


@given("a content document with a misindented line")
def given_misindented(scenario_state: ScenarioState) -> None:
    scenario_state["text"] = "site:\n  title: Home\n     author: Ada\n"


@given("a content document that repeats the site title")
def given_repeated_title(scenario_state: ScenarioState) -> None:
    scenario_state["text"] = "site:\n  title: First\n  title: Second\n"


def _parse(scenario_state: ScenarioState, options: ParseOptions | None) -> None:
    try:
        scenario_state["document"] = parse_document(
            scenario_state["text"], options=options
        )
    except ContentParseError as exc:
        scenario_state["error"] = exc


@when("the document is parsed")
def when_parsed(scenario_state: ScenarioState) -> None:
    _parse(scenario_state, None)


@when(
    parsers.parse('the document is parsed with the "{policy}" duplicate key policy')
)
def when_parsed_with_policy(scenario_state: ScenarioState, policy: str) -> None:
    _parse(scenario_state, ParseOptions(duplicate_keys=typ.cast("typ.Any", policy)))


@then(parsers.parse('the first project has the title "{title}"'))
def then_project_title(scenario_state: ScenarioState, title: str) -> None:
    projects = to_python(scenario_state["document"])["projects"]
    assert projects[0]["title"] == title


@then(parsers.parse('the first project has the tags "{tags}"'))
def then_project_tags(scenario_state: ScenarioState, tags: str) -> None:
    projects = to_python(scenario_state["document"])["projects"]
    assert projects[0]["tags"] == tags.split(", ")


@then(parsers.parse('the site title is "{title}"'))
def then_site_title(scenario_state: ScenarioState, title: str) -> None:
    assert "error" not in scenario_state, scenario_state.get("error")
    document = to_python(scenario_state["document"])
    assert document["site"]["title"] == title


@then(parsers.parse('parsing fails with "{message}"'))
def then_parse_fails(scenario_state: ScenarioState, message: str) -> None:
    error = scenario_state.get("error")
    assert error is not None, "expected the document to be rejected"
    assert str(error).startswith(message), str(error)
