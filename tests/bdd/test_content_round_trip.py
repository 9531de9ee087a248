"""Behaviour tests for dumping content documents and reading them back."""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from pytest_bdd import given, scenarios, then, when

from folio_content import dump_document, parse_document

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "content_round_trip.feature"
)
scenarios(FEATURE_FILE)

CONTENT_PATH = Path(__file__).resolve().parents[2] / "data" / "content.yaml"

ScenarioState = dict[str, typ.Any]


@pytest.fixture
def scenario_state() -> ScenarioState:
    return {}


@given("the sample site content document")
def given_sample_document(scenario_state: ScenarioState) -> None:
    scenario_state["document"] = parse_document(
        CONTENT_PATH.read_text(encoding="utf-8")
    )


@given('a document holding the strings "true", "42" and "1.5"')
def given_scalar_lookalikes(scenario_state: ScenarioState) -> None:
    scenario_state["document"] = parse_document(
        "flags:\n  a: \"true\"\n  b: '42'\n  c: \"1.5\"\n"
    )


@when("the document is dumped and parsed again")
def when_round_tripped(scenario_state: ScenarioState) -> None:
    text = dump_document(scenario_state["document"])
    scenario_state["text"] = text
    scenario_state["reparsed"] = parse_document(text)


@then("the reparsed document equals the original")
def then_documents_equal(scenario_state: ScenarioState) -> None:
    assert scenario_state["reparsed"] == scenario_state["document"]


@then("the dumped text quotes every value")
def then_values_quoted(scenario_state: ScenarioState) -> None:
    assert scenario_state["text"] == 'flags:\n  a: "true"\n  b: "42"\n  c: "1.5"\n'
