"""Testes para Session."""

from __future__ import annotations

from wavius.config.settings import WaviusSettings
from wavius.connectors.session import Session


def test_from_settings_seeds_defaults() -> None:
    session = Session.from_settings(
        WaviusSettings(token="tok", default_instance_id="i1")
    )
    assert session.get_token() == "tok"
    assert session.get_instance_id() == "i1"


def test_empty_settings_leave_fields_unset() -> None:
    session = Session.from_settings(WaviusSettings())
    assert session.get_token() is None
    assert session.get_instance_id() is None


def test_fields_are_independent() -> None:
    session = Session()
    session.set_instance_id("i1")
    assert session.get_token() is None
    session.set_token("abc")
    assert session.get_instance_id() == "i1"
    session.set_instance_id("")
    assert session.get_instance_id() is None
    assert session.get_token() == "abc"
