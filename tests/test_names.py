from __future__ import annotations

import random

import pytest

from ad_infinitum.models import names as names_module
from ad_infinitum.models.body import PlanetZone, generate_planet
from ad_infinitum.models.names import (
    BUNDLED_NAME_LIST,
    ResourceUnavailableError,
    generate_system_name,
    load_planet_names,
    parse_name_list,
)


@pytest.fixture
def no_user_list(monkeypatch, tmp_path):
    monkeypatch.setattr(names_module, "user_name_list_path", lambda: tmp_path / "missing.txt")


def test_parse_drops_blank_lines():
    assert parse_name_list("Io\n\nEuropa\n  \nCallisto\n") == ("Io", "Europa", "Callisto")


def test_parse_handles_crlf():
    assert parse_name_list("Io\r\nEuropa\r\n") == ("Io", "Europa")


def test_load_explicit_path(tmp_path):
    path = tmp_path / "names.txt"
    path.write_text("Tau Ceti e\nKepler\n", encoding="utf-8")
    assert load_planet_names(path) == ("Tau Ceti e", "Kepler")


def test_loaded_list_is_cached(tmp_path):
    path = tmp_path / "names.txt"
    path.write_text("Vulcan\n", encoding="utf-8")
    first = load_planet_names(path)
    path.write_text("Romulus\n", encoding="utf-8")
    assert load_planet_names(path) is first


def test_bundled_list_is_default(no_user_list):
    names = load_planet_names()
    assert names
    assert names == parse_name_list(BUNDLED_NAME_LIST.read_text(encoding="utf-8"))


def test_user_list_overrides_bundled(monkeypatch, tmp_path):
    user_file = tmp_path / "planet_names.txt"
    user_file.write_text("Solaris\n", encoding="utf-8")
    monkeypatch.setattr(names_module, "user_name_list_path", lambda: user_file)
    assert load_planet_names() == ("Solaris",)


def test_missing_file_raises(tmp_path):
    with pytest.raises(ResourceUnavailableError):
        load_planet_names(tmp_path / "nope.txt")


def test_empty_file_raises(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("\n\n", encoding="utf-8")
    with pytest.raises(ResourceUnavailableError):
        load_planet_names(path)


def test_non_utf8_file_raises(tmp_path):
    path = tmp_path / "latin1.txt"
    path.write_bytes(b"\xff\xfe\xfa")
    with pytest.raises(ResourceUnavailableError):
        load_planet_names(path)


def test_planet_generation_surfaces_missing_list(monkeypatch, tmp_path):
    monkeypatch.setattr(names_module, "BUNDLED_NAME_LIST", tmp_path / "gone.txt")
    monkeypatch.setattr(names_module, "user_name_list_path", lambda: tmp_path / "missing.txt")
    with pytest.raises(ResourceUnavailableError):
        generate_planet(PlanetZone.INNER_RING, random.Random(1))


def test_system_names_are_seeded():
    assert generate_system_name(random.Random(3)) == generate_system_name(random.Random(3))
    assert all(generate_system_name(random.Random(i)) for i in range(50))
