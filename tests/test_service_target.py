import dataclasses

import pytest

from genaikit.model_iden import ModelIden
from genaikit.resolver.auth_data import AuthData
from genaikit.resolver.endpoint import Endpoint
from genaikit.resolver.service_target import ServiceTarget


def _target() -> ServiceTarget:
    return ServiceTarget(
        endpoint=Endpoint.from_static("http://localhost:11434/v1/"),
        auth=AuthData.from_single("placeholder"),
        model=ModelIden("Ollama", "llama3.2:3b"),
    )


def test_fields_hold_given_values():
    target = _target()
    assert target.endpoint.base_url == "http://localhost:11434/v1/"
    assert target.auth.single_key_value() == "placeholder"
    assert target.model.model_name == "llama3.2:3b"


def test_replace_changes_only_one_field():
    target = _target()
    other = dataclasses.replace(target, endpoint=Endpoint.from_owned("http://localhost:8080/"))
    assert other.endpoint.base_url == "http://localhost:8080/"
    assert other.model == target.model
    assert other.auth is target.auth


def test_target_is_frozen():
    target = _target()
    with pytest.raises(dataclasses.FrozenInstanceError):
        target.model = ModelIden("Ollama", "other")  # type: ignore[misc]
    assert target.model.model_name == "llama3.2:3b"


def test_equal_targets_compare_equal():
    first = _target()
    second = _target()
    assert first == second
    assert first.endpoint.base_url == second.endpoint.base_url
    moved = dataclasses.replace(first, endpoint=Endpoint.from_owned("http://localhost:9000/"))
    assert (moved == first) is False