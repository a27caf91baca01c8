import pytest

from genaikit.model_iden import ModelIden
from genaikit.resolver.errors import CustomResolverError
from genaikit.resolver.model_mapper import ModelMapper


MODEL = ModelIden("OpenAI", "gpt-4o-mini")


def test_mapper_renames_model():
    mapper = ModelMapper.from_mapper_fn(lambda model_iden: model_iden.from_name("gpt-4o"))
    mapped = mapper.map_model(MODEL)
    assert mapped.model_name == "gpt-4o"
    assert mapped.adapter_kind == MODEL.adapter_kind


def test_identity_mapper_keeps_model():
    mapper = ModelMapper.from_mapper_fn(lambda model_iden: model_iden)
    assert mapper.map_model(MODEL) is MODEL


def test_mapper_can_change_adapter():
    mapper = ModelMapper.from_mapper_fn(lambda model_iden: ModelIden("Ollama", model_iden.model_name))
    mapped = mapper.map_model(MODEL)
    assert mapped.adapter_kind == "Ollama"
    assert mapped.model_name == MODEL.model_name


def test_mapper_error_propagates():
    def mapper_fn(model_iden):
        raise CustomResolverError("unknown model")

    mapper = ModelMapper.from_mapper_fn(mapper_fn)
    with pytest.raises(CustomResolverError) as info:
        mapper.map_model(MODEL)
    assert info.value.message == "unknown model"


def test_non_callable_is_rejected():
    with pytest.raises(TypeError):
        ModelMapper.from_mapper_fn(None)