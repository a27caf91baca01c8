import pytest

from genaikit.model_iden import ModelIden
from genaikit.resolver.auth_data import AuthData
from genaikit.resolver.auth_resolver import AuthResolver
from genaikit.resolver.errors import CustomResolverError


MODEL = ModelIden("OpenAI", "gpt-4o-mini")


@pytest.mark.asyncio
async def test_sync_fn_returns_auth_data():
    auth = AuthData.from_env("OPENAI_API_KEY")
    resolver = AuthResolver.from_resolver_fn(lambda model_iden: auth)
    assert await resolver.resolve(MODEL) is auth
    assert resolver.is_async is False


@pytest.mark.asyncio
async def test_sync_fn_may_return_none():
    resolver = AuthResolver.from_resolver_fn(lambda model_iden: None)
    assert await resolver.resolve(MODEL) is None


@pytest.mark.asyncio
async def test_fn_receives_model_iden():
    seen = []

    def resolver_fn(model_iden):
        seen.append(model_iden)
        return AuthData.from_single("placeholder")

    resolver = AuthResolver.from_resolver_fn(resolver_fn)
    result = await resolver.resolve(MODEL)
    assert seen == [MODEL]
    assert result.single_key_value() == "placeholder"


@pytest.mark.asyncio
async def test_async_fn_is_awaited():
    async def resolver_fn(model_iden):
        return AuthData.from_single("token")

    resolver = AuthResolver.from_resolver_async_fn(resolver_fn)
    result = await resolver.resolve(MODEL)
    assert resolver.is_async is True
    assert result.single_key_value() == "token"


@pytest.mark.asyncio
async def test_resolver_error_propagates():
    def resolver_fn(model_iden):
        raise CustomResolverError("no key")

    resolver = AuthResolver.from_resolver_fn(resolver_fn)
    with pytest.raises(CustomResolverError) as info:
        await resolver.resolve(MODEL)
    assert info.value.message == "no key"


def test_non_callable_is_rejected():
    with pytest.raises(TypeError):
        AuthResolver.from_resolver_fn("not callable")


def test_repr_names_kind():
    resolver = AuthResolver.from_resolver_async_fn(lambda m: None)
    assert "ResolverAsyncFn" in repr(resolver)