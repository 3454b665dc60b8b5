import json

import pytest

from kv_config import __main__ as cli
from kv_config.backends.consul import ConsulBackend
from kv_config.backends.in_memory import InMemoryAsyncBackend
from kv_config.stores.factory import available_store_types, create_store
from kv_config.stores.kv_store import KVConfigStore


def test_available_store_types() -> None:
    assert available_store_types() == ["consul", "memory", "nats", "postgres", "redis"]


@pytest.mark.asyncio
async def test_create_store_splits_store_and_backend_options() -> None:
    store = create_store("memory", {"prefix": "config", "delimiter": "/", "data": {"config/a/b": "1"}})

    assert isinstance(store, KVConfigStore)
    assert store.prefix == "config/"
    assert await store.get_document() == {"a": {"b": "1"}}


@pytest.mark.asyncio
async def test_create_store_passes_connection_options_to_backend() -> None:
    store = create_store("consul", {"host": "consul.example", "port": 8501, "acl_token": "t0ken"})
    try:
        backend = store._backend
        assert isinstance(backend, ConsulBackend)
        assert str(backend._client.base_url) == "http://consul.example:8501/"
        assert backend._client.headers["X-Consul-Token"] == "t0ken"
    finally:
        await store.close()


def test_create_store_rejects_unknown_type() -> None:
    with pytest.raises(ValueError, match="unknown store type 'zookeeper'"):
        _ = create_store("zookeeper", {})


def test_create_store_rejects_unknown_backend_option() -> None:
    with pytest.raises(TypeError):
        _ = create_store("memory", {"bogus": True})


def test_cli_prints_document(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    seen: dict[str, object] = {}

    def fake_create_store(store_type: str, configuration: dict[str, object]) -> KVConfigStore:
        seen.update(store_type=store_type, configuration=configuration)
        backend = InMemoryAsyncBackend({"app.db.host": "localhost", "app.db.port": "5432"})
        return KVConfigStore.from_config(backend, configuration)

    monkeypatch.setattr(cli, "create_store", fake_create_store)

    cli.main(["--type", "consul", "--prefix", "app", "--delimiter", ".", "-o", "host=consul", "-o", "port=8500"])

    assert json.loads(capsys.readouterr().out) == {"db": {"host": "localhost", "port": "5432"}}
    assert seen == {
        "store_type": "consul",
        "configuration": {"host": "consul", "port": 8500, "prefix": "app", "delimiter": "."},
    }


def test_cli_version(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--version"])

    assert excinfo.value.code == 0
    assert capsys.readouterr().out.strip() == "0.1.0"


def test_cli_rejects_malformed_option(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["-o", "no-equals-sign"])

    assert excinfo.value.code == 2
    assert "expected KEY=VALUE" in capsys.readouterr().err


def _capture_cli_configuration(monkeypatch: pytest.MonkeyPatch) -> dict[str, object]:
    seen: dict[str, object] = {}

    def fake_create_store(store_type: str, configuration: dict[str, object]) -> KVConfigStore:
        seen.update(configuration)
        return KVConfigStore.from_config(InMemoryAsyncBackend(), configuration)

    monkeypatch.setattr(cli, "create_store", fake_create_store)
    return seen


def test_cli_converts_boolean_options(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    seen = _capture_cli_configuration(monkeypatch)

    cli.main(["-o", "ssl=false", "-o", "create_bucket=True", "-o", "timeout=2.5"])

    assert capsys.readouterr().out.strip() == "{}"
    assert seen["ssl"] is False
    assert seen["create_bucket"] is True
    assert seen["timeout"] == 2.5


def test_cli_keeps_numeric_looking_text_options_as_strings(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    seen = _capture_cli_configuration(monkeypatch)

    cli.main(["-o", "acl_token=12345", "-o", "password=0123", "-o", "port=8500"])

    _ = capsys.readouterr()
    assert seen["acl_token"] == "12345"
    assert seen["password"] == "0123"
    assert seen["port"] == 8500


def test_cli_rejects_invalid_boolean_option(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["-o", "ssl=maybe"])

    assert excinfo.value.code == 2
    assert "invalid value for ssl" in capsys.readouterr().err


@pytest.mark.asyncio
async def test_consul_store_from_cli_style_options_uses_http_and_string_token() -> None:
    store = create_store("consul", dict([cli._option("ssl=false"), cli._option("acl_token=12345")]))
    try:
        backend = store._backend
        assert isinstance(backend, ConsulBackend)
        assert str(backend._client.base_url) == "http://localhost:8500/"
        assert backend._client.headers["X-Consul-Token"] == "12345"
    finally:
        await store.close()
