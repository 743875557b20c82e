import json

import httpx
import pytest

from elastic_builder import cli
from elastic_builder.client import ElasticClient


@pytest.fixture
def cli_transport(monkeypatch, transport, http_client, trace):
    """Route the CLI's client through the recording transport."""
    created = {}

    def make_client(url, *, timeout):
        created["url"] = url
        created["timeout"] = timeout
        return ElasticClient(url, timeout=timeout, http_client=http_client, trace_stream=trace)

    monkeypatch.setattr(cli, "ElasticClient", make_client)
    transport.created = created
    return transport


def test_prints_count(cli_transport, capsys):
    cli_transport.payload = {"count": 12}

    exit_code = cli.main(["--url", "http://es.test:9200", "-i", "a,b", "-i", "c", "-t", "doc"])

    assert exit_code == 0
    assert capsys.readouterr().out.strip() == "12"
    assert cli_transport.last.url.raw_path == b"/a,b,c/doc/_count"
    assert cli_transport.created["url"] == "http://es.test:9200"


def test_term_query(cli_transport):
    cli.main(["--index", "tweets", "--term", "user=olivere"])

    assert json.loads(cli_transport.last.content) == {"query": {"term": {"user": "olivere"}}}


def test_query_string_and_pretty(cli_transport):
    cli.main(["-q", "status:active", "--pretty"])

    request = cli_transport.last
    assert request.url.params["pretty"] == "true"
    assert json.loads(request.content) == {"query": {"query_string": {"query": "status:active"}}}


def test_settings_supply_defaults(monkeypatch, cli_transport, trace):
    monkeypatch.setenv("ELASTIC_URL", "http://from-env:9200")
    monkeypatch.setenv("ELASTIC_TIMEOUT", "4")
    monkeypatch.setenv("ELASTIC_DEBUG", "true")

    cli.main([])

    assert cli_transport.created == {"url": "http://from-env:9200", "timeout": 4.0}
    assert "POST /_count HTTP/1.1" in trace.getvalue()


def test_error_exits_with_status_one(cli_transport, capsys):
    cli_transport.status_code = 404
    cli_transport.payload = {"error": {"type": "index_not_found_exception", "reason": "no such index"}}

    exit_code = cli.main(["-i", "missing"])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out == ""
    assert "no such index" in captured.err


def test_transport_error_exits_with_status_one(cli_transport, capsys):
    cli_transport.error = httpx.ConnectError("connection refused")

    assert cli.main([]) == 1
    assert "connection refused" in capsys.readouterr().err


def test_bad_term_is_a_usage_error(cli_transport):
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--term", "novalue"])

    assert exc_info.value.code == 2


def test_log_level_from_environment(monkeypatch, cli_transport, capsys):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    cli_transport.payload = {"count": 5}

    assert cli.main(["-i", "tweets"]) == 0

    err = capsys.readouterr().err
    assert "Counting" in err
    assert "Count completed count=5" in err


def test_log_level_flag_overrides_environment(monkeypatch, cli_transport, capsys):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    cli.main(["--log-level", "ERROR"])

    assert capsys.readouterr().err == ""


def test_default_log_level_is_quiet(cli_transport, capsys):
    cli.main([])

    assert capsys.readouterr().err == ""


def test_zero_timeout_is_passed_through(monkeypatch, cli_transport):
    monkeypatch.setenv("ELASTIC_TIMEOUT", "9")

    cli.main(["--timeout", "0"])

    assert cli_transport.created["timeout"] == 0.0
