import json
import logging

import pytest

from here_geocoder.adapters.http import StaticResponseTransport
from here_geocoder.cli import build_parser, main
from here_geocoder.config import AppConfig, HereConfig
from here_geocoder.container import Container
from here_geocoder.ports import HttpTransportPort


@pytest.fixture
def make_container():
    def factory(body, api_key="cli-key"):
        transport = StaticResponseTransport(body)
        container = Container.create_default(
            AppConfig(here=HereConfig(api_key=None)), api_key=api_key
        )
        container.register(HttpTransportPort, lambda: transport)
        return container, transport

    return factory


@pytest.fixture(autouse=True)
def restore_package_logger():
    logger = logging.getLogger("here_geocoder")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


def test_geocode_prints_json(make_container, recorded, capsys):
    container, transport = make_container(recorded("geocode_gambetta.json"))

    code = main(
        ["geocode", "15 avenue Gambetta, Paris, France", "--locale", "fr-FR", "--limit", "1"],
        container=container,
    )

    assert code == 0
    output = json.loads(capsys.readouterr().out)
    assert output[0]["streetName"] == "Avenue Gambetta"
    assert output[0]["countryCode"] == "FRA"
    assert "&lang=fr-FR&limit=1" in transport.last_url


def test_geocode_with_filters(make_container, capsys):
    container, transport = make_container('{"items": []}')

    code = main(["geocode", "Barcelona", "--country", "VE", "--city", "Piar"], container=container)

    assert code == 0
    assert json.loads(capsys.readouterr().out) == []
    assert transport.last_url.endswith("&qq=country=VE;city=Piar")


def test_reverse(make_container, recorded, capsys):
    container, transport = make_container(recorded("reverse_gambetta.json"))

    code = main(["reverse", "48.8632156", "2.3887722"], container=container)

    assert code == 0
    assert json.loads(capsys.readouterr().out)[0]["locality"] == "Paris"
    assert "&at=48.8632156,2.3887722&limit=5" in transport.last_url


def test_geocoder_error_exit_code(make_container, capsys):
    container, _ = make_container('{"error": "Unauthorized"}')

    code = main(["geocode", "Paris"], container=container)

    assert code == 1
    assert "Invalid or missing api key." in capsys.readouterr().err


def test_ip_address_exit_code(make_container, capsys):
    container, transport = make_container('{"items": []}')

    assert main(["geocode", "127.0.0.1"], container=container) == 1
    assert transport.requests == []


def test_missing_api_key(make_container, capsys):
    container, _ = make_container('{"items": []}', api_key="")

    assert main(["geocode", "Paris"], container=container) == 1
    assert "api key" in capsys.readouterr().err


def test_parser_requires_command():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_log_level_is_case_insensitive(make_container, capsys):
    container, _ = make_container('{"items": []}')

    assert main(["--log-level", "debug", "geocode", "Paris"], container=container) == 0
    assert logging.getLogger("here_geocoder").level == logging.DEBUG


def test_unknown_log_level_is_rejected(make_container, capsys):
    container, transport = make_container('{"items": []}')

    with pytest.raises(SystemExit) as excinfo:
        main(["--log-level", "bogus", "geocode", "Paris"], container=container)

    assert excinfo.value.code == 2
    assert transport.requests == []
