import json
import logging

import pytest
from pydantic import ValidationError

from uno_engine.config import ServiceConfig, load_service_config


def test_defaults():
    config = load_service_config()
    assert config.tokens == {"hash": 10000}
    assert config.max_games == 100
    assert config.seed is None
    assert config.logging_level() == logging.INFO


def test_load_from_json(tmp_path):
    path = tmp_path / "service.json"
    path.write_text(json.dumps({"tokens": {"abc": 1}, "max_games": 10, "seed": 4, "log_level": "debug"}))
    config = load_service_config(path)
    assert config.tokens == {"abc": 1}
    assert config.max_games == 10
    assert config.seed == 4
    assert config.log_level == "DEBUG"


@pytest.mark.parametrize(
    "payload",
    [{"max_games": 0}, {"log_level": "loud"}, {"tokens": {"": 1}}],
)
def test_invalid_config(payload):
    with pytest.raises(ValidationError):
        ServiceConfig(**payload)
