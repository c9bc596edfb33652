import pytest
from pydantic import ValidationError

from checksim.config import ConfigSchema, load_config


def test_defaults_file():
    config = load_config()
    assert config == ConfigSchema()
    assert config.permutations.workers == 1
    assert config.logging.level == "INFO"


def test_partial_file(tmp_path):
    path = tmp_path / "run.yaml"
    path.write_text("seed: 9\npermutations:\n  shuffle: true\nlogging:\n  level: debug\n")
    config = load_config(path)
    assert config.seed == 9
    assert config.permutations.shuffle is True
    assert config.permutations.max_group_size == 30
    assert config.logging.level == "DEBUG"


def test_empty_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_config(path) == ConfigSchema()


@pytest.mark.parametrize(
    "data",
    [
        {"permutations": {"max_group_size": 3}},
        {"permutations": {"workers": 0}},
        {"render": {"top_k": -1}},
        {"logging": {"level": "chatty"}},
    ],
)
def test_invalid_values(data):
    with pytest.raises(ValidationError):
        ConfigSchema(**data)


def test_assignment_is_validated():
    config = ConfigSchema()
    with pytest.raises(ValidationError):
        config.permutations.workers = 0
    config.logging.level = "warning"
    assert config.logging.level == "WARNING"
