import json

import pytest
import yaml

from molattr.config import (
    DEFAULT_CONFIG,
    Config,
    _read_config_file,
    load_config_from_file,
    save_config_to_file,
    validate_config,
)


def test_config_initialization():
    cfg = Config()
    assert cfg.perception.skip_hydrogen_vertices is True
    assert cfg.perception.include_proton_rotors is True
    assert cfg.crystal.wrap_tolerance == DEFAULT_CONFIG["crystal"]["wrap_tolerance"]
    assert cfg.logging.level == "INFO"


def test_config_override():
    data = {"perception": {"measure_geometry": False, "new_key": "value"}}
    cfg = Config(data)
    assert cfg.perception.measure_geometry is False
    assert cfg.perception.new_key == "value"
    # Defaults should persist for other keys
    assert cfg.perception.include_proton_rotors is True


def test_section_access():
    cfg = Config()
    crystal = cfg.crystal
    crystal.wrap_tolerance = 1e-5
    assert cfg.crystal.wrap_tolerance == 1e-5
    assert isinstance(cfg.crystal.to_dict(), dict)
    assert cfg.crystal.get("missing", 3) == 3

    with pytest.raises(AttributeError):
        _ = crystal.non_existent


def test_unknown_sections_preserved():
    cfg = Config.from_dict({"custom": {"a": 1}})
    assert cfg.to_dict()["custom"]["a"] == 1


def test_load_save_json(tmp_path):
    config_file = tmp_path / "config.json"
    cfg = Config({"logging": {"level": "DEBUG"}})
    save_config_to_file(cfg, str(config_file))

    loaded_cfg = load_config_from_file(str(config_file))
    assert loaded_cfg.logging.level == "DEBUG"

    with open(config_file) as f:
        data = json.load(f)
    assert data["logging"]["level"] == "DEBUG"


def test_load_save_yaml(tmp_path):
    config_file = tmp_path / "config.yaml"
    cfg = Config({"crystal": {"wrap_tolerance": 1e-4}})
    save_config_to_file(cfg, str(config_file))

    loaded_cfg = load_config_from_file(str(config_file))
    assert loaded_cfg.crystal.wrap_tolerance == 1e-4

    with open(config_file) as f:
        data = yaml.safe_load(f)
    assert data["crystal"]["wrap_tolerance"] == 1e-4


def test_missing_file_uses_defaults(tmp_path):
    cfg = load_config_from_file(str(tmp_path / "does_not_exist.json"))
    assert cfg.to_dict() == DEFAULT_CONFIG


def test_invalid_extension(tmp_path):
    with pytest.raises(ValueError):
        save_config_to_file(Config(), str(tmp_path / "config.txt"))

    bad = tmp_path / "config.toml"
    bad.write_text("x = 1")
    _read_config_file.cache_clear()
    with pytest.raises(ValueError):
        load_config_from_file(str(bad))


def test_non_mapping_root_rejected(tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[1, 2, 3]")
    _read_config_file.cache_clear()
    with pytest.raises(ValueError):
        load_config_from_file(str(path))


def test_validate_config():
    cfg = Config()
    validate_config(cfg)

    cfg.perception.measure_geometry = "yes"
    with pytest.raises(ValueError):
        validate_config(cfg)
    cfg.perception.measure_geometry = True

    cfg.crystal.wrap_tolerance = 0
    with pytest.raises(ValueError):
        validate_config(cfg)
    cfg.crystal.wrap_tolerance = "abc"
    with pytest.raises(ValueError):
        validate_config(cfg)
    cfg.crystal.wrap_tolerance = 1e-8

    cfg.logging.level = "LOUD"
    with pytest.raises(ValueError):
        validate_config(cfg)
    cfg.logging.level = "warning"
    validate_config(cfg)

    with pytest.raises(ValueError):
        Config({"crystal": {"wrap_tolerance": -1.0}})


def test_load_config_caching_behavior(tmp_path):
    config_path = tmp_path / "config.json"
    with open(config_path, "w") as f:
        json.dump({"logging": {"level": "ERROR"}}, f)

    _read_config_file.cache_clear()

    cfg1 = load_config_from_file(str(config_path))
    assert cfg1.logging.level == "ERROR"

    # Modify file directly on disk; the cached content is still returned
    with open(config_path, "w") as f:
        json.dump({"logging": {"level": "DEBUG"}}, f)
    cfg2 = load_config_from_file(str(config_path))
    assert cfg2.logging.level == "ERROR"

    # save_config_to_file clears the cache
    new_cfg = Config()
    new_cfg.logging.level = "WARNING"
    save_config_to_file(new_cfg, str(config_path))
    cfg3 = load_config_from_file(str(config_path))
    assert cfg3.logging.level == "WARNING"
