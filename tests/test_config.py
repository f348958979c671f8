import argparse

import pytest

from editrank.config import RankConfig, build_config, load_config_file


def test_no_config_file_gives_defaults(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    assert load_config_file(None) == {}
    assert build_config(argparse.Namespace(config=None)) == RankConfig()


def test_default_config_is_discovered(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".editrank.yaml").write_text("scale: true\nprecision: 2\n", encoding="utf-8")
    cfg = build_config(argparse.Namespace(config=None))
    assert cfg.scale is True
    assert cfg.precision == 2


def test_flags_override_config_file(tmp_path) -> None:
    p = tmp_path / "cfg.yaml"
    p.write_text("reverse: true\nseparator: ';'\nengine: rapidfuzz\n", encoding="utf-8")
    cfg = build_config(argparse.Namespace(config=str(p), separator="|"))
    assert cfg.reverse is True
    assert cfg.separator == "|"
    assert cfg.engine == "rapidfuzz"


def test_explicit_missing_config_raises(tmp_path) -> None:
    with pytest.raises(OSError):
        load_config_file(str(tmp_path / "missing.yaml"))


def test_unknown_key_rejected(tmp_path) -> None:
    p = tmp_path / "cfg.yaml"
    p.write_text("colour: red\n", encoding="utf-8")
    with pytest.raises(ValueError, match="unknown config key"):
        load_config_file(str(p))


def test_non_mapping_root_rejected(tmp_path) -> None:
    p = tmp_path / "cfg.yaml"
    p.write_text("- scale\n", encoding="utf-8")
    with pytest.raises(ValueError, match="mapping"):
        load_config_file(str(p))


def test_bad_engine_rejected(tmp_path) -> None:
    p = tmp_path / "cfg.yaml"
    p.write_text("engine: soundex\n", encoding="utf-8")
    with pytest.raises(ValueError, match="unknown engine"):
        build_config(argparse.Namespace(config=str(p)))


@pytest.mark.parametrize(
    "text, message",
    [
        ("precision: '3'\n", "precision must be an integer"),
        ("precision: true\n", "precision must be an integer"),
        ("scale: 'no'\n", "scale must be true or false"),
        ("reverse: 'false'\n", "reverse must be true or false"),
        ("engine: [builtin]\n", "engine must be a string"),
        ("substitutions: 3\n", "substitutions must be a path"),
    ],
)
def test_wrongly_typed_values_rejected(tmp_path, text: str, message: str) -> None:
    p = tmp_path / "cfg.yaml"
    p.write_text(text, encoding="utf-8")
    with pytest.raises(ValueError, match=message):
        build_config(argparse.Namespace(config=str(p)))


def test_relative_substitutions_resolve_against_config_dir(tmp_path, monkeypatch) -> None:
    conf_dir = tmp_path / "conf"
    conf_dir.mkdir()
    p = conf_dir / "cfg.yaml"
    p.write_text("substitutions: rules.tsv\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert load_config_file(str(p))["substitutions"] == str(conf_dir / "rules.tsv")


def test_flag_can_switch_off_config_value(tmp_path) -> None:
    p = tmp_path / "cfg.yaml"
    p.write_text("reverse: true\nscale: true\n", encoding="utf-8")
    cfg = build_config(argparse.Namespace(config=str(p), reverse=False))
    assert cfg.reverse is False
    assert cfg.scale is True
