from __future__ import annotations

import pytest

from fsinfo.config import DEFAULT_CONFIG, FsInfoConfig, load_config
from fsinfo.errors import UsageError


def test_defaults_when_no_config(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert load_config() == DEFAULT_CONFIG
    # reading never creates the file
    assert not (tmp_path / ".config").exists()


def test_user_config_file(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    cfg_dir = tmp_path / ".config" / "getfsinfo"
    cfg_dir.mkdir(parents=True)
    (cfg_dir / "config.yaml").write_text("literal_prefix: true\n", encoding="utf-8")

    cfg = load_config()
    assert cfg == FsInfoConfig(mounts_file="/proc/mounts", literal_prefix=True, raw_bytes=False)


def test_explicit_config(tmp_path):
    p = tmp_path / "c.yaml"
    p.write_text("mounts_file: /etc/mtab\nraw_bytes: yes\n", encoding="utf-8")
    cfg = load_config(p)
    assert cfg.mounts_file == "/etc/mtab"
    assert cfg.raw_bytes is True
    assert cfg.literal_prefix is False


def test_empty_config_is_defaults(tmp_path):
    p = tmp_path / "c.yaml"
    p.write_text("", encoding="utf-8")
    assert load_config(p) == DEFAULT_CONFIG


def test_explicit_config_missing(tmp_path):
    with pytest.raises(UsageError):
        load_config(tmp_path / "missing.yaml")


def test_config_not_a_mapping(tmp_path):
    p = tmp_path / "c.yaml"
    p.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(UsageError):
        load_config(p)


def test_config_bad_yaml(tmp_path):
    p = tmp_path / "c.yaml"
    p.write_text("mounts_file: [unclosed\n", encoding="utf-8")
    with pytest.raises(UsageError):
        load_config(p)


@pytest.mark.parametrize(
    "text",
    [
        'literal_prefix: "false"\n',
        "raw_bytes: 1\n",
        "literal_prefix: ~\n",
    ],
)
def test_flags_must_be_booleans(tmp_path, text):
    p = tmp_path / "c.yaml"
    p.write_text(text, encoding="utf-8")
    with pytest.raises(UsageError) as exc:
        load_config(p)
    assert str(exc.value).startswith(f"Invalid config '{p}':")


@pytest.mark.parametrize("text", ["mounts_file:\n", 'mounts_file: ""\n', "mounts_file: 42\n"])
def test_mounts_file_must_be_a_path(tmp_path, text):
    p = tmp_path / "c.yaml"
    p.write_text(text, encoding="utf-8")
    with pytest.raises(UsageError) as exc:
        load_config(p)
    assert "mounts_file" in str(exc.value)
