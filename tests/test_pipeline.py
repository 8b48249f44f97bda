from __future__ import annotations

import datetime as dt
import json
import logging
from pathlib import Path

import pytest

from vmodgen.config.settings import Settings
from vmodgen.core.errors import (
    FileWriteError,
    MissingConfigFileError,
    MissingPrerequisiteError,
    TemplateRenderError,
)
from vmodgen.rendering.store import CATALOG, TemplateStore, default_store
from vmodgen.scaffold.pipeline import generate

TOP_LEVEL = [
    "configure.ac",
    "autogen.sh",
    "Makefile.am",
    "README.rst",
    "LICENSE",
    "COPYING",
    "src/Makefile.am",
]


def test_generates_full_tree(
    tmp_path: Path, write_config, settings: Settings, build_date: dt.date
) -> None:
    write_config()

    written = generate(tmp_path, settings, today=build_date)

    assert tmp_path / "m4" / "PLACEHOLDER" in written
    assert (tmp_path / "src" / "vmod_cookie.vcc").is_file()
    assert (tmp_path / "src" / "vmod_cookie.c").is_file()
    for name in TOP_LEVEL:
        content = (tmp_path / name).read_text()
        assert "cookie" in content, name
    assert ":Date: 2024-03-09" in (tmp_path / "README.rst").read_text()


def test_missing_config_writes_nothing(tmp_path: Path, settings: Settings) -> None:
    before = sorted(p.name for p in tmp_path.iterdir())

    with pytest.raises(MissingConfigFileError):
        generate(tmp_path, settings)

    assert sorted(p.name for p in tmp_path.iterdir()) == before
    assert not (tmp_path / "m4").exists()
    assert not (tmp_path / "src").exists()
    assert not (tmp_path / "configure.ac").exists()


def test_missing_prerequisite_writes_nothing(
    tmp_path: Path, write_config, fake_bin: Path
) -> None:
    write_config()
    (fake_bin / "libtoolize").unlink()

    with pytest.raises(MissingPrerequisiteError, match="libtool"):
        generate(tmp_path, Settings(search_dirs=[fake_bin]))

    assert not (tmp_path / "m4").exists()
    assert not (tmp_path / "configure.ac").exists()


def test_skip_prerequisites(tmp_path: Path, write_config) -> None:
    write_config()
    settings = Settings(search_dirs=[tmp_path / "empty"], skip_prerequisites=True)

    generate(tmp_path, settings)

    assert (tmp_path / "configure.ac").is_file()


def test_custom_config_name(tmp_path: Path, settings: Settings) -> None:
    (tmp_path / "other.json").write_text('{"name": "geo",}')

    generate(tmp_path, settings.model_copy(update={"config_name": "other.json"}))

    assert (tmp_path / "src" / "vmod_geo.c").is_file()


def test_second_run_refreshes_top_level_only(
    tmp_path: Path,
    write_config,
    settings: Settings,
    build_date: dt.date,
    caplog: pytest.LogCaptureFixture,
) -> None:
    write_config({"name": "cookie", "version": "1.0"})
    generate(tmp_path, settings, today=build_date)
    seed = tmp_path / "src" / "vmod_cookie.vcc"
    seed.write_text("# mine\n")

    write_config({"name": "cookie", "version": "2.0"})
    with caplog.at_level(logging.WARNING):
        written = generate(tmp_path, settings, today=build_date)

    assert written == [tmp_path / name for name in TOP_LEVEL]
    configure = (tmp_path / "configure.ac").read_text()
    assert "[2.0]" in configure
    assert "[1.0]" not in configure
    assert ":Version: 2.0" in (tmp_path / "README.rst").read_text()
    assert seed.read_text() == "# mine\n"
    assert caplog.text.count("not touching") == 2


def test_render_failure_aborts_remaining_emissions(
    tmp_path: Path, write_config, settings: Settings
) -> None:
    write_config()
    templates = {name: default_store().source(name) for name in CATALOG}
    templates["Makefile.am"] = "{{ vmod.no_such_field }}"

    with pytest.raises(TemplateRenderError, match="Makefile.am"):
        generate(tmp_path, settings, store=TemplateStore(templates))

    assert (tmp_path / "autogen.sh").exists()
    assert not (tmp_path / "README.rst").exists()


def test_case_transform_in_configure(
    tmp_path: Path, write_config, settings: Settings
) -> None:
    write_config(
        {
            "name": "digest",
            "required_libs": [
                {"name": "mhash", "function": "mhash_count"},
                {"name": "crypto", "function": "EVP_MD_CTX_new"},
            ],
        }
    )

    generate(tmp_path, settings)

    configure = (tmp_path / "configure.ac").read_text()
    assert "HAVE_MHASH" in configure
    assert "mhash_count" in configure
    assert "HAVE_CRYPTO" in configure
    assert configure.index("mhash_count") < configure.index("EVP_MD_CTX_new")


def test_missing_author_uses_fallback(
    tmp_path: Path, write_config, settings: Settings
) -> None:
    write_config({"name": "cookie"})

    generate(tmp_path, settings)

    readme = (tmp_path / "README.rst").read_text()
    assert ":Author: Your Name" in readme
    assert ":Author: \n" not in readme


def test_config_file_is_not_rewritten(
    tmp_path: Path, write_config, settings: Settings
) -> None:
    path = write_config()
    original = path.read_text()

    generate(tmp_path, settings)

    assert json.loads(path.read_text()) == json.loads(original)


def test_write_failure_aborts_remaining_emissions(
    tmp_path: Path, write_config, settings: Settings
) -> None:
    write_config()
    (tmp_path / "autogen.sh").mkdir()

    with pytest.raises(FileWriteError) as exc_info:
        generate(tmp_path, settings)

    assert exc_info.value.path == tmp_path / "autogen.sh"
    assert (tmp_path / "configure.ac").is_file()
    assert not (tmp_path / "Makefile.am").exists()
    assert list(tmp_path.glob(".autogen.sh.*")) == []
