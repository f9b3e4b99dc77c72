from contextlib import chdir
from pathlib import Path

import pytest

from mirror.catalog import Catalog, CatalogConfig, FailureOverride, find_config
from mirror.errors import HelpfulUserError, InputError, UnknownCategory
from mirror.failure import FAILURE_TYPES, FailureLevel, ServerFailure


CONFIG = """
[failure.ServerFailure]
message = "Our servers are having a bad day."
level = "critical"

[failure.CacheFailure]
code = 507
"""


def test_default_catalog():
    catalog = Catalog()
    assert catalog.make("ServerFailure") == ServerFailure()
    assert [name for name, _ in catalog.entries()] == list(FAILURE_TYPES)


def test_precedence():
    catalog = Catalog(CatalogConfig({
        "ServerFailure": FailureOverride(message="configured", code=503)}))
    f = catalog.make("ServerFailure", code=599)
    assert (f.message, f.code, f.hint) == ("configured", 599, "Try again later.")


def test_unknown_category():
    with pytest.raises(UnknownCategory):
        Catalog().make("SpaceFailure")
    with pytest.raises(UnknownCategory):
        Catalog(CatalogConfig({"SpaceFailure": FailureOverride()}))


def test_read(tmp_path: Path):
    path = tmp_path / "mirror.toml"
    path.write_text(CONFIG)
    catalog = Catalog.read(path)
    server = catalog.make("ServerFailure")
    assert server.message == "Our servers are having a bad day."
    assert server.level is FailureLevel.CRITICAL
    assert server.code == 500
    assert catalog.make("CacheFailure").code == 507


def test_read_invalid(tmp_path: Path):
    path = tmp_path / "mirror.toml"
    path.write_text('[failure.ServerFailure]\nlevel = "fatal"\n')
    with pytest.raises(InputError):
        Catalog.read(path)


def test_find_config(tmp_path: Path):
    with chdir(tmp_path):
        assert find_config().config == CatalogConfig()

        (tmp_path / "pyproject.toml").write_text('[project]\nname = "x"\n')
        assert find_config().config == CatalogConfig()

        (tmp_path / "pyproject.toml").write_text(
            '[tool.mirror.failure.NetworkFailure]\nhint = "Check the cable."\n')
        assert find_config().make("NetworkFailure").hint == "Check the cable."

        (tmp_path / "mirror.toml").write_text(CONFIG)
        assert find_config().make("NetworkFailure").hint == "Please check your connection."
        assert find_config().make("CacheFailure").code == 507


def test_find_config_malformed(tmp_path: Path):
    (tmp_path / "pyproject.toml").write_text("[project\nname =")
    with pytest.raises(HelpfulUserError):
        find_config(tmp_path)
