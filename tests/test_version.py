import tomllib
from pathlib import Path

import lessonparser


def test_package_version_matches_pyproject() -> None:
    pyproject = Path(__file__).resolve().parents[1] / "pyproject.toml"
    with pyproject.open("rb") as handle:
        project = tomllib.load(handle)["project"]
    assert project["name"] == "lessonparser"
    assert lessonparser.__version__ == project["version"]
