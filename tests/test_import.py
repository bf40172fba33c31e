"""Verify package imports work correctly."""


def test_import_calclex() -> None:
    """Test that calclex can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import calclex

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert calclex.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from calclex import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_names() -> None:
    import calclex

    for name in calclex.__all__:
        assert hasattr(calclex, name), name
