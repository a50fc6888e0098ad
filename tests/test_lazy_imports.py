"""Tests for perch.__init__ — public names resolve lazily, kida stays optional."""

import subprocess
import sys

import pytest

import perch


def _modules_after(code: str) -> set[str]:
    """Run *code* in a fresh interpreter and return the perch/kida modules it loaded."""
    script = (
        f"{code}\n"
        "import sys\n"
        "print('\\n'.join(m for m in sys.modules if m.split('.')[0] in ('perch', 'kida')))"
    )
    result = subprocess.run(
        [sys.executable, "-c", script], capture_output=True, text=True, check=True
    )
    return set(result.stdout.split())


@pytest.mark.parametrize("name", perch.__all__)
def test_all_names_resolve(name: str) -> None:
    assert getattr(perch, name) is not None


def test_registry_matches_all() -> None:
    assert set(perch._LAZY_IMPORTS) == set(perch.__all__)


def test_registry_points_at_defining_module() -> None:
    for name, module_path in perch._LAZY_IMPORTS.items():
        assert getattr(perch, name).__module__ == module_path, name


def test_unknown_name_raises_attribute_error() -> None:
    with pytest.raises(AttributeError, match="no attribute"):
        perch.__getattr__("ThisDoesNotExist")


def test_top_level_resolver_works() -> None:
    route = perch.create_resolver("photos")
    assert route("photos.show", {"id": 1}) == "/photos/1"


class TestImportCost:
    def test_bare_import_loads_no_submodules(self) -> None:
        assert _modules_after("import perch") == {"perch"}

    def test_resolver_does_not_pull_in_templating(self) -> None:
        loaded = _modules_after("import perch; perch.create_resolver('photos')('photos.index')")
        assert "perch.routing.resolver" in loaded
        assert "perch.templating" not in loaded
        assert not any(m.split(".")[0] == "kida" for m in loaded)

    def test_cli_does_not_pull_in_templating(self) -> None:
        loaded = _modules_after("from perch.cli import main; main(['routes', 'photos'])")
        assert "perch.templating" not in loaded
