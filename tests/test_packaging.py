"""Tests for the declared package dependencies."""

import ast
from pathlib import Path

import pytest

SETUP_PY = Path(__file__).resolve().parent.parent / "setup.py"


def _setup_kwargs():
    tree = ast.parse(SETUP_PY.read_text(encoding="utf-8"))
    for node in ast.walk(tree):
        if isinstance(node, ast.Call) and getattr(node.func, "id", None) == "setup":
            return {kw.arg: ast.literal_eval(kw.value) for kw in node.keywords
                    if kw.arg in ("install_requires", "extras_require")}
    raise AssertionError("setup() call not found")


@pytest.fixture(scope="module")
def setup_kwargs():
    return _setup_kwargs()


class TestDependencies:
    """Test the requirement pins in setup.py."""

    def test_mcp_stays_on_the_fastmcp_series(self, setup_kwargs):
        """mcp 2.x no longer ships mcp.server.fastmcp."""
        mcp = [req for req in setup_kwargs["install_requires"] if req.startswith("mcp")]

        assert mcp == ["mcp>=1.2.0,<2"]

    def test_extras_only_list_used_test_plugins(self, setup_kwargs):
        for extra in ("dev", "test"):
            names = [req.split(">=")[0] for req in setup_kwargs["extras_require"][extra]]
            assert "pytest-mock" not in names
            assert "pytest-asyncio" in names
