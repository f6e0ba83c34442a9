"""
Pytest configuration and shared fixtures
"""

import shutil
import sys
import tempfile
from pathlib import Path
from typing import Generator

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from tailwind_cs_fixer.core.sorter import TailwindClassSorter  # noqa: E402


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for testing"""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def sorter() -> TailwindClassSorter:
    """Default class sorter"""
    return TailwindClassSorter()


@pytest.fixture
def sample_html() -> str:
    """Sample HTML page with unsorted class attributes"""
    return """<!DOCTYPE html>
<html>
<body>
    <nav class="px-4 mx-auto max-w-7xl py-3 flex justify-between items-center">
        <a href="/" class='font-bold text-xl'>Home</a>
    </nav>
    <div class="hover:shadow-xl transition-shadow rounded-lg shadow-md bg-white p-6 border">
        <p class="text-gray-700">Card</p>
    </div>
</body>
</html>
"""


@pytest.fixture
def sorted_html() -> str:
    """The sample HTML page once fixed"""
    return """<!DOCTYPE html>
<html>
<body>
    <nav class="mx-auto flex max-w-7xl items-center justify-between px-4 py-3">
        <a href="/" class='text-xl font-bold'>Home</a>
    </nav>
    <div class="rounded-lg border bg-white p-6 shadow-md transition-shadow hover:shadow-xl">
        <p class="text-gray-700">Card</p>
    </div>
</body>
</html>
"""


@pytest.fixture
def sample_twig() -> str:
    """Sample Twig template mixing static and dynamic class values"""
    return """{% extends 'base.html.twig' %}

{% block body %}
    <button class="hover:bg-blue-700 bg-blue-500 {{ buttonClass }} text-white px-4 py-2">
        {{ label }}
    </button>
    <div class="p-4 flex {% if active %}bg-blue-500{% endif %}">Item</div>
    <span class="text-center p-2">{{ 'static'|trans }}</span>
{% endblock %}
"""


@pytest.fixture
def sorted_twig() -> str:
    """The sample Twig template once fixed"""
    return """{% extends 'base.html.twig' %}

{% block body %}
    <button class="bg-blue-500 hover:bg-blue-700 {{ buttonClass }} px-4 py-2 text-white">
        {{ label }}
    </button>
    <div class="p-4 flex {% if active %}bg-blue-500{% endif %}">Item</div>
    <span class="p-2 text-center">{{ 'static'|trans }}</span>
{% endblock %}
"""


@pytest.fixture
def sample_project(temp_dir: Path, sample_html: str, sample_twig: str) -> Path:
    """Create a project tree with templates, vendor code and other files"""
    templates = temp_dir / "templates"
    (templates / "components").mkdir(parents=True)
    (templates / "index.html").write_text(sample_html, encoding="utf-8")
    (templates / "components" / "button.html.twig").write_text(
        sample_twig, encoding="utf-8"
    )
    (templates / "components" / "sorted.html").write_text(
        '<div class="flex p-4 text-center"></div>\n', encoding="utf-8"
    )

    vendor = temp_dir / "vendor" / "package"
    vendor.mkdir(parents=True)
    (vendor / "page.html").write_text('<div class="p-4 flex"></div>\n')

    node_modules = temp_dir / "node_modules" / "lib"
    node_modules.mkdir(parents=True)
    (node_modules / "index.html").write_text('<div class="p-4 flex"></div>\n')

    (temp_dir / "styles.css").write_text(".p-4 { padding: 1rem; }\n")
    return temp_dir
