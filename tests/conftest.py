"""
Shared test fixtures and configuration.
"""

import textwrap
from pathlib import Path

import pytest

from voschema.core.models import Compilation, WorkItem
from voschema.core.services.capability import SCHEMA_FILTER_INTERFACE


@pytest.fixture
def swashbuckle_compilation() -> Compilation:
    """A compilation that references Swashbuckle."""
    return Compilation(
        assembly_name="App",
        referenced_types=frozenset({SCHEMA_FILTER_INTERFACE, "System.Object"}),
    )


@pytest.fixture
def bare_compilation() -> Compilation:
    """A compilation without Swashbuckle."""
    return Compilation(assembly_name="App", referenced_types=frozenset({"System.Object"}))


@pytest.fixture
def work_items() -> list[WorkItem]:
    return [
        WorkItem(type_name="App.Age", underlying_type_name="System.Int32"),
        WorkItem(type_name="App.Name", underlying_type_name="System.String"),
    ]


@pytest.fixture
def inputs_dir(tmp_path: Path) -> Path:
    """Work items, compilation and config files for end-to-end runs."""
    (tmp_path / "items.yml").write_text(textwrap.dedent("""\
        - type_name: App.Age
          underlying_type_name: System.Int32
        - type_name: App.Name
          underlying_type_name: System.String
    """))
    (tmp_path / "compilation.yml").write_text(textwrap.dedent(f"""\
        assembly_name: App
        referenced_types:
          - {SCHEMA_FILTER_INTERFACE}
    """))
    (tmp_path / "bare.yml").write_text("assembly_name: App\nreferenced_types: []\n")
    (tmp_path / "voschema.yml").write_text(
        "swashbuckle_schema_generation: generate-extension-method\n"
    )
    return tmp_path
