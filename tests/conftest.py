from pathlib import Path

import pytest

from aulas.rules.loader import load_rules
from aulas.rules.models import Rules

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def project_root() -> Path:
    return PROJECT_ROOT


@pytest.fixture
def rules_path(project_root: Path) -> Path:
    """Path to the real rules.yaml file."""
    return project_root / "rules.yaml"


@pytest.fixture
def rules(rules_path: Path) -> Rules:
    return load_rules(rules_path)
