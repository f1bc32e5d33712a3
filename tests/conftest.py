"""
Pytest configuration for nlptour tests.
"""

import pytest
import spacy


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "models: needs installed spaCy models and NLTK data (network on first run)"
    )


def pytest_addoption(parser):
    parser.addoption(
        "--run-models",
        action="store_true",
        default=False,
        help="Run tests that load real pre-trained models"
    )


def pytest_collection_modifyitems(config, items):
    """Skip model-backed tests unless --run-models is passed."""
    if config.getoption("--run-models"):
        return

    skip_models = pytest.mark.skip(reason="need --run-models option to run")
    for item in items:
        if "models" in item.keywords:
            item.add_marker(skip_models)


@pytest.fixture
def blank_en():
    """Rule-based English pipeline; no model download needed."""
    return spacy.blank("en")


@pytest.fixture
def blank_de():
    return spacy.blank("de")


@pytest.fixture
def blank_loader(monkeypatch):
    """Patch the driver's spaCy loader to hand out blank pipelines."""
    from nlptour import run_demo

    loaded = []

    def fake_load(name):
        loaded.append(name)
        return spacy.blank("de" if name.startswith("de") else "en")

    monkeypatch.setattr(run_demo, "load_spacy", fake_load)
    return loaded
