"""pytest configuration and fixtures for html-formgen tests."""

import pytest


@pytest.fixture(autouse=True)
def reset_form_config():
    """Restore the default configuration after each test."""
    from html_formgen.protocols import set_form_config

    yield
    set_form_config(None)


@pytest.fixture
def bootstrap():
    """Bootstrap 3 decorator."""
    from html_formgen.decorators.bootstrap import Bootstrap

    return Bootstrap(version=3)


@pytest.fixture
def decorate(bootstrap):
    """Apply the Bootstrap decorator to an element and return the element."""
    def _decorate(element):
        element.add_decorator(bootstrap)
        return element
    return _decorate
