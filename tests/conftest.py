import pytest

from codivo.http.template import RequestTemplate


@pytest.fixture
def template():
    """Fixture providing a fresh POST template."""
    return RequestTemplate("POST", "/")


@pytest.fixture
def template_factory():
    """Fixture providing a factory of fresh templates."""

    def _template_factory(method="POST", url="/"):
        return RequestTemplate(method, url)

    return _template_factory
