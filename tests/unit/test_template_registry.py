"""Unit tests for TemplateRegistry class."""

from pathlib import Path

import pytest

from dossier.contexts.intake import DocumentKind
from dossier.contexts.templating.exceptions import TemplateNotFoundError
from dossier.contexts.templating.registries import TemplateRegistry


class FakeClock:
    """Monotonic clock advanced by hand."""

    def __init__(self):
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def registry(clock):
    return TemplateRegistry(ttl_s=60, clock=clock)


@pytest.mark.unit
def test_template_registry_init(registry):
    """Templates directory exists and nothing is loaded until first use."""
    assert registry.templates_path.exists()
    assert not registry.is_cached("profile_template")


@pytest.mark.unit
def test_every_catalog_entry_loads(registry):
    table = registry.warm_up()

    assert set(table.templates) == set(registry.catalog)


@pytest.mark.unit
def test_template_caching(registry):
    """Templates are cached after first load."""
    template1 = registry.get_template("profile_template")
    assert registry.is_cached("profile_template")

    template2 = registry.get_template("profile_template")
    assert template1 is template2


@pytest.mark.unit
def test_table_reloads_after_ttl(registry, clock):
    first = registry.get_template("resume_template_001")

    clock.now += 59
    assert registry.get_template("resume_template_001") is first

    clock.now += 1
    assert registry.get_template("resume_template_001") is not first


@pytest.mark.unit
def test_table_never_expires_without_ttl(clock):
    registry = TemplateRegistry(ttl_s=None, clock=clock)
    first = registry.get_template("profile_template")

    clock.now += 10 ** 9

    assert registry.get_template("profile_template") is first


@pytest.mark.unit
def test_get_template_not_found(registry):
    """Unknown identifiers fail before any file access."""
    with pytest.raises(TemplateNotFoundError) as excinfo:
        registry.get_template("nonexistent_template")

    assert excinfo.value.template_id == "nonexistent_template"
    assert "profile_template" in excinfo.value.available
    assert not registry.is_cached("profile_template")


@pytest.mark.unit
def test_template_not_found_is_a_lookup_error():
    assert issubclass(TemplateNotFoundError, LookupError)


@pytest.mark.unit
def test_get_template_wrong_kind(registry):
    with pytest.raises(TemplateNotFoundError) as excinfo:
        registry.get_template("profile_template", kind=DocumentKind.COVER_LETTER)

    assert "profile_template" not in excinfo.value.available
    assert "cover_letter_template_001" in excinfo.value.available


@pytest.mark.unit
def test_path_traversal_is_rejected(registry):
    with pytest.raises(TemplateNotFoundError):
        registry.get_template("../_layouts/resume_base")


@pytest.mark.unit
def test_missing_template_file(tmp_path, clock):
    registry = TemplateRegistry(
        templates_path=tmp_path, catalog={"profile_template": DocumentKind.PROFILE}, clock=clock
    )

    with pytest.raises(TemplateNotFoundError, match="Template file missing"):
        registry.get_template("profile_template")


@pytest.mark.unit
def test_clear_cache(registry):
    registry.get_template("profile_template")

    registry.clear_cache()

    assert not registry.is_cached("profile_template")


@pytest.mark.unit
def test_get_template_path(registry):
    """Test getting template file path."""
    path = registry.get_template_path("profile_template")

    assert isinstance(path, Path)
    assert path.name == "template.html.jinja"
    assert path.parent.name == "profile_template"
