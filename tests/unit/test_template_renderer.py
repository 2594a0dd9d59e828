"""Unit tests for slot binding and HTML rendering."""

import pytest

from dossier.contexts.intake import (
    CandidateProfile,
    CoverLetter,
    DocumentKind,
    Education,
    Experience,
    apply_defaults,
)
from dossier.contexts.templating import (
    TemplateNotFoundError,
    TemplateRenderer,
    TemplateRenderError,
    available_templates,
    cover_letter_slots,
    profile_slots,
)

PROFILE_SLOTS = {
    "name", "email", "phone", "location", "summary",
    "skills", "experience", "education", "certifications",
}
COVER_LETTER_SLOTS = {
    "name", "email", "phone", "date", "recipientName", "companyName",
    "position", "salutation", "content", "valediction", "signature",
}


@pytest.fixture(scope="module")
def renderer():
    return TemplateRenderer()


@pytest.mark.unit
class TestSlots:
    def test_profile_slot_names(self, john_doe):
        slots = profile_slots(john_doe)

        assert set(slots) == PROFILE_SLOTS
        assert slots["skills"] == ["Java", "AWS"]
        assert slots["experience"][0]["company"] == "Tech Corp"

    def test_cover_letter_slot_names(self, full_cover_letter):
        slots = cover_letter_slots(full_cover_letter)

        assert set(slots) == COVER_LETTER_SLOTS
        assert slots["recipientName"] == "Michael Chen"
        assert slots["companyName"] == "Acme Corp"
        assert slots["valediction"] == "Best regards"
        assert slots["signature"] == "Sarah J."

    def test_cover_letter_without_closing(self, bare_cover_letter):
        slots = cover_letter_slots(bare_cover_letter)

        assert slots["recipientName"] is None
        assert slots["valediction"] == "Sincerely,"
        assert slots["signature"] == "Sarah Johnson"


@pytest.mark.unit
class TestRenderProfile:
    def test_fields_appear_in_html(self, renderer, john_doe):
        html = renderer.render_profile("profile_template", john_doe)

        assert "<h1 class=\"name\">John Doe</h1>" in html
        assert "john.doe@example.com" in html
        assert "Java • AWS" in html
        assert "Senior Engineer - Tech Corp" in html
        assert "<li>Led development.</li>" in html
        assert "<li>Shipped v2.</li>" in html

    def test_empty_sections_are_omitted(self, renderer):
        html = renderer.render_profile("resume_template_002", CandidateProfile(name="Ada"))

        assert "Ada" in html
        for heading in ("Skills", "Professional Experience", "Education", "Certifications"):
            assert f"<h2>{heading}</h2>" not in html

    def test_markup_in_free_text_is_escaped(self, renderer):
        profile = CandidateProfile(
            name="<script>alert(1)</script>",
            summary="<p>Safe <b>summary</b></p><img src=x onerror=alert(1)>",
        )

        html = renderer.render_profile("profile_template", profile)

        assert "<script>" not in html
        assert "&lt;script&gt;" in html
        assert "<img" not in html
        assert "Safe summary" in html

    def test_existing_bullets_are_not_doubled(self, renderer):
        profile = CandidateProfile(
            name="Ada",
            experience=(Experience(title="Engineer", description="- Built it<br>• Ran it"),),
            education=(Education(degree="BSc", institution="State", year="2016"),),
        )

        html = renderer.render_profile("modern_profile_template", profile)

        assert "<li>Built it</li>" in html
        assert "<li>Ran it</li>" in html
        assert "BSc - State" in html

    def test_only_one_bullet_marker_is_stripped(self, renderer):
        profile = CandidateProfile(
            name="Ada",
            experience=(Experience(title="Engineer", description="- -5% churn<br>* *Nix ops"),),
        )

        html = renderer.render_profile("modern_profile_template", profile)

        assert "<li>-5% churn</li>" in html
        assert "<li>*Nix ops</li>" in html

    @pytest.mark.parametrize("template_id", available_templates(DocumentKind.PROFILE))
    def test_every_resume_template_renders(self, renderer, john_doe, template_id):
        html = renderer.render(template_id, john_doe)

        assert html.lstrip().startswith("<!DOCTYPE html>")
        assert "John Doe" in html


@pytest.mark.unit
class TestRenderCoverLetter:
    def test_defaulted_letter(self, renderer, bare_cover_letter):
        html = renderer.render_cover_letter(
            "cover_letter_template_001", apply_defaults(bare_cover_letter)
        )

        assert "Dear Hiring Manager," in html
        assert "Hiring Team" in html
        assert "I led a migration." in html
        assert "Sincerely," in html

    def test_letter_without_defaults_still_renders(self, renderer, bare_cover_letter):
        html = renderer.render_cover_letter("cover_letter_template_002", bare_cover_letter)

        assert "Sincerely," in html
        assert 'class="recipient"' not in html

    @pytest.mark.parametrize("template_id", available_templates(DocumentKind.COVER_LETTER))
    def test_every_cover_letter_template_renders(self, renderer, full_cover_letter, template_id):
        html = renderer.render(template_id, apply_defaults(full_cover_letter))

        assert "Dear Mr. Chen:" in html
        assert "Engineering Director" in html
        assert "Best regards," in html


@pytest.mark.unit
class TestRenderErrors:
    def test_unknown_template(self, renderer, john_doe):
        with pytest.raises(TemplateNotFoundError):
            renderer.render("unknown_template", john_doe)

    def test_cover_letter_template_for_profile(self, renderer, john_doe):
        with pytest.raises(TemplateNotFoundError):
            renderer.render_profile("cover_letter_template_001", john_doe)

    def test_jinja_failure_is_wrapped(self, tmp_path, john_doe):
        from dossier.contexts.templating.registries import TemplateRegistry

        broken = tmp_path / "profile_template"
        broken.mkdir()
        (broken / "template.html.jinja").write_text("{{ name }} {{ undefined_slot }}")
        registry = TemplateRegistry(
            templates_path=tmp_path, catalog={"profile_template": DocumentKind.PROFILE}
        )

        with pytest.raises(TemplateRenderError) as excinfo:
            TemplateRenderer(registry).render_profile("profile_template", john_doe)

        assert excinfo.value.template_id == "profile_template"
        assert excinfo.value.original_error is not None
