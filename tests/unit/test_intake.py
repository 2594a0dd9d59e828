"""Unit tests for request loading and input validation."""

import pytest

from dossier.contexts.intake import (
    CandidateProfile,
    CoverLetter,
    CoverLetterHeader,
    DocumentKind,
    ValidationError,
    load_request,
    request_from_dict,
    validate_cover_letter,
    validate_document,
    validate_profile,
)


@pytest.mark.unit
class TestFromDict:
    def test_profile_tolerates_missing_lists(self):
        profile = CandidateProfile.from_dict({"name": "Ada", "skills": None})

        assert profile.skills == ()
        assert profile.experience == ()
        assert profile.kind is DocumentKind.PROFILE

    def test_profile_nested_entries(self):
        profile = CandidateProfile.from_dict(
            {
                "name": "Ada",
                "experience": [{"title": "Engineer", "company": "X"}],
                "education": [{"degree": "BSc", "year": 2016}],
            }
        )

        assert profile.experience[0].title == "Engineer"
        assert profile.experience[0].duration is None
        assert profile.education[0].year == "2016"

    def test_cover_letter_optional_blocks(self):
        letter = CoverLetter.from_dict(
            {"header": {"name": "Ada", "email": "a@b.c", "phone": "1", "date": "today"},
             "content": ["Hello"]}
        )

        assert letter.recipient is None
        assert letter.closing is None
        assert letter.content == ("Hello",)
        assert letter.name == "Ada"

    def test_list_fields_skip_none_items(self):
        profile = CandidateProfile.from_dict(
            {"name": "Ada", "skills": ["Java", None], "certifications": [None]}
        )

        assert profile.skills == ("Java",)
        assert profile.certifications == ()

    def test_scalar_content_is_rejected(self):
        with pytest.raises(ValidationError) as excinfo:
            CoverLetter.from_dict(
                {"header": {"name": "Ada", "email": "a@b.c", "phone": "1", "date": "today"},
                 "content": "Hello"}
            )

        assert excinfo.value.field_errors == ["content: must be a list, got str"]

    def test_scalar_skills_are_rejected(self):
        with pytest.raises(ValidationError, match="skills: must be a list"):
            CandidateProfile.from_dict({"name": "Ada", "skills": "Java"})


@pytest.mark.unit
class TestValidation:
    def test_profile_requires_name(self):
        with pytest.raises(ValidationError) as excinfo:
            validate_profile(CandidateProfile(name="  "))

        assert excinfo.value.document_kind == "profile"
        assert excinfo.value.field_errors == ["name: must not be blank"]

    def test_profile_with_only_name_is_valid(self):
        validate_profile(CandidateProfile(name="Ada"))

    def test_cover_letter_collects_every_failure(self):
        letter = CoverLetter(header=CoverLetterHeader(name="Ada", email="", phone=None, date="x"))

        with pytest.raises(ValidationError) as excinfo:
            validate_cover_letter(letter)

        errors = excinfo.value.field_errors
        assert "header.email: must not be blank" in errors
        assert "header.phone: must not be blank" in errors
        assert any(error.startswith("content:") for error in errors)
        assert len(errors) == 3

    def test_cover_letter_requires_header(self):
        with pytest.raises(ValidationError, match="header: is required"):
            validate_document(CoverLetter(header=None, content=("x",)))

    def test_validation_error_is_a_value_error(self, full_cover_letter):
        validate_document(full_cover_letter)
        assert issubclass(ValidationError, ValueError)


@pytest.mark.unit
class TestRequestLoading:
    def test_yaml_profile_request(self, fixtures_path):
        request = load_request(fixtures_path / "john_doe_profile.yaml")

        assert request.template_id == "modern_profile_template"
        assert request.document.kind is DocumentKind.PROFILE
        assert request.document.name == "John Doe"
        assert request.document.skills == ("Java", "AWS")
        assert request.document.education[0].year == "2016"

    def test_json_cover_letter_request(self, fixtures_path):
        request = load_request(fixtures_path / "sarah_cover_letter.json")

        assert request.template_id == "starter_template_001"
        assert request.document.kind is DocumentKind.COVER_LETTER
        assert request.document.header.name == "Sarah Johnson"
        assert len(request.document.content) == 2

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_request(tmp_path / "missing.yaml")

    def test_non_mapping_file(self, tmp_path):
        request_file = tmp_path / "list.yaml"
        request_file.write_text("- just\n- a list\n")

        with pytest.raises(ValidationError):
            load_request(request_file)

    def test_interpolation_syntax_is_kept_literally(self, tmp_path):
        request_file = tmp_path / "deploys.yaml"
        request_file.write_text(
            "template_id: modern_profile_template\n"
            "profile:\n"
            "  name: Jo\n"
            "  summary: Automated deploys with ${HOME} scripts\n"
            "  skills:\n"
            "    - ${oc.env:SHELL}\n"
        )

        request = load_request(request_file)

        assert request.document.summary == "Automated deploys with ${HOME} scripts"
        assert request.document.skills == ("${oc.env:SHELL}",)

    @pytest.mark.parametrize(
        "data",
        [
            {},
            {"template_id": "profile_template"},
            {"profile": {"name": "A"}, "cover_letter": {"header": {}}},
        ],
    )
    def test_exactly_one_document_required(self, data):
        with pytest.raises(ValidationError, match="exactly one of"):
            request_from_dict(data)
