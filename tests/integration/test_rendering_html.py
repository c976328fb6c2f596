"""
Integration tests for the HTML renderer - full template + i18n + minification.
"""

import base64
import copy
import json

import httpx
import pytest

from resume_html.contexts.i18n import MalformedResourceError, UnknownKeyError
from resume_html.contexts.rendering import (
    FileSystemImageSource,
    ImageResolver,
    NoFileSystemImageSource,
    render,
    render_resume,
)

RESUME = {
    "basics": {
        "name": "Ana Lima",
        "label": "Platform Engineer",
        "email": "ana@example.com",
        "url": "https://www.analima.dev",
        "summary": "Builds **reliable** systems.",
        "location": {"city": "Lisbon", "countryCode": "PT"},
        "profiles": [{"network": "GitHub", "username": "analima", "url": "https://github.com/analima"}],
    },
    "work": [
        {
            "name": "Acme Corp",
            "position": "Senior Engineer",
            "startDate": "2019-03",
            "highlights": ["Cut deploy time in half"],
        },
        {
            "name": "Initech",
            "position": "Engineer",
            "startDate": "2015",
            "endDate": "2019",
        },
    ],
    "education": [
        {"institution": "University of Porto", "area": "Computer Science", "studyType": "BSc"}
    ],
    "awards": [{"title": "Best Paper", "awarder": "ACM", "date": "2018-06-01"}],
    "skills": [{"name": "Infrastructure", "keywords": ["Kubernetes", "Terraform"]}],
    "references": [
        {"name": "Bob", "reference": "Great colleague."},
    ],
}

PNG_BYTES = b"\x89PNG\r\n\x1a\nfake-image"


def offline_resolver() -> ImageResolver:
    def handler(request):
        raise AssertionError(f"Unexpected request to {request.url}")

    return ImageResolver(
        NoFileSystemImageSource(), client=httpx.Client(transport=httpx.MockTransport(handler))
    )


@pytest.mark.integration
def test_render_english_default():
    """Resumes without meta.language render in English."""
    html = render(RESUME, image_resolver=offline_resolver())

    assert "Ana Lima" in html
    assert "Platform Engineer" in html
    assert "Work Experience" in html
    assert "Education" in html
    assert "Awarded by ACM" in html
    assert "Kubernetes" in html
    assert "<strong>reliable</strong>" in html
    assert "Lisbon, PT" in html
    assert ">analima.dev</a>" in html


@pytest.mark.integration
def test_render_dates():
    html = render(RESUME, image_resolver=offline_resolver())

    assert "Mar 2019" in html
    assert "2019-03-01T00:00:00.000Z" in html
    assert "Present" in html
    assert "2015-01-01T00:00:00.000Z" in html


@pytest.mark.integration
def test_render_is_minified():
    html = render(RESUME, image_resolver=offline_resolver())

    assert "<style>" in html
    assert "<!--" not in html


@pytest.mark.integration
def test_render_localized():
    resume = {**RESUME, "meta": {"language": "fr"}}

    html = render(resume, image_resolver=offline_resolver())

    assert "Expérience professionnelle" in html
    assert "Décerné par ACM" in html
    assert "Présent" in html
    assert "Work Experience" not in html


@pytest.mark.integration
def test_locale_argument_overrides_meta():
    resume = {**RESUME, "meta": {"language": "fr"}}

    html = render(resume, image_resolver=offline_resolver(), locale="de")

    assert "Berufserfahrung" in html


@pytest.mark.integration
def test_unknown_language_falls_back_to_english():
    resume = {**RESUME, "meta": {"language": "xx"}}

    html = render(resume, image_resolver=offline_resolver())

    assert "Work Experience" in html


@pytest.mark.integration
def test_regional_language_uses_base_translation():
    resume = {**RESUME, "meta": {"language": "pt"}}

    html = render(resume, image_resolver=offline_resolver())

    assert "Experiência profissional" in html


@pytest.mark.integration
def test_render_does_not_mutate_input():
    resume = copy.deepcopy(RESUME)
    resume["basics"]["image"] = "https://example.com/me.png"
    original = copy.deepcopy(resume)

    render(resume, image_resolver=offline_resolver())

    assert resume == original


@pytest.mark.integration
def test_remote_photo_becomes_og_image():
    resume = copy.deepcopy(RESUME)
    resume["basics"]["image"] = "https://example.com/me.png"

    html = render(resume, image_resolver=offline_resolver())

    assert "og:image" in html
    assert "https://example.com/me.png" in html


@pytest.mark.integration
def test_self_contained_remote_photo_is_inlined():
    resume = copy.deepcopy(RESUME)
    resume["basics"]["image"] = "https://example.com/me.png"
    resume["meta"] = {"selfContainedImages": True}

    def handler(request):
        return httpx.Response(200, content=PNG_BYTES, headers={"content-type": "image/png"})

    resolver = ImageResolver(
        NoFileSystemImageSource(), client=httpx.Client(transport=httpx.MockTransport(handler))
    )
    html = render(resume, image_resolver=resolver)

    assert "data:image/png;base64," + base64.b64encode(PNG_BYTES).decode("ascii") in html
    # og:image keeps the public URL
    assert "https://example.com/me.png" in html


@pytest.mark.integration
def test_local_logo_is_inlined(tmp_path):
    (tmp_path / "logo.png").write_bytes(PNG_BYTES)
    resume = {**RESUME, "meta": {"logo": "logo.png"}}

    html = render(resume, image_resolver=ImageResolver(FileSystemImageSource(tmp_path)))

    assert "data:image/png;base64," in html


@pytest.mark.integration
def test_reference_footer_only_with_contact():
    without_contact = render(RESUME, image_resolver=offline_resolver())

    resume = copy.deepcopy(RESUME)
    resume["references"][0]["email"] = "bob@example.com"
    with_contact = render(resume, image_resolver=offline_resolver())

    assert "<footer" not in without_contact
    assert "<footer" in with_contact
    assert "bob@example.com" in with_contact


@pytest.mark.integration
def test_empty_resume_renders():
    html = render({}, image_resolver=offline_resolver())

    assert "<html" in html
    assert "<main>" in html


@pytest.mark.integration
def test_custom_catalog_missing_key_fails():
    """Template keys absent from every bundle surface as UnknownKeyError."""
    with pytest.raises(UnknownKeyError):
        render(RESUME, image_resolver=offline_resolver(), catalog={"en": "present = Present"})


@pytest.mark.integration
def test_malformed_catalog_fails():
    with pytest.raises(MalformedResourceError):
        render(RESUME, image_resolver=offline_resolver(), catalog={"en": "!!! broken"})


@pytest.mark.integration
def test_render_resume_writes_file(tmp_path):
    resume_path = tmp_path / "resume.json"
    resume_path.write_text(json.dumps({**RESUME, "meta": {"language": "es"}}), encoding="utf-8")

    result = render_resume(resume_path)

    assert result.success, result.error
    assert result.output_path == resume_path.with_suffix(".html")
    assert result.locale == "es"
    assert result.size_bytes > 0
    assert "Experiencia laboral" in result.output_path.read_text(encoding="utf-8")


@pytest.mark.integration
def test_render_resume_custom_output(tmp_path):
    resume_path = tmp_path / "resume.yaml"
    resume_path.write_text("basics:\n  name: Ana Lima\n", encoding="utf-8")
    output_path = tmp_path / "site" / "index.html"

    result = render_resume(resume_path, output_path=output_path, locale="nl")

    assert result.success, result.error
    assert output_path.exists()
    assert "Ana Lima" in output_path.read_text(encoding="utf-8")


@pytest.mark.integration
def test_render_resume_reports_failure(tmp_path):
    result = render_resume(tmp_path / "missing.json")

    assert result.success is False
    assert result.output_path is None
    assert "not found" in result.error


@pytest.mark.integration
def test_remote_photo_with_null_custom():
    resume = {"basics": {"name": "Ana Lima", "image": "https://example.com/me.png"}, "custom": None}

    html = render(resume, image_resolver=offline_resolver())

    assert "og:image" in html
    assert "https://example.com/me.png" in html


@pytest.mark.integration
def test_render_resume_reports_invalid_yaml(tmp_path):
    resume_path = tmp_path / "resume.yaml"
    resume_path.write_text("basics: {name: [unclosed\n", encoding="utf-8")

    result = render_resume(resume_path, locale="fr")

    assert result.success is False
    assert "not valid YAML" in result.error
    assert result.locale == "fr"
    assert not resume_path.with_suffix(".html").exists()


@pytest.mark.integration
def test_render_resume_failure_reports_resolved_locale(tmp_path):
    resume_path = tmp_path / "resume.json"
    resume_path.write_text(
        json.dumps({"meta": {"language": "de"}, "basics": {"url": "not-a-url"}}), encoding="utf-8"
    )

    result = render_resume(resume_path)

    assert result.success is False
    assert result.locale == "de"
