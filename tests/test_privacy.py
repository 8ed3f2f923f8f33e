"""Tests for personal data detection."""

from seo_audit.models import IssueKind, PersonalInfo, Severity
from seo_audit.privacy import detect_personal_info, personal_info_issues


class TestDetectPersonalInfo:
    """Test cases for detect_personal_info."""

    def test_detects_email(self):
        """Test that an email address is found."""
        info = detect_personal_info("Contact us at info@example.com today")
        assert info.emails == ("info@example.com",)

    def test_detects_spanish_mobile_with_prefix(self):
        """Test a +34 mobile number with spaces."""
        info = detect_personal_info("Llámanos al +34 612 345 678 o escríbenos")
        assert info.phone_numbers == ("+34 612 345 678",)

    def test_detects_mobile_with_dashes(self):
        """Test a mobile number using dashes as separators."""
        info = detect_personal_info("Tel: 712-345-678.")
        assert info.phone_numbers == ("712-345-678",)

    def test_ignores_landline(self):
        """Test that numbers not starting with 6 or 7 are not mobiles."""
        info = detect_personal_info("Oficina: 912 345 678")
        assert info.phone_numbers == ()

    def test_detects_cif_case_insensitive(self):
        """Test CIF detection in both cases."""
        info = detect_personal_info("CIF B12345678 y también b87654321")
        assert info.cifs == ("B12345678", "b87654321")

    def test_clean_text(self):
        """Test that ordinary text has no personal data."""
        info = detect_personal_info("Nothing to see here, just words.")
        assert info.is_empty is True
        assert info.to_dict() == {"emails": [], "phoneNumbers": [], "cifs": []}


class TestPersonalInfoIssues:
    """Test cases for personal_info_issues."""

    def test_one_issue_per_non_empty_category(self):
        """Test issue kinds, counts and severity."""
        info = PersonalInfo(
            emails=("a@example.com", "b@example.com"),
            cifs=("B12345678",),
        )
        issues = personal_info_issues(info)

        assert [issue.kind for issue in issues] == [IssueKind.EMAILS_EXPOSED, IssueKind.CIFS_EXPOSED]
        assert "2" in issues[0].message
        assert all(issue.severity == Severity.MEDIUM for issue in issues)

    def test_no_issues_when_empty(self):
        """Test that empty findings raise nothing."""
        assert personal_info_issues(PersonalInfo()) == []
