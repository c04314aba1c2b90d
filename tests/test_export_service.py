"""Tests for the printable HTML export."""
from datetime import date
from services.export_service import escape_text, generate_export_html


class TestExportService:
    """HTML generation for exported responses."""

    def test_escape_text(self):
        assert escape_text("a & b\n\"c\" 'd'") == "a &amp; b<br/>&quot;c&quot; &#x27;d&#x27;"
        assert escape_text(None) == ""

    def test_one_section_per_element(self):
        html = generate_export_html(
            "Security RFP",
            ["Encryption?", "Backups?"],
            {0: "AES-256", 5: "orphan"},
            generated_on=date(2024, 3, 9)
        )

        assert "<title>RFP Response: Security RFP</title>" in html
        assert "Generated on 03/09/2024" in html
        assert html.count('class="response-section"') == 2
        assert "Element 1" in html and "Element 2" in html and "Element 3" not in html
        assert "AES-256" in html
        assert "orphan" not in html
        assert "No response provided" in html
        assert "Generated by AskTacit RFP Assistant" in html

    def test_no_elements(self):
        html = generate_export_html("Empty", [], {})

        assert 'class="response-section"' not in html
        assert html.startswith("<!DOCTYPE html>")
