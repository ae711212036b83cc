"""Unit tests for labeled-section parsing."""

from starwatch.llm.sections import parse_sections

LABELS = ("SUMMARY", "ANALYSIS", "PREDICTIONS")


class TestParseSections:
    def test_all_labels_on_single_lines(self):
        text = "SUMMARY: Short summary.\nANALYSIS: Sharp analysis.\nPREDICTIONS: Bold call."

        assert parse_sections(text, LABELS) == {
            "SUMMARY": "Short summary.",
            "ANALYSIS": "Sharp analysis.",
            "PREDICTIONS": "Bold call.",
        }

    def test_last_label_runs_to_end_of_text(self):
        text = (
            "SUMMARY: One.\n"
            "ANALYSIS: Two.\n"
            "PREDICTIONS: First line.\n"
            "\n"
            "Second paragraph of predictions.\n"
            "Third line."
        )

        sections = parse_sections(text, LABELS)

        assert sections["PREDICTIONS"] == "First line.\n\nSecond paragraph of predictions.\nThird line."

    def test_multiline_section_stops_at_next_label(self):
        text = "SUMMARY: Line one\nline two\nANALYSIS: Analysis here"

        sections = parse_sections(text, LABELS)

        assert sections["SUMMARY"] == "Line one\nline two"
        assert sections["ANALYSIS"] == "Analysis here"

    def test_missing_label_is_absent(self):
        text = "SUMMARY: Only a summary.\nPREDICTIONS: And a prediction."

        sections = parse_sections(text, LABELS)

        assert "ANALYSIS" not in sections
        assert sections["SUMMARY"] == "Only a summary."
        assert sections["PREDICTIONS"] == "And a prediction."

    def test_text_before_first_label_is_ignored(self):
        text = "Sure, here is my take:\n\nSUMMARY: The gist."

        assert parse_sections(text, LABELS) == {"SUMMARY": "The gist."}

    def test_label_text_on_following_line(self):
        text = "SUMMARY:\nThe gist on the next line.\nANALYSIS:\nMore."

        sections = parse_sections(text, LABELS)

        assert sections == {"SUMMARY": "The gist on the next line.", "ANALYSIS": "More."}

    def test_markdown_decorated_and_lowercase_labels(self):
        text = "**Summary:** Bold summary.\n## ANALYSIS: Heading analysis.\n**PREDICTIONS**: Starred."

        assert parse_sections(text, LABELS) == {
            "SUMMARY": "Bold summary.",
            "ANALYSIS": "Heading analysis.",
            "PREDICTIONS": "Starred.",
        }

    def test_label_mid_line_does_not_open_section(self):
        text = "SUMMARY: This mentions ANALYSIS: inline and keeps going."

        assert parse_sections(text, LABELS) == {
            "SUMMARY": "This mentions ANALYSIS: inline and keeps going.",
        }

    def test_first_occurrence_wins(self):
        text = "SUMMARY: First.\nSUMMARY: Second.\nstill second\nANALYSIS: After."

        sections = parse_sections(text, LABELS)

        assert sections["SUMMARY"] == "First."
        assert sections["ANALYSIS"] == "After."

    def test_empty_section_is_absent(self):
        text = "SUMMARY:\nANALYSIS: Something."

        assert parse_sections(text, LABELS) == {"ANALYSIS": "Something."}

    def test_no_labels(self):
        assert parse_sections("Just free text.", LABELS) == {}
        assert parse_sections("", LABELS) == {}

    def test_word_starting_with_label_is_not_a_label(self):
        text = "SUMMARY: ok\nAnalysisless line: still summary"

        assert parse_sections(text, LABELS) == {"SUMMARY": "ok\nAnalysisless line: still summary"}
