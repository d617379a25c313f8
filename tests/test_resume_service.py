import sys
import tempfile
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.services.resume_service import (  # noqa: E402
    InsufficientTextError,
    analyze_resume_text,
    ensure_meaningful_text,
    extract_resume_text,
    score_resume,
)

RESUME_TEXT = (
    "Jane Doe\n"
    "jane.doe@example.com | +1 555 123 4567\n"
    "EXPERIENCE\n"
    "Backend Engineer at Initech 2020 - Present\n"
    "- Built billing APIs used by 40k customers\n"
    "SKILLS\n"
    "Python, PostgreSQL, Docker\n"
)


class ResumeServiceTests(unittest.TestCase):
    def test_short_text_asks_for_manual_entry(self):
        with self.assertRaises(InsufficientTextError) as ctx:
            ensure_meaningful_text("<p>too short</p>")
        self.assertIn("paste your resume text manually", str(ctx.exception))
        self.assertEqual(ctx.exception.extracted_chars, len("too short"))

    def test_empty_text_counts_as_zero_chars(self):
        with self.assertRaises(InsufficientTextError) as ctx:
            ensure_meaningful_text("")
        self.assertEqual(ctx.exception.extracted_chars, 0)

    def test_meaningful_text_is_returned_sanitized(self):
        cleaned = ensure_meaningful_text(RESUME_TEXT + "\r\n\r\n\r\n")
        self.assertTrue(cleaned.startswith("Jane Doe\n"))
        self.assertFalse(cleaned.endswith("\n"))

    def test_extract_resume_text_from_file(self):
        tmp_file = tempfile.NamedTemporaryFile("w", suffix=".txt", delete=False, encoding="utf-8")
        tmp_path = Path(tmp_file.name)
        try:
            tmp_file.write(RESUME_TEXT)
            tmp_file.close()

            extracted = extract_resume_text(tmp_path)
            self.assertEqual(extracted.source_type, "txt")
            self.assertIn("Backend Engineer at Initech", extracted.text)
        finally:
            if tmp_path.exists():
                tmp_path.unlink()

    def test_analyze_resume_text(self):
        analysis = analyze_resume_text(RESUME_TEXT)
        self.assertEqual(analysis.structured.sections[0].content.data.name, "Jane Doe")
        experience = analysis.structured.section("experience")
        self.assertEqual(experience.content.data[0].company, "Initech")
        self.assertEqual(experience.content.data[0].dates, "2020 - Present")
        self.assertGreaterEqual(analysis.quality.confidence, 0)

    def test_score_resume_uses_default_industry(self):
        result = score_resume({"skills": {"technical": ["sales", "strategy"], "soft": ["leadership"]}})
        self.assertIn("business", result.checks.keywords.message)


if __name__ == "__main__":
    unittest.main()
