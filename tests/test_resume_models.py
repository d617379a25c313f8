import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from pydantic import ValidationError  # noqa: E402

from app.schemas.ats import (  # noqa: E402
    ExperienceContent,
    LanguageEntry,
    Project,
    ResumeData,
    StructuredResume,
)


class ResumeModelTests(unittest.TestCase):
    def test_resume_data_accepts_camel_case_with_optional_sections(self):
        data = ResumeData.model_validate(
            {
                "personalInfo": {"fullName": "Ana Lima", "email": "ana@example.com"},
                "certificates": [{"name": "AWS SAA", "issuer": "Amazon", "issueDate": "2023-04"}],
                "projects": [
                    {"name": "Tracker", "startDate": "2022", "endDate": "2023", "current": True}
                ],
                "languages": [{"language": "Portuguese", "proficiency": "Native"}],
                "interests": {"interests": ["chess"]},
                "additionalInfo": {"content": "Open to relocation"},
            }
        )
        self.assertEqual(data.personal_info.full_name, "Ana Lima")
        self.assertEqual(data.certificates[0].issue_date, "2023-04")
        self.assertIsNone(data.projects[0].end_date)
        self.assertEqual(data.interests.interests, ["chess"])
        self.assertEqual(data.model_dump(by_alias=True)["additionalInfo"]["content"], "Open to relocation")

    def test_defaults_describe_an_empty_resume(self):
        data = ResumeData()
        self.assertEqual(data.experience, [])
        self.assertEqual(data.skills.technical, [])
        self.assertEqual(data.personal_info.full_name, "")

    def test_invalid_language_proficiency(self):
        with self.assertRaises(ValidationError):
            LanguageEntry(language="German", proficiency="Fluent-ish")

    def test_current_project_has_no_end_date(self):
        self.assertIsNone(Project(name="x", current=True, end_date="2024").end_date)

    def test_section_content_is_discriminated_by_type(self):
        structured = StructuredResume.model_validate(
            {
                "sections": [
                    {
                        "id": "experience-0",
                        "type": "experience",
                        "title": "Experience",
                        "content": {
                            "type": "experience_block",
                            "data": [{"title": "Engineer", "company": "Acme"}],
                        },
                    }
                ]
            }
        )
        self.assertIsInstance(structured.sections[0].content, ExperienceContent)
        self.assertEqual(structured.sections[0].content.data[0].responsibilities, [])


if __name__ == "__main__":
    unittest.main()
