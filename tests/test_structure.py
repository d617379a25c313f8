import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.structure.blocks import (  # noqa: E402
    parse_education_blocks,
    parse_experience_blocks,
    parse_skills_list,
)
from app.structure.classifier import identify_section_type, parse_header_data  # noqa: E402
from app.structure.parser import parse_resume_to_structured  # noqa: E402


class SectionClassifierTests(unittest.TestCase):
    def test_heading_keywords_map_to_section_types(self):
        self.assertEqual(identify_section_type("PROFESSIONAL EXPERIENCE"), "experience")
        self.assertEqual(identify_section_type("Work History:"), "experience")
        self.assertEqual(identify_section_type("Education"), "education")
        self.assertEqual(identify_section_type("Technical Skills"), "skills")
        self.assertEqual(identify_section_type("Professional Summary"), "summary")
        self.assertEqual(identify_section_type("Certifications"), "other")

    def test_first_matching_category_wins(self):
        self.assertEqual(identify_section_type("Summary of Skills"), "summary")

    def test_body_lines_are_not_headings(self):
        self.assertIsNone(identify_section_type("Jane Doe"))
        self.assertIsNone(identify_section_type("- Gained experience with Kubernetes"))
        self.assertIsNone(
            identify_section_type("I have a lot of experience building distributed systems at scale")
        )

    def test_short_sentence_is_not_a_heading(self):
        self.assertIsNone(identify_section_type("Designer with 10 years of experience."))

    def test_header_block_contact_extraction(self):
        header = parse_header_data(
            [
                "Jane Doe",
                "Senior Software Engineer",
                "jane.doe@example.com | +1 (555) 123-4567",
                "San Francisco, CA",
                "linkedin.com/in/janedoe",
                "https://janedoe.dev",
            ]
        )
        self.assertEqual(header.name, "Jane Doe")
        self.assertEqual(header.title, "Senior Software Engineer")
        self.assertEqual(header.contact.email, "jane.doe@example.com")
        self.assertEqual(header.contact.phone, "+1 (555) 123-4567")
        self.assertEqual(header.contact.location, "San Francisco, CA")
        self.assertEqual(header.contact.linkedin, "linkedin.com/in/janedoe")
        self.assertEqual(header.contact.website, "https://janedoe.dev")

    def test_year_range_is_not_a_phone_number(self):
        header = parse_header_data(["Jane Doe", "Engineer 2016 - 2020"])
        self.assertEqual(header.contact.phone, "")


class BlockParserTests(unittest.TestCase):
    def test_experience_entries_and_responsibilities(self):
        blocks = parse_experience_blocks(
            [
                "Senior Engineer at Acme Corp 2019 - 2023",
                "• Led migration to the cloud",
                "- Reduced costs by 20%",
                "Data Analyst | Globex | 2016 - 2019",
                "* Built dashboards",
            ]
        )
        self.assertEqual(len(blocks), 2)
        self.assertEqual(blocks[0].title, "Senior Engineer")
        self.assertEqual(blocks[0].company, "Acme Corp")
        self.assertEqual(blocks[0].dates, "2019 - 2023")
        self.assertEqual(blocks[0].responsibilities, ["Led migration to the cloud", "Reduced costs by 20%"])
        self.assertEqual(blocks[1].title, "Data Analyst")
        self.assertEqual(blocks[1].company, "Globex")
        self.assertEqual(blocks[1].dates, "2016 - 2019")
        self.assertEqual(blocks[1].responsibilities, ["Built dashboards"])

    def test_lines_before_first_entry_are_kept(self):
        blocks = parse_experience_blocks(["Overview of roles held", "Software Developer at Initech"])
        self.assertEqual(len(blocks), 1)
        self.assertEqual(blocks[0].title, "Software Developer")
        self.assertEqual(blocks[0].responsibilities, ["Overview of roles held"])

    def test_education_entries_and_details(self):
        blocks = parse_education_blocks(
            [
                "Bachelor of Science in Computer Science from State University",
                "GPA 3.8",
                "MBA, Wharton School 2018",
            ]
        )
        self.assertEqual(len(blocks), 2)
        self.assertEqual(blocks[0].degree, "Bachelor of Science in Computer Science")
        self.assertEqual(blocks[0].institution, "State University")
        self.assertEqual(blocks[0].details, ["GPA 3.8"])
        self.assertEqual(blocks[1].degree, "MBA, Wharton School")
        self.assertEqual(blocks[1].dates, "2018")

    def test_skills_split_on_separators(self):
        skills = parse_skills_list(["Python, SQL; Docker | AWS", "• Leadership"])
        self.assertEqual(skills, ["Python", "SQL", "Docker", "AWS", "Leadership"])


class StructuredResumeTests(unittest.TestCase):
    SAMPLE = (
        "Jane Doe\n"
        "jane.doe@example.com\n"
        "EXPERIENCE\n"
        "Senior Software Engineer at Acme Corp 2019 - 2023\n"
        "- Built payment APIs\n"
        "- Increased revenue by 35%\n"
        "EDUCATION\n"
        "B.S. Computer Science | State University | 2015 - 2019\n"
        "SKILLS\n"
        "Python, SQL, React\n"
    )

    def test_header_and_sections_are_detected(self):
        structured = parse_resume_to_structured(self.SAMPLE)
        first = structured.sections[0]
        self.assertEqual(first.type, "header")
        self.assertEqual(first.content.type, "header")
        self.assertEqual(first.content.data.name, "Jane Doe")
        self.assertEqual(first.content.data.contact.email, "jane.doe@example.com")

        experience = structured.section("experience")
        self.assertIsNotNone(experience)
        self.assertEqual(experience.content.type, "experience_block")
        self.assertTrue(experience.content.data[0].title)
        self.assertEqual(experience.content.data[0].company, "Acme Corp")
        self.assertEqual(
            experience.content.data[0].responsibilities,
            ["Built payment APIs", "Increased revenue by 35%"],
        )

        education = structured.section("education")
        self.assertEqual(education.content.type, "education_block")
        self.assertEqual(education.content.data[0].institution, "State University")

        skills = structured.section("skills")
        self.assertEqual(skills.content.data, ["Python", "SQL", "React"])

    def test_missing_core_sections_are_appended(self):
        structured = parse_resume_to_structured(self.SAMPLE)
        types = [section.type for section in structured.sections]
        self.assertEqual(types, ["header", "experience", "education", "skills", "summary"])
        self.assertEqual(structured.sections[-1].content.data, "")

    def test_parsing_is_deterministic(self):
        first = parse_resume_to_structured(self.SAMPLE).model_dump()
        second = parse_resume_to_structured(self.SAMPLE).model_dump()
        self.assertEqual(first, second)

    def test_empty_input_has_no_sections(self):
        self.assertEqual(parse_resume_to_structured("").sections, [])
        self.assertEqual(parse_resume_to_structured(None).sections, [])

    def test_long_preamble_spills_into_summary(self):
        intro = [f"Intro line {index} text" for index in range(1, 12)]
        structured = parse_resume_to_structured("\n".join(["Jane Doe"] + intro))
        self.assertEqual(structured.sections[0].type, "header")
        self.assertEqual(structured.sections[1].type, "summary")
        self.assertEqual(structured.sections[1].content.data, "Intro line 10 text Intro line 11 text")

    def test_experience_without_entries_keeps_lines(self):
        structured = parse_resume_to_structured(
            "Jane Doe\njane@example.com\nEXPERIENCE\nVarious freelance gigs\nOpen source contributions"
        )
        experience = structured.section("experience")
        self.assertEqual(experience.content.type, "list")
        self.assertEqual(experience.content.data, ["Various freelance gigs", "Open source contributions"])

    def test_unicode_bullets_stay_responsibilities(self):
        structured = parse_resume_to_structured(
            "Jane Doe\n"
            "jane@example.com\n"
            "EXPERIENCE\n"
            "Lead Designer at Hooli 2019 - 2023\n"
            "• Mentored 4 designers\n"
            "- Mentored 4 designers\n"
            "▪ Ran weekly design critiques\n"
        )
        blocks = structured.section("experience").content.data
        self.assertEqual(len(blocks), 1)
        self.assertEqual(blocks[0].title, "Lead Designer")
        self.assertEqual(
            blocks[0].responsibilities,
            ["Mentored 4 designers", "Mentored 4 designers", "Ran weekly design critiques"],
        )

    def test_summary_sentence_stays_in_summary(self):
        structured = parse_resume_to_structured(
            "Jane Doe\n"
            "jane@example.com\n"
            "PROFESSIONAL SUMMARY\n"
            "Designer with 10 years of experience.\n"
            "EXPERIENCE\n"
            "Lead Designer at Hooli 2019 - 2023\n"
        )
        types = [section.type for section in structured.sections]
        self.assertEqual(types, ["header", "summary", "experience", "education", "skills"])
        self.assertEqual(structured.section("summary").content.data, "Designer with 10 years of experience.")

    def test_html_input_is_sanitized_first(self):
        structured = parse_resume_to_structured("<p>Jane Doe</p>\n<p>jane@example.com</p>")
        self.assertEqual(structured.sections[0].content.data.name, "Jane Doe")


if __name__ == "__main__":
    unittest.main()
