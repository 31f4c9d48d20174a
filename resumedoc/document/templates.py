"""Starter documents and the editor's default section and item."""

from resumedoc.document.models import ContentItem, ResumeDocument, Section


def new_item() -> ContentItem:
    return {"job title": "", "Organization": ""}


def new_section(name: str = "New Section") -> Section:
    return Section(name=name, content=[new_item()])


def blank_document(title: str = "Your Name - Your Title") -> ResumeDocument:
    return ResumeDocument(title=title, sections=[new_section("Experience")])


def sample_document() -> ResumeDocument:
    """A filled-in resume covering the experience, education and skills templates."""
    return ResumeDocument(
        title="John Doe - Software Engineer",
        sections=[
            Section(
                name="Experience",
                id="exp-123",
                content=[
                    {
                        "job title": "Software Engineering Intern",
                        "Organization": "Google",
                        "Duration": "June 2023 - August 2023",
                        "Description": (
                            "Developed scalable web applications using React and Node.js. "
                            "Collaborated with cross-functional teams to deliver "
                            "high-quality software solutions."
                        ),
                    },
                    {
                        "job title": "Frontend Developer",
                        "Organization": "Microsoft",
                        "Duration": "September 2023 - Present",
                        "Description": (
                            "Built responsive user interfaces and improved application "
                            "performance by 40%. Led code reviews and mentored junior developers."
                        ),
                    },
                ],
            ),
            Section(
                name="Education",
                id="edu-456",
                content=[
                    {
                        "Degree": "Bachelor of Science in Computer Science",
                        "Organization": "Stanford University",
                        "Duration": "2020 - 2024",
                        "GPA": "3.8/4.0",
                    }
                ],
            ),
            Section(
                name="Skills",
                id="skills-789",
                content=[
                    {
                        "Category": "Programming Languages",
                        "Skills": "JavaScript, TypeScript, Python, Java, C++",
                    },
                    {
                        "Category": "Frameworks & Libraries",
                        "Skills": "React, Next.js, Node.js, Express, Django",
                    },
                ],
            ),
        ],
    )
