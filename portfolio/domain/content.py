"""Static site content: person, sections and default route flags.

Everything here is plain data validated by pydantic models. Text that the
site renders as rich markup on the page is kept as plain strings.
"""
from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, computed_field

__all__ = [
    "Person",
    "SocialLink",
    "Newsletter",
    "Home",
    "Image",
    "Experience",
    "Institution",
    "Skill",
    "About",
    "Blog",
    "Work",
    "Orientation",
    "GalleryImage",
    "Gallery",
    "DEFAULT_ROUTES",
    "person",
    "social",
    "newsletter",
    "home",
    "about",
    "blog",
    "work",
    "gallery",
]


class Person(BaseModel):
    first_name: str
    last_name: str
    role: str
    avatar: str
    location: str  # IANA time zone identifier, e.g. "Europe/Vienna"
    languages: list[str] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class SocialLink(BaseModel):
    name: str
    icon: str
    link: str


class Newsletter(BaseModel):
    display: bool = False
    title: str
    description: str


class Home(BaseModel):
    label: str
    title: str
    description: str
    headline: str
    subline: str


class Image(BaseModel):
    src: str
    alt: str
    width: int
    height: int


class Experience(BaseModel):
    company: str
    timeframe: str
    role: str
    achievements: list[str] = Field(default_factory=list)
    images: list[Image] = Field(default_factory=list)


class Institution(BaseModel):
    name: str
    description: str


class Skill(BaseModel):
    title: str
    description: str
    images: list[Image] = Field(default_factory=list)


class TableOfContent(BaseModel):
    display: bool = True
    sub_items: bool = False


class Toggle(BaseModel):
    display: bool = True


class Calendar(BaseModel):
    display: bool = False
    link: str = ""


class Intro(BaseModel):
    display: bool = True
    title: str
    description: str


class ExperienceSection(BaseModel):
    display: bool = True
    title: str
    experiences: list[Experience] = Field(default_factory=list)


class StudiesSection(BaseModel):
    display: bool = True
    title: str
    institutions: list[Institution] = Field(default_factory=list)


class TechnicalSection(BaseModel):
    display: bool = True
    title: str
    skills: list[Skill] = Field(default_factory=list)


class About(BaseModel):
    label: str
    title: str
    description: str
    table_of_content: TableOfContent
    avatar: Toggle
    calendar: Calendar
    intro: Intro
    work: ExperienceSection
    other_relevant_experience: ExperienceSection
    studies: StudiesSection
    technical: TechnicalSection


class Blog(BaseModel):
    label: str
    title: str
    description: str


class Work(BaseModel):
    label: str
    title: str
    description: str


class Orientation(str, Enum):
    vertical = "vertical"
    horizontal = "horizontal"


class GalleryImage(BaseModel):
    src: str
    alt: str
    orientation: Orientation


class Gallery(BaseModel):
    label: str
    title: str
    description: str
    images: list[GalleryImage] = Field(default_factory=list)


# Route flags consumed by the route gate. Keys absent here are never gated.
DEFAULT_ROUTES: dict[str, bool] = {
    "/": True,
    "/about": True,
    "/work": True,
    "/blog": True,
    "/gallery": True,
}


person = Person(
    first_name="Álvaro",
    last_name="Mañoso Oca",
    role="Software Engineer & Architect",
    avatar="/images/avatar.JPEG",
    location="Europe/Spain",
    languages=["Spanish", "English", "Catalan"],
)

social: list[SocialLink] = [
    SocialLink(name="GitHub", icon="github", link="https://github.com/alvaromaoc"),
    SocialLink(name="LinkedIn", icon="linkedin", link="https://www.linkedin.com/in/alvaromanoso"),
]

newsletter = Newsletter(
    display=False,
    title=f"Subscribe to {person.first_name}'s Newsletter",
    description=(
        "I occasionally write about architecture, technology, and share thoughts on the "
        "intersection of soft skills and engineering."
    ),
)

home = Home(
    label="Home",
    title=f"{person.name}'s Portfolio",
    description=f"Portfolio website showcasing my work as a {person.role}",
    headline="I architect software like I build IKEA furniture, only with fewer leftover pieces.",
    subline=(
        "I'm Álvaro, a software engineer currently working at Tymit and being tutored as a "
        "software architect in the Master's Degree in Software Development and Architecture "
        "at La Salle."
    ),
)


def _wec_image(name: str, alt: str) -> Image:
    return Image(src=f"/images/work/{name}", alt=alt, width=16, height=9)


about = About(
    label="About",
    title="About me",
    description=f"Meet {person.name}, {person.role} from {person.location}",
    table_of_content=TableOfContent(display=True, sub_items=False),
    avatar=Toggle(display=True),
    calendar=Calendar(display=False, link="https://cal.com"),
    intro=Intro(
        display=True,
        title="Introduction",
        description=(
            "Álvaro is a software engineer and architect with a strong focus on designing "
            "scalable and efficient systems. Passionate about continuous learning and "
            "collaboration, he actively engages with the tech community, sharing knowledge and "
            "staying up to date with industry trends. He values the power of teamwork and "
            "innovation, believing that the best solutions come from exchanging ideas and "
            "experiences with other professionals."
        ),
    ),
    work=ExperienceSection(
        display=True,
        title="Work Experience",
        experiences=[
            Experience(
                company="Tymit",
                timeframe="2024 - Present",
                role="Software Engineer",
                achievements=[
                    "Designed the architecture and built the components for data migrations "
                    "that facilitated the onboarding of 2 million users onto the platform.",
                    "Redesigned the process for changing credentials, increasing their security "
                    "and enabling auditability.",
                ],
            ),
            Experience(
                company="GFT Group",
                timeframe="2023 - 2024",
                role="Junior Software Engineer",
                achievements=[
                    "Played a key role in the migration of an on-prem architecture to Google "
                    "Cloud Platform (GCP), improving scalability, security, and cost efficiency.",
                    "Built an entire end-to-end CI/CD pipeline with GitHub Actions, integrating "
                    "SDLC controls that reduced delivery time by a factor of 14.",
                    "Led an initiative to integrate hexagonal architecture practices, improving "
                    "code maintainability and modularity while providing knowledge transfer (KT) "
                    "sessions to the team.",
                ],
            ),
            Experience(
                company="IThink UPC",
                timeframe="2020 - 2022",
                role="Intern Software Engineer",
                achievements=[
                    "Designed and developed a new platform to manage building technical "
                    "inspections and all associated requirements, also enabling neighbourhood "
                    "communities to be part of the process.",
                ],
            ),
        ],
    ),
    other_relevant_experience=ExperienceSection(
        display=True,
        title="Other relevant experience",
        experiences=[
            Experience(
                company="Board of European Students of Technology",
                timeframe="2023 - 2024",
                role="Head of Corporate Relations Department",
                achievements=[
                    "Led the Week of Engineering Competition, generating €17K in revenue and "
                    "connecting around 200 students with top companies in Spain's technology "
                    "sector.",
                    "Established over 20 new partnerships, steering the association toward a more "
                    "resilient, sustainable, and profitable future, beyond its mission and "
                    "milestones.",
                    "Promoted and facilitated training for association members in fiscal matters, "
                    "public speaking, and negotiation skills.",
                ],
                images=[
                    _wec_image("WEC_Closing.jpeg", "Week of Engineering Competition closing"),
                    _wec_image("WEC_BEC_topic-team.JPG", "Week of Engineering Competition topic team"),
                    _wec_image(
                        "WEC_BEC_me-talking.JPG",
                        "Week of Engineering Competition Álvaro presenting",
                    ),
                    _wec_image(
                        "WEC_Closing_final-speech.JPG",
                        "Week of Engineering Competition Álvaro doing the final speech of the "
                        "closing ceremony",
                    ),
                ],
            ),
        ],
    ),
    studies=StudiesSection(
        display=True,
        title="Studies",
        institutions=[
            Institution(
                name="Master's Degree in software development and architecture",
                description="La Salle - Ramon Llull University",
            ),
            Institution(
                name="Bachelor's Degree in informatics engineering",
                description="Polytechnic University of Catalonia",
            ),
        ],
    ),
    technical=TechnicalSection(
        display=False,
        title="Technical skills",
        skills=[
            Skill(
                title="Next.js",
                description="Building next gen apps with Next.js + Once UI + Supabase.",
                images=[
                    Image(
                        src="/images/projects/project-01/cover-04.jpg",
                        alt="Project image",
                        width=16,
                        height=9,
                    )
                ],
            ),
        ],
    ),
)

blog = Blog(
    label="Blog",
    title="Writing about architecture and tech...",
    description=f"Read what {person.name} has been up to recently",
)

work = Work(
    label="Work",
    title="My projects",
    description=f"Architecture and dev projects by {person.name}",
)

_GALLERY_ORIENTATIONS = "vhvhhvhvhhvhhh"

gallery = Gallery(
    label="Gallery",
    title="My photo gallery",
    description=f"A photo collection by {person.name}",
    images=[
        GalleryImage(
            src=f"/images/gallery/img-{i:02d}.jpg",
            alt="image",
            orientation=Orientation.vertical if o == "v" else Orientation.horizontal,
        )
        for i, o in enumerate(_GALLERY_ORIENTATIONS, start=1)
    ],
)
