"""Domain value objects for Tapestry.

Posts are organised into life-areas named after the parts of a plant. Each
area carries its own emoji, an optional catalogue of categories and a set of
writing prompts shown above the post form.
"""

from enum import Enum

from tapestry.domain.value.common import ValueObject


class Category(ValueObject):
    """A category a post can be filed under within a life-area."""

    name: str
    emoji: str
    description: str


class LifeArea(str, Enum):
    """Thematic section of the journal."""

    ROOTS = "roots"
    STEM = "stem"
    LEAVES = "leaves"
    BLOOM = "bloom"
    FRUIT = "fruit"

    @property
    def label(self) -> str:
        """Human readable name ("Roots", "Stem", ...)."""
        return self.value.capitalize()

    @property
    def emoji(self) -> str:
        """Emoji used as the default category emoji for the area."""
        return _AREA_EMOJI[self]

    @property
    def tagline(self) -> str:
        """Short description shown at the top of the area page."""
        return _AREA_TAGLINES[self]

    @property
    def categories(self) -> tuple[Category, ...]:
        """Categories a post in this area can pick from (may be empty)."""
        return _AREA_CATEGORIES.get(self, ())

    @property
    def prompts(self) -> tuple[str, ...]:
        """Writing prompts for the post form (may be empty)."""
        return _AREA_PROMPTS.get(self, ())

    def find_category(self, name: str) -> Category | None:
        """Look up a category by name, case-insensitively."""
        wanted = name.strip().lower()
        for category in self.categories:
            if category.name.lower() == wanted:
                return category
        return None


_AREA_EMOJI: dict[LifeArea, str] = {
    LifeArea.ROOTS: "🌱",
    LifeArea.STEM: "🌿",
    LifeArea.LEAVES: "🍃",
    LifeArea.BLOOM: "🌸",
    LifeArea.FRUIT: "🍎",
}

_AREA_TAGLINES: dict[LifeArea, str] = {
    LifeArea.ROOTS: "Inner work, healing and self-discovery.",
    LifeArea.STEM: "Growth, progress and the things you are learning.",
    LifeArea.LEAVES: "Everyday moments: music, food, vibes and updates.",
    LifeArea.BLOOM: (
        "Capture awe, inspiration, and transcendent experiences, "
        "moments that lift you."
    ),
    LifeArea.FRUIT: "What you give back: contributions, sharing and mentoring.",
}

_AREA_CATEGORIES: dict[LifeArea, tuple[Category, ...]] = {
    LifeArea.LEAVES: (
        Category(name="Music", emoji="🎵", description="What are you listening to?"),
        Category(name="Food", emoji="🍽️", description="What are you eating?"),
        Category(name="Vibe", emoji="✨", description="How are you feeling?"),
        Category(name="Moment", emoji="📸", description="Share a beautiful moment"),
        Category(name="Update", emoji="💭", description="What are you up to?"),
    ),
    LifeArea.FRUIT: (
        Category(
            name="contributions",
            emoji="🎁",
            description="Giving back and making a difference",
        ),
        Category(
            name="sharing",
            emoji="🤝",
            description="Collaboration and community building",
        ),
        Category(
            name="mentoring",
            emoji="👥",
            description="Guiding and supporting others",
        ),
    ),
}

_AREA_PROMPTS: dict[LifeArea, tuple[str, ...]] = {
    LifeArea.ROOTS: (
        "What inner healing needs your attention?",
        "What limiting belief are you ready to release?",
        "What childhood pattern are you becoming aware of?",
        "What emotional wound needs your compassion?",
        "What self-discovery moment did you have today?",
        "What inner wisdom are you connecting with?",
        "What personal boundary are you strengthening?",
    ),
    LifeArea.BLOOM: ("What moment lifted you today?",),
}

# Categories offered on the dashboard form, where no life-area is chosen.
GENERAL_CATEGORIES: tuple[tuple[Category, str], ...] = (
    (
        Category(name="Joy", emoji="🎈", description="A fun or lighthearted moment"),
        "Leaves",
    ),
    (
        Category(
            name="Progress", emoji="📚", description="A milestone or learning moment"
        ),
        "Stem",
    ),
    (
        Category(
            name="Insight",
            emoji="✨",
            description="A realization or meaningful thought",
        ),
        "Flower",
    ),
    (
        Category(
            name="Inner Work",
            emoji="🧠",
            description="A shadow / healing / vulnerable entry",
        ),
        "Roots",
    ),
    (Category(name="Share", emoji="🧺", description="A creation or offering"), ""),
)


def find_general_category(name: str) -> tuple[Category, str] | None:
    """Look up a dashboard category and the plant part it belongs to."""
    wanted = name.strip().lower()
    for category, part in GENERAL_CATEGORIES:
        if category.name.lower() == wanted:
            return category, part
    return None


class IdentityAccount(ValueObject):
    """Account returned by the identity service after sign-up or sign-in."""

    user_id: str  # Permanent account id, also the profile id
    email: str
    full_name: str | None = None  # From sign-up metadata, when provided
