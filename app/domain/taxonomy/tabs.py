import enum

class Tab(str, enum.Enum):
    BLOGS = "blogs"
    NOTES = "notes"
    PROBLEMS = "problems"

    @classmethod
    def _missing_(cls, value):
        # la UI original llamaba "leetcode" a la pestaña de problemas
        if isinstance(value, str):
            v = value.strip().lower()
            if v == "leetcode":
                return cls.PROBLEMS
            for member in cls:
                if member.value == v:
                    return member
        return None

    @property
    def field(self) -> str:
        """Campo de PageContent que muestra esta pestaña."""
        return self.value

class TabbedView:
    """Pestaña activa de la página de topic. Vive lo que dura la vista."""

    initial = Tab.BLOGS

    def __init__(self):
        self.active = self.initial

    def select(self, tab) -> Tab:
        self.active = Tab(tab)
        return self.active

    def visible(self, content) -> list:
        return content.for_tab(self.active)

    def __repr__(self) -> str:
        return f"TabbedView(active={self.active.value!r})"
