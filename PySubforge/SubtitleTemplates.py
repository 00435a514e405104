from __future__ import annotations

from PySubforge.SubtitleEntry import SubtitleEntry

class SubtitleTemplate:
    """
    Starting point for a new subtitle document: seed entries plus the editing constraints that suit them
    """
    def __init__(self, id : str, name : str, description : str, max_chars_per_line : int, default_duration : float, icon : str = 'edit', entries : list[SubtitleEntry]|None = None) -> None:
        self.id = id
        self.name = name
        self.description = description
        self.max_chars_per_line = max_chars_per_line
        self.default_duration = default_duration
        self.icon = icon
        self.entries : list[SubtitleEntry] = entries or []

    def Instantiate(self) -> list[SubtitleEntry]:
        """
        Copy the seed entries with fresh identities, numbered by position
        """
        entries = [ entry.Copy(new_id=True) for entry in self.entries ]
        for number, entry in enumerate(entries, start=1):
            entry.number = number
        return entries

    def __repr__(self) -> str:
        return f"SubtitleTemplate(id={self.id!r}, entries={len(self.entries)})"

def _seed(entries : list[tuple[str, str, str]]) -> list[SubtitleEntry]:
    return [ SubtitleEntry.Construct(number, start, end, text) for number, (start, end, text) in enumerate(entries, start=1) ]

subtitle_templates : list[SubtitleTemplate] = [
    SubtitleTemplate(
        id='podcast',
        name='Podcast',
        description='Conversational captions with speaker names',
        max_chars_per_line=42,
        default_duration=4.0,
        icon='mic',
        entries=_seed([
            ('00:00:00,000', '00:00:04,000', 'Host: Welcome to the show.'),
            ('00:00:05,000', '00:00:09,000', 'Guest: Thanks for having me.'),
        ])),
    SubtitleTemplate(
        id='educational',
        name='Educational',
        description='Lecture and tutorial captions with longer reading time',
        max_chars_per_line=50,
        default_duration=5.0,
        icon='graduation-cap',
        entries=_seed([
            ("00:00:00,000", "00:00:05,000", "In this lesson we will cover the basics."),
            ("00:00:06,000", "00:00:11,000", "Let's start with an overview."),
        ])),
    SubtitleTemplate(
        id='social-media',
        name='Social Media',
        description='Short punchy captions for vertical video',
        max_chars_per_line=32,
        default_duration=2.0,
        icon='share-2',
        entries=_seed([
            ('00:00:00,000', '00:00:02,000', 'Wait for it...'),
            ('00:00:03,000', '00:00:05,000', 'Did you see that?'),
        ])),
    SubtitleTemplate(
        id='movie',
        name='Movie',
        description='Film dialogue following broadcast line lengths',
        max_chars_per_line=42,
        default_duration=3.0,
        icon='film',
        entries=_seed([
            ('00:00:01,000', '00:00:04,000', 'Where were you last night?'),
            ('00:00:05,000', '00:00:08,000', "That's none of your business."),
        ])),
    SubtitleTemplate(
        id='custom',
        name='Custom',
        description='Start from scratch',
        max_chars_per_line=50,
        default_duration=3.0,
        icon='edit'),
]

def GetTemplate(template_id : str|None) -> SubtitleTemplate|None:
    """
    Find a built-in template by id
    """
    return next((template for template in subtitle_templates if template.id == template_id), None)
