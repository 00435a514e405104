from __future__ import annotations

from enum import Enum

from PySubforge.Helpers.Color import Color
from PySubforge.SubtitleFormatRegistry import convert_entries, SubtitleFormat
from PySubforge.Subtitles import Subtitles

class SubtitleRenderType(str, Enum):
    HARD = 'hard'   # burned into the video frames
    SOFT = 'soft'   # embedded as a selectable track

class VideoProcessingOptions:
    """
    Style options handed to the external video processor along with SRT subtitle text.

    Nothing here processes video. The processor is responsible for interpreting these options,
    this class only renders them in the form it consumes.
    """
    BACKGROUND_ALPHA = 0xA0

    def __init__(self, subtitle_type : SubtitleRenderType|str = SubtitleRenderType.HARD, font_family : str = 'Arial', font_size : int = 24,
                 font_color : str = '#ffffff', background_color : str = '#000000', position : str = 'bottom', alignment : str = 'center') -> None:
        self.subtitle_type = SubtitleRenderType(subtitle_type)
        self.font_family = font_family
        self.font_size = font_size
        self.font_color = font_color
        self.background_color = background_color
        self.position = position
        self.alignment = alignment

    @property
    def burned_in(self) -> bool:
        return self.subtitle_type == SubtitleRenderType.HARD

    def force_style(self) -> str:
        """
        Style override string for burning subtitles in
        """
        primary = Color.from_hex(self.font_color).to_ass(alpha=0)
        back = Color.from_hex(self.background_color).to_ass(alpha=self.BACKGROUND_ALPHA)
        return f"FontSize={self.font_size},FontName={self.font_family},PrimaryColour={primary},BackColour={back},BorderStyle=4"

    def subtitle_content(self, subtitles : Subtitles) -> str:
        """
        The subtitle text to hand over, always SRT
        """
        with subtitles.lock:
            return convert_entries(subtitles.entries, SubtitleFormat.SRT)
