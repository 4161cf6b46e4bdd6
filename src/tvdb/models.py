# src/tvdb/models.py

import re
from dataclasses import dataclass
from typing import Dict, List, NamedTuple, Optional, Tuple

# Language ids used by the service's xml api
KNOWN_LANGUAGES: Dict[str, Tuple[int, str]] = {
    'en': (7, 'English'),
    'sv': (8, 'Svenska'),
    'no': (9, 'Norsk'),
    'da': (10, 'Dansk'),
    'fi': (11, 'Suomeksi'),
    'nl': (13, 'Nederlands'),
    'de': (14, 'Deutsch'),
    'it': (15, 'Italiano'),
    'es': (16, 'Español'),
    'fr': (17, 'Français'),
    'pl': (18, 'Polski'),
    'hu': (19, 'Magyar'),
    'el': (20, 'Ελληνικά'),
    'tr': (21, 'Türkçe'),
    'ru': (22, 'русский язык'),
    'he': (24, 'עברית'),
    'ja': (25, '日本語'),
    'pt': (26, 'Português'),
    'zh': (27, '中文'),
    'cs': (28, 'čeština'),
    'sl': (30, 'Slovenski'),
    'hr': (31, 'Hrvatski'),
    'ko': (32, '한국어'),
}

class RgbColor(NamedTuple):
    r: int
    g: int
    b: int

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

class Resolution(NamedTuple):
    width: int
    height: int

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"

@dataclass
class TvdbLanguage:
    """Language tag attached to banners by the metadata service"""
    id: int
    name: str
    abbreviation: str

    @classmethod
    def universal(cls) -> "TvdbLanguage":
        """Placeholder for artwork that is not tied to a language"""
        return cls(id=0, name="All languages", abbreviation="all")

    @classmethod
    def from_abbreviation(cls, abbreviation: Optional[str]) -> "TvdbLanguage":
        if not abbreviation:
            return cls.universal()
        abbreviation = abbreviation.strip().lower()
        if abbreviation in KNOWN_LANGUAGES:
            language_id, name = KNOWN_LANGUAGES[abbreviation]
            return cls(id=language_id, name=name, abbreviation=abbreviation)
        return cls(id=0, name=abbreviation, abbreviation=abbreviation)

    def __str__(self) -> str:
        return self.abbreviation

def _clamp(value: int) -> int:
    return min(max(value, 0), 255)

def parse_colors(value: str) -> List[RgbColor]:
    """
    Parse the artist colors of a fan art entry.

    The service sends three colors separated by pipes, with leading and
    trailing pipes, each color as comma separated RGB: |r,g,b|r,g,b|r,g,b|
    The first color is the light accent, the second the dark accent and
    the third the neutral mid-tone.
    """
    colors = []
    if not value:
        return colors

    for segment in value.split('|'):
        segment = segment.strip()
        if not segment:
            continue
        parts = segment.split(',')
        if len(parts) != 3:
            raise ValueError(f"Invalid color segment: '{segment}'")
        try:
            r, g, b = (_clamp(int(p.strip())) for p in parts)
        except ValueError:
            raise ValueError(f"Invalid color segment: '{segment}'")
        colors.append(RgbColor(r, g, b))

    return colors

_RESOLUTION_PATTERN = re.compile(r'^\s*(\d+)\s*[xX]\s*(\d+)\s*$')

def parse_resolution(value: str) -> Resolution:
    """Parse a resolution such as '1920x1080'"""
    match = _RESOLUTION_PATTERN.match(value or '')
    if not match:
        raise ValueError(f"Invalid resolution: '{value}'")
    return Resolution(int(match.group(1)), int(match.group(2)))
