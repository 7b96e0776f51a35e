from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

CATEGORIES = ('top', 'bottom', 'shoes', 'outfit')
DEFAULT_CATEGORY = 'outfit'

# cache key -> provenance tag shown to clients
SOURCE_NAMES = {
    'pinterest': 'Pinterest',
    'hollister': 'Hollister',
    'hm': 'H&M',
}

MAX_TITLE_LENGTH = 100
PLACEHOLDER_MARKER = 'placeholder'


@dataclass
class OutfitRecord:
    """A single trending outfit or clothing item scraped from (or bundled for) a source"""
    title: str
    image_url: str
    price: Optional[str]
    category: str
    source: str
    link: str

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['imageUrl'] = data.pop('image_url')
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'OutfitRecord':
        return cls(
            title=data.get('title', ''),
            image_url=data.get('imageUrl') or data.get('image_url', ''),
            price=data.get('price'),
            category=data.get('category') or DEFAULT_CATEGORY,
            source=data.get('source', ''),
            link=data.get('link', ''),
        )

    def __repr__(self):
        return f'<OutfitRecord {self.source}: {self.title}>'


def is_placeholder_image(image_url: Optional[str]) -> bool:
    """True when the URL is empty or points at a lazy-load placeholder"""
    return not image_url or PLACEHOLDER_MARKER in image_url


def clean_title(title: Optional[str]) -> str:
    """Collapse whitespace and bound the title length"""
    if not title:
        return ''
    return ' '.join(title.split())[:MAX_TITLE_LENGTH]
