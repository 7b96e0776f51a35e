"""
Bundled trending outfits served when a source can't be scraped and nothing is cached
"""
from typing import Dict, List

from models import OutfitRecord


def _pin(title, image_url, category='outfit'):
    return OutfitRecord(title=title, image_url=image_url, price=None, category=category,
                        source='Pinterest', link='https://pinterest.com')


SAMPLE_PINTEREST_DATA = [
    _pin("Minimalist Beige Streetwear Outfit",
         "https://images.unsplash.com/photo-1515886657613-9f3515b0c78f?w=400&h=600&fit=crop"),
    _pin("Dark Academia Fall Outfit",
         "https://images.unsplash.com/photo-1490114538077-0a7f8cb49891?w=400&h=600&fit=crop"),
    _pin("Casual Summer Street Style",
         "https://images.unsplash.com/photo-1539533018447-63fcce2678e3?w=400&h=600&fit=crop"),
    _pin("Urban Oversized Hoodie",
         "https://images.unsplash.com/photo-1556821840-3a63f95609a7?w=400&h=600&fit=crop", 'top'),
    _pin("Korean Fashion Layered Look",
         "https://images.unsplash.com/photo-1483985988355-763728e1935b?w=400&h=600&fit=crop"),
    _pin("Classic Denim Jacket Style",
         "https://images.unsplash.com/photo-1551028719-00167b16eac5?w=400&h=600&fit=crop", 'top'),
    _pin("Monochrome Black Outfit",
         "https://images.unsplash.com/photo-1496747611176-843222e1e57c?w=400&h=600&fit=crop"),
    _pin("Preppy Casual Look",
         "https://images.unsplash.com/photo-1479064555552-3ef4979f8908?w=400&h=600&fit=crop"),
    _pin("Vintage Leather Jacket",
         "https://images.unsplash.com/photo-1520975867597-0af37a22e31e?w=400&h=600&fit=crop", 'top'),
    _pin("Sporty Athleisure Outfit",
         "https://images.unsplash.com/photo-1503342217505-b0a15ec3261c?w=400&h=600&fit=crop"),
]

SAMPLE_HOLLISTER_DATA = [
    OutfitRecord(title, image_url, price, category, 'Hollister', 'https://www.hollisterco.com')
    for title, image_url, price, category in [
        ("Hollister Muscle Fit Crew Tee",
         "https://img.hollisterco.com/is/image/anf/KIC_323-4248-0406-900_prod1", "$19.95", 'top'),
        ("Hollister Epic Flex Skinny Jeans",
         "https://img.hollisterco.com/is/image/anf/KIC_331-4248-0900-278_prod1", "$49.95", 'bottom'),
        ("Hollister Lightweight Puffer Jacket",
         "https://img.hollisterco.com/is/image/anf/KIC_333-4248-0900-900_prod1", "$89.95", 'top'),
        ("Hollister Graphic Logo Hoodie",
         "https://img.hollisterco.com/is/image/anf/KIC_322-4248-0520-200_prod1", "$39.95", 'top'),
        ("Hollister Athletic Skinny Chinos",
         "https://img.hollisterco.com/is/image/anf/KIC_330-4248-0900-229_prod1", "$44.95", 'bottom'),
    ]
]

SAMPLE_HM_DATA = [
    OutfitRecord(title, image_url, price, category, 'H&M', 'https://www2.hm.com')
    for title, image_url, price, category in [
        ("H&M Relaxed Fit Cotton T-shirt",
         "https://image.hm.com/assets/hm/12/34/123456789abcdef123456789abcdef12.jpg", "$9.99", 'top'),
        ("H&M Slim Fit Chinos",
         "https://image.hm.com/assets/hm/ab/cd/abcdef123456789abcdef123456789ab.jpg", "$24.99", 'bottom'),
        ("H&M Denim Jacket",
         "https://image.hm.com/assets/hm/98/76/987654321fedcba987654321fedcba98.jpg", "$39.99", 'top'),
        ("H&M Oversized Hoodie",
         "https://image.hm.com/assets/hm/11/22/112233445566778899aabbccddeeff11.jpg", "$29.99", 'top'),
        ("H&M Tapered Fit Joggers",
         "https://image.hm.com/assets/hm/33/44/334455667788990011223344556677aa.jpg", "$19.99", 'bottom'),
    ]
]

_SAMPLES: Dict[str, List[OutfitRecord]] = {
    'pinterest': SAMPLE_PINTEREST_DATA,
    'hollister': SAMPLE_HOLLISTER_DATA,
    'hm': SAMPLE_HM_DATA,
}


def get_sample_data(site_key: str) -> List[OutfitRecord]:
    """Copy of the bundled sample list for a source (empty for unknown sources)"""
    return list(_SAMPLES.get(site_key, []))


def get_all_sample_data() -> Dict[str, List[OutfitRecord]]:
    return {site_key: list(records) for site_key, records in _SAMPLES.items()}
