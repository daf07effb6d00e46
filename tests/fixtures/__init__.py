"""테스트 자산(데이터) 레이어

규칙:
- 로직 없음 (단순 dict/list/primitive)
- 앱 의존 없음
"""

from .products import EXPECTED_PRODUCTS, SEED_SLUGS
from .assets import INDEX_HTML, STYLE_CSS

__all__ = [
    "EXPECTED_PRODUCTS",
    "SEED_SLUGS",
    "INDEX_HTML",
    "STYLE_CSS",
]
