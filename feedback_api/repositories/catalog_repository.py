"""카탈로그 저장소 - 메모리 상의 불변 상품 목록"""
from typing import Iterable, Iterator, Optional

from feedback_api.core.exceptions import InvalidCatalogException
from feedback_api.schemas.product_schema import Product


# 초기 카탈로그 (보드게임 6종, 순서 유지)
SEED_PRODUCTS: tuple[Product, ...] = (
    Product(
        id=1,
        name="Cards Against Humanity",
        slug="cah",
        description="Cards Against Humanity is a party game for horrible people.",
    ),
    Product(
        id=2,
        name="Space Team",
        slug="space-team",
        description="A fast-paced, shouting card game where you work together as a team to repair a busted spaceship.",
    ),
    Product(
        id=3,
        name="Sonar",
        slug="sonar",
        description="You and your teammates control a state-of-the-art submarine and are trying to locate an enemy submarine in order to blow it out of the water before they can do the same to you.",
    ),
    Product(
        id=4,
        name="Codenames",
        slug="codenames",
        description="In Codenames, two teams compete to see who can make contact with all of their agents first.",
    ),
    Product(
        id=5,
        name="Dixit",
        slug="dixit",
        description="Every picture tells a story - but what story will your picture tell? Dixit is the lovingly illustrated game of creative guesswork, where your imagination unlocks the tale.",
    ),
    Product(
        id=6,
        name="Ticket To Ride",
        slug="ticket-to-ride",
        description="Ticket to Ride is a cross-country train adventure where players collect cards of various types of train cars that enable them to claim railway routes connecting cities in various countries around the world.",
    ),
)


class CatalogStore:
    """읽기 전용 상품 카탈로그

    생성 시 한 번만 채워지고 이후 변경되지 않으므로
    동시 요청 간 공유해도 잠금이 필요 없습니다.
    """

    def __init__(self, products: Iterable[Product]):
        """
        Args:
            products: 상품 목록 (순서 유지)

        Raises:
            InvalidCatalogException: slug가 비었거나 중복일 때
        """
        frozen = tuple(products)
        seen: set[str] = set()
        for product in frozen:
            if not product.slug:
                raise InvalidCatalogException(
                    "empty slug", details={"id": product.id}
                )
            if product.slug in seen:
                raise InvalidCatalogException(
                    f"duplicate slug '{product.slug}'", details={"slug": product.slug}
                )
            seen.add(product.slug)
        self._products = frozen

    def all(self) -> tuple[Product, ...]:
        """전체 상품 (저장 순서)"""
        return self._products

    def find_by_slug(self, slug: str) -> Optional[Product]:
        """
        slug로 상품 조회 (선형 탐색)

        Args:
            slug: 조회할 slug

        Returns:
            Product 또는 None (없음)
        """
        for product in self._products:
            if product.slug == slug:
                return product
        return None

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)


def default_catalog() -> CatalogStore:
    """초기 카탈로그로 CatalogStore 생성"""
    return CatalogStore(SEED_PRODUCTS)
