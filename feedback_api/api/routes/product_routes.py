"""Product Routes

- GET  /products                  : 카탈로그 전체 조회
- POST /products/{slug}/feedback  : 피드백 접수 (mock, 저장하지 않음)
"""

from fastapi import APIRouter, Depends, Response

from feedback_api.api.dependencies import get_catalog, get_settings
from feedback_api.core.config import Settings
from feedback_api.core.exceptions import ProductNotFoundException, SerializationException
from feedback_api.core.logging import logger
from feedback_api.repositories.catalog_repository import CatalogStore
from feedback_api.schemas.product_schema import serialize_product, serialize_products

router = APIRouter(tags=["products"])

JSON_MEDIA_TYPE = "application/json"

# 기존 클라이언트 호환용 응답 본문 (JSON이 아님에 주의)
PRODUCT_NOT_FOUND_BODY = "Product Not Found"


@router.get("/products")
async def list_products(catalog: CatalogStore = Depends(get_catalog)) -> Response:
    """상품 목록 조회

    카탈로그가 불변이므로 반복 호출 시 응답 바이트가 동일합니다.
    """
    try:
        payload = serialize_products(catalog.all())
    except SerializationException as e:
        # 고정 데이터에서는 발생하지 않음. 발생 시 빈 본문으로 응답
        logger.error(f"[API] {e}")
        payload = b""

    return Response(content=payload, media_type=JSON_MEDIA_TYPE)


@router.post("/products/{slug}/feedback")
async def add_feedback(
    slug: str,
    catalog: CatalogStore = Depends(get_catalog),
    settings: Settings = Depends(get_settings),
) -> Response:
    """피드백 접수 API (mock)

    요청 본문은 읽지 않습니다. slug가 카탈로그에 있으면 해당 상품을 그대로 돌려줍니다.

    Flow:
        1. slug로 카탈로그 조회
        2. 있으면 상품 JSON 반환
        3. 없으면
           - 기본: 200 + "Product Not Found" (Content-Type은 application/json 유지)
           - strict 모드: ProductNotFoundException → 404 JSON 에러
    """
    product = catalog.find_by_slug(slug)

    if product is None:
        logger.info(f"[API] Feedback for unknown product: slug={slug}")
        if settings.feedback_strict_not_found:
            raise ProductNotFoundException(slug)
        return Response(content=PRODUCT_NOT_FOUND_BODY, media_type=JSON_MEDIA_TYPE)

    logger.info(f"[API] Feedback received: slug={slug} (id={product.id})")

    try:
        payload = serialize_product(product)
    except SerializationException as e:
        logger.error(f"[API] {e}")
        payload = b""

    return Response(content=payload, media_type=JSON_MEDIA_TYPE)
