"""Pydantic 스키마 정의"""
from typing import Sequence

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator
from pydantic_core import PydanticSerializationError

from feedback_api.core.exceptions import SerializationException


class Product(BaseModel):
    """상품 (보드게임) - 불변 값 객체

    JSON 키는 대문자로 시작합니다: {"ID", "Name", "Slug", "Description"}
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(..., alias="ID", description="상품 고유 ID")
    name: str = Field(..., alias="Name", description="표시 이름")
    slug: str = Field(..., alias="Slug", description="URL-safe 조회 키")
    description: str = Field(..., alias="Description", description="상품 설명")

    @field_validator("slug")
    @classmethod
    def validate_slug(cls, v: str) -> str:
        """slug 검증: 빈 값 금지"""
        if not v or not v.strip():
            raise ValueError("slug must not be empty")
        return v


_product_list_adapter = TypeAdapter(tuple[Product, ...])


def serialize_product(product: Product) -> bytes:
    """상품 1개를 JSON bytes로 직렬화"""
    try:
        return product.model_dump_json(by_alias=True).encode("utf-8")
    except PydanticSerializationError as e:
        raise SerializationException(str(e), details={"slug": product.slug})


def serialize_products(products: Sequence[Product]) -> bytes:
    """상품 목록을 JSON 배열 bytes로 직렬화 (저장 순서 유지)"""
    try:
        return _product_list_adapter.dump_json(tuple(products), by_alias=True)
    except PydanticSerializationError as e:
        raise SerializationException(str(e), details={"count": len(products)})
