from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from app.api.deps import get_product_service
from app.core.security import get_current_admin
from app.db.models import Product, User
from app.schemas.product import Message, ProductPage, ProductUpdate
from app.services.product_svc import ProductService

router = APIRouter(tags=["products"], prefix="/products")


@router.get("", response_model=ProductPage)
async def list_products(
    keyword: Optional[str] = None,
    page_number: Optional[str] = Query(None, alias="pageNumber"),
    service: ProductService = Depends(get_product_service),
):
    return await service.list_products(keyword=keyword, page=page_number)


# registered before /{product_id} so "top" is not taken for an id
@router.get("/top", response_model=List[Product])
async def get_top_products(service: ProductService = Depends(get_product_service)):
    return await service.get_top_products()


@router.get("/{product_id}", response_model=Product)
async def get_product(product_id: str, service: ProductService = Depends(get_product_service)):
    return await service.get_product_by_id(product_id)


@router.post("", response_model=Product, status_code=status.HTTP_201_CREATED)
async def create_product(
    current_user: User = Depends(get_current_admin),
    service: ProductService = Depends(get_product_service),
):
    return await service.create_product(current_user.id)


@router.put("/{product_id}", response_model=Product)
async def update_product(
    product_id: str,
    product_update: ProductUpdate,
    current_user: User = Depends(get_current_admin),
    service: ProductService = Depends(get_product_service),
):
    return await service.update_product(product_id, product_update)


@router.delete("/{product_id}", response_model=Message)
async def delete_product(
    product_id: str,
    current_user: User = Depends(get_current_admin),
    service: ProductService = Depends(get_product_service),
):
    return await service.delete_product(product_id)
