"""Product API routes for the storefront"""

from typing import Optional
from fastapi import APIRouter, HTTPException, Query, Depends

from ..core.context import get_catalog
from ..database.products import CatalogStore
from ..models.product import ProductListResponse, ProductDetailResponse

router = APIRouter(prefix="/api/products", tags=["Products"])


@router.get("", response_model=ProductListResponse)
async def list_products(
    query: Optional[str] = Query(None, description="Search in name and description"),
    category: Optional[str] = Query(None, description="Filter by category, 'All' for any"),
    catalog: CatalogStore = Depends(get_catalog),
):
    """Browse the catalog"""
    products = catalog.search(query=query, category=category)
    return ProductListResponse(
        products=products,
        total=len(products),
        categories=catalog.categories(),
    )


@router.get("/categories", response_model=list[str])
async def list_categories(catalog: CatalogStore = Depends(get_catalog)):
    """List all product categories"""
    return catalog.categories()


@router.get("/{product_id}", response_model=ProductDetailResponse)
async def get_product(
    product_id: str,
    catalog: CatalogStore = Depends(get_catalog),
):
    """Get a product by ID, with related products from the same category"""
    product = catalog.get(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return ProductDetailResponse(product=product, related=catalog.related(product))
