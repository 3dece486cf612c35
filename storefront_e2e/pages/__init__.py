from .base import BasePage
from .cart import MiniCartPage
from .pdp import ProductDetailPage, ProductDetails, product_url

__all__ = [
    "BasePage",
    "MiniCartPage",
    "ProductDetailPage",
    "ProductDetails",
    "product_url",
]
