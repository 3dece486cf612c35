from .base import BaseComponent
from .cart import CartDrawerComponent, CartItemComponent, CartSummaryComponent
from .pdp import (
    ColorSelectorComponent,
    ProductCTAComponent,
    ProductGalleryComponent,
    ProductInfoComponent,
    ReviewsComponent,
    SizeSelectorComponent,
)

__all__ = [
    "BaseComponent",
    "CartDrawerComponent",
    "CartItemComponent",
    "CartSummaryComponent",
    "ColorSelectorComponent",
    "ProductCTAComponent",
    "ProductGalleryComponent",
    "ProductInfoComponent",
    "ReviewsComponent",
    "SizeSelectorComponent",
]
