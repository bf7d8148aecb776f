from catalog.infrastructure.models.catalog_models import Category, Product, ProductFeature

__all__ = ['Category', 'Product', 'ProductFeature']
