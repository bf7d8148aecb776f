"""
商品目录后台管理。
商品和分类的创建、修改只通过后台进行，目录接口本身只读。
"""
from django.contrib import admin

from catalog.infrastructure.models.catalog_models import Category, Product, ProductFeature


class ProductFeatureInline(admin.TabularInline):
    model = ProductFeature
    extra = 1


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ('name', 'slug', 'created_at')
    search_fields = ('name', 'slug')
    prepopulated_fields = {'slug': ('name',)}


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ('product_id', 'name', 'category', 'price', 'original_price', 'in_stock', 'is_active')
    list_filter = ('is_active', 'in_stock', 'category')
    search_fields = ('product_id', 'name', 'brand')
    inlines = [ProductFeatureInline]
