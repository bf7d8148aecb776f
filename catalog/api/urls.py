"""
商品目录API URL配置。
定义只读接口的路由映射。
"""
from django.urls import path
from catalog.api import views

# API URL模式
urlpatterns = [
    path('search', views.ProductSearchView.as_view(), name='product-search'),
    path('categories', views.CategoryListView.as_view(), name='category-list'),
    path('products', views.ProductListView.as_view(), name='product-list'),
    path('deals', views.DealsView.as_view(), name='deals'),
]
