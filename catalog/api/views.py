"""
商品目录API视图。
提供只读的RESTful API接口，处理HTTP请求并调用应用服务。
"""
import logging
from decimal import Decimal

from core.domain.exceptions import RepositoryException, ValidationException
from core.infrastructure.api_view import ApiBaseView
from core.infrastructure.exception_handler import detail_to_message
from catalog.application import (
    CatalogApplicationService,
    FilterConfig,
    FilterMode,
    # 查询
    SearchProductsQuery,
    ListProductsQuery,
    GetDealsQuery,
)
from catalog.api.serializers import (
    # 请求序列化器
    ProductListQuerySerializer,
    DealsQuerySerializer,
    # 响应序列化器
    ProductSerializer,
    CategorySerializer,
)

logger = logging.getLogger(__name__)


def get_catalog_service() -> CatalogApplicationService:
    """获取商品目录应用服务实例"""
    from catalog.infrastructure.factory import CatalogInfrastructureFactory

    factory = CatalogInfrastructureFactory()
    return CatalogApplicationService(
        product_repository=factory.create_product_repository(),
        category_repository=factory.create_category_repository()
    )


class ProductSearchView(ApiBaseView):
    """商品搜索接口"""

    def get(self, request):
        """按关键词搜索上架商品"""
        query = SearchProductsQuery(keyword=request.query_params.get('q'))

        try:
            products = get_catalog_service().search_products(query)
            return self.success_response(ProductSerializer(products, many=True).data)
        except ValidationException as e:
            return self.invalid_request_response(str(e))
        except RepositoryException as e:
            logger.error(f"搜索商品失败: {str(e)}")
            return self.internal_error_response()


class CategoryListView(ApiBaseView):
    """分类列表接口"""

    def get(self, request):
        """获取包含商品的分类"""
        try:
            categories = get_catalog_service().list_categories()
            return self.success_response(CategorySerializer(categories, many=True).data)
        except RepositoryException as e:
            logger.error(f"获取分类列表失败: {str(e)}")
            return self.internal_error_response()


class ProductListView(ApiBaseView):
    """商品列表接口"""

    def get(self, request):
        """获取上架商品列表，可按分类别名过滤"""
        serializer = ProductListQuerySerializer(data=request.query_params.dict())
        if not serializer.is_valid():
            return self.invalid_request_response(detail_to_message(serializer.errors))

        params = serializer.validated_data
        query = ListProductsQuery(
            category_slug=params.get('category'),
            limit=params.get('limit')
        )

        try:
            products = get_catalog_service().list_products(query)
            return self.success_response(ProductSerializer(products, many=True).data)
        except RepositoryException as e:
            logger.error(f"获取商品列表失败: {str(e)}")
            return self.internal_error_response()


class DealsView(ApiBaseView):
    """特惠页面接口"""

    def get(self, request):
        """获取筛选后的特惠商品、分类选项和倒计时"""
        serializer = DealsQuerySerializer(data=request.query_params.dict())
        if not serializer.is_valid():
            return self.invalid_request_response(detail_to_message(serializer.errors))

        params = serializer.validated_data
        try:
            filters = FilterConfig(
                mode=FilterMode.DEALS,
                category=params['category'],
                value_range=(Decimal(params['minDiscount']), Decimal(params['maxDiscount'])),
                min_rating=Decimal(str(params['minRating'])),
                in_stock_only=params['inStockOnly'],
                sort_by=params['sort']
            )
            page = get_catalog_service().get_deals(GetDealsQuery(filters=filters))
        except ValidationException as e:
            return self.invalid_request_response(str(e))
        except RepositoryException as e:
            logger.error(f"获取特惠商品失败: {str(e)}")
            return self.internal_error_response()

        return self.success_response({
            'items': ProductSerializer(page.items, many=True).data,
            'categories': page.categories,
            'totalDeals': page.total_deals,
            'countdown': page.countdown.to_dict(),
            'filters': page.filters,
        })
