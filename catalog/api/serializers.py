"""
商品目录API序列化器。
负责查询参数的验证以及响应数据的序列化，响应字段使用驼峰命名。
"""
from rest_framework import serializers

from catalog.application.filtering import ALL_CATEGORIES, SortOption
from catalog.domain.value_objects import CategoryRef


class ProductSerializer(serializers.Serializer):
    """商品响应序列化器"""
    _id = serializers.CharField(source='id')
    productId = serializers.CharField(source='product_id')
    name = serializers.CharField()
    description = serializers.CharField()
    category = serializers.SerializerMethodField()
    brand = serializers.CharField()
    features = serializers.ListField(child=serializers.CharField())
    price = serializers.DecimalField(max_digits=12, decimal_places=2, coerce_to_string=False)
    originalPrice = serializers.DecimalField(
        source='original_price',
        max_digits=12,
        decimal_places=2,
        coerce_to_string=False,
        allow_null=True
    )
    images = serializers.ListField(child=serializers.CharField())
    rating = serializers.DecimalField(max_digits=2, decimal_places=1, coerce_to_string=False)
    reviews = serializers.IntegerField()
    inStock = serializers.BooleanField(source='in_stock')
    isActive = serializers.BooleanField(source='is_active')
    createdAt = serializers.DateTimeField(source='created_at', allow_null=True)
    updatedAt = serializers.DateTimeField(source='updated_at', allow_null=True)

    def get_category(self, obj):
        """分类引用展开为对象，纯文本原样返回，无法解析时为null"""
        if isinstance(obj.category, CategoryRef):
            return obj.category.to_dict()
        return obj.category or None


class CategorySerializer(serializers.Serializer):
    """分类响应序列化器"""
    _id = serializers.CharField(source='id')
    name = serializers.CharField()
    slug = serializers.CharField()
    image = serializers.CharField(allow_null=True)
    displayImage = serializers.CharField(source='display_image', allow_null=True)
    productCount = serializers.IntegerField(source='product_count')


class ProductListQuerySerializer(serializers.Serializer):
    """商品列表查询参数序列化器"""
    category = serializers.CharField(required=False, allow_blank=True)
    limit = serializers.IntegerField(required=False, min_value=1)


class DealsQuerySerializer(serializers.Serializer):
    """特惠页面查询参数序列化器"""
    category = serializers.CharField(required=False, default=ALL_CATEGORIES)
    minDiscount = serializers.IntegerField(required=False, default=10, min_value=0, max_value=100)
    maxDiscount = serializers.IntegerField(required=False, default=90, min_value=0, max_value=100)
    minRating = serializers.DecimalField(
        required=False,
        default=0,
        max_digits=2,
        decimal_places=1,
        min_value=0,
        max_value=5
    )
    inStockOnly = serializers.BooleanField(required=False, default=True)
    sort = serializers.ChoiceField(choices=SortOption.ALL, required=False, default=SortOption.DISCOUNT_HIGH)

    def validate(self, data):
        """验证折扣区间"""
        if data['minDiscount'] > data['maxDiscount']:
            raise serializers.ValidationError("minDiscount不能大于maxDiscount")
        return data
